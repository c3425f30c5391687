"""Canned bodies and a recording stand-in for the google.generativeai module."""

import json


PHOTOSYNTHESIS_BODY = json.dumps([
    {"Duration": "10 min", "Guide": "Introduce topic"},
    {"Duration": "20 min", "Guide": "Explain light reactions", "Remarks": "Use diagram"},
])


class FakeResponse:
    """Mimics GenerateContentResponse: ``.text`` may raise like the SDK does."""

    def __init__(self, text=None, exc=None):
        self._text = text
        self._exc = exc

    @property
    def text(self):
        if self._exc is not None:
            raise self._exc
        return self._text


class _FakeModel:
    def __init__(self, owner):
        self._owner = owner

    def generate_content(self, prompt, **kwargs):
        self._owner.prompts.append(prompt)
        if self._owner.exc is not None:
            raise self._owner.exc
        return self._owner.response


class FakeGenAI:
    """Records configure/GenerativeModel/generate_content calls."""

    def __init__(self):
        self.api_keys = []
        self.models = []
        self.prompts = []
        self.response = FakeResponse("[]")
        self.exc = None

    def configure(self, api_key=None, **kwargs):
        self.api_keys.append(api_key)

    def GenerativeModel(self, model_name, generation_config=None, **kwargs):
        self.models.append({"model_name": model_name, "generation_config": generation_config})
        return _FakeModel(self)
