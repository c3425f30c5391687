import json
import time
import logging
from typing import Any, Dict, Optional

import google.generativeai as genai

from config import (
    MOCK_LLM,
    GEMINI_API_KEY,
    GEMINI_MODEL,
)

logger = logging.getLogger(__name__)


# =========================================================
# ERRORS (each one is a single user-visible message)
# =========================================================
class GenerationError(Exception):
    default_message = "Lesson plan generation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NetworkOrServiceError(GenerationError):
    """The call itself failed: network, auth, quota, blocked response."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Error generating content: {cause}")


class EmptyResponseError(GenerationError):
    default_message = "No response text received."


class ParseError(GenerationError):
    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(f"Error parsing JSON response: {diagnostic}")


class ShapeError(GenerationError):
    default_message = "Response did not return an array of lesson plans."


# =========================================================
# MOCK BACKEND
# =========================================================
MOCK_RESPONSE = json.dumps([
    {"Duration": "10 min", "Guide": "[MOCK_LLM] Introduce the topic", "Remarks": ""},
    {"Duration": "30 min", "Guide": "[MOCK_LLM] Work through each sub-unit", "Remarks": "Mock response"},
])


# =========================================================
# GEMINI MODEL
# =========================================================
def _get_model(schema: Dict[str, Any]):
    genai.configure(api_key=GEMINI_API_KEY)
    return genai.GenerativeModel(
        GEMINI_MODEL,
        generation_config={
            "response_mime_type": "application/json",
            "response_schema": schema,
        },
    )


# =========================================================
# INTERNAL API CALL
# =========================================================
def _api_generate(prompt: str, schema: Dict[str, Any]) -> Optional[str]:
    """
    Call Gemini generate_content with a declared JSON response schema.
    """

    if not GEMINI_API_KEY:
        raise NetworkOrServiceError("GEMINI_API_KEY is not set")

    logger.info("[LLM] Sending request to model: %s", GEMINI_MODEL)
    start = time.time()

    # No local timeout and no retry: the call ends when the service ends it.
    # Transport, auth and quota failures surface as google.api_core errors;
    # a blocked or part-less candidate makes ``.text`` raise ValueError.
    try:
        response = _get_model(schema).generate_content(prompt)
        text = response.text
    except Exception as e:
        logger.error("[LLM ERROR] %s", e)
        raise NetworkOrServiceError(str(e)) from e

    elapsed = round(time.time() - start, 2)
    logger.info("[LLM] Response received in %s seconds", elapsed)

    return text


# =========================================================
# PUBLIC GENERATION ENTRY POINT
# =========================================================
def generate_json(prompt: str, schema: Dict[str, Any]) -> str:
    """
    Return the raw JSON text produced for ``prompt`` under ``schema``.

    Raises NetworkOrServiceError when the call fails and
    EmptyResponseError when it succeeds with no text.
    """

    if MOCK_LLM:
        text = MOCK_RESPONSE
    else:
        text = _api_generate(prompt, schema)

    if not text:
        logger.warning("[LLM] Empty response body")
        raise EmptyResponseError()

    if not isinstance(text, str):
        raise NetworkOrServiceError(
            f"unexpected response text type {type(text).__name__}"
        )

    return text
