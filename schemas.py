import json
from typing import Any, ClassVar, Dict, List, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LessonPlanRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    topic: str = Field(..., min_length=1)
    grade: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    sub_units: str = Field(..., min_length=1, alias="subUnits")


# =========================================================
# OUTPUT SHAPE DESCRIPTOR
# Declares the schema sent to the model AND reads rows back.
# =========================================================
class OutputField(NamedTuple):
    name: str
    attr: str
    description: str
    required: bool


LESSON_PLAN_FIELDS: Tuple[OutputField, ...] = (
    OutputField("Duration", "duration", "Estimated duration of the lesson", True),
    OutputField("Guide", "guide", "Guidance or instructions for the lesson", True),
    OutputField("Remarks", "remarks", "Additional remarks or notes", False),
)


def response_schema() -> Dict[str, Any]:
    """
    Render LESSON_PLAN_FIELDS in the Gemini responseSchema dialect.
    """
    properties = {
        f.name: {
            "type": "STRING",
            "description": f.description,
            "nullable": not f.required,
        }
        for f in LESSON_PLAN_FIELDS
    }

    return {
        "description": "Lesson plan details",
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": properties,
            "required": [f.name for f in LESSON_PLAN_FIELDS if f.required],
        },
    }


def _cell(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


class LessonPlanRow(BaseModel):
    duration: str
    guide: str
    remarks: str = ""

    @classmethod
    def from_item(cls, item: Any) -> "LessonPlanRow":
        # Lenient: missing or blank fields (required ones included) become "".
        if not isinstance(item, dict):
            item = {}
        return cls(**{f.attr: _cell(item.get(f.name)) for f in LESSON_PLAN_FIELDS})

    def cells(self) -> List[str]:
        return [getattr(self, f.attr) for f in LESSON_PLAN_FIELDS]


class LessonPlanTable(BaseModel):
    HEADER: ClassVar[Tuple[str, ...]] = tuple(f.name for f in LESSON_PLAN_FIELDS)

    rows: List[LessonPlanRow] = Field(default_factory=list)

    @property
    def header(self) -> List[str]:
        return list(self.HEADER)

    def as_rows(self) -> List[List[str]]:
        """Header row followed by one row per lesson segment, in service order."""
        return [self.header] + [r.cells() for r in self.rows]
