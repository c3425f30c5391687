import enum
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

import agents
from llm import GenerationError
from schemas import LessonPlanRequest, LessonPlanTable

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all fields."


def _text(value: Any) -> str:
    # JSON clients may send numbers, e.g. "grade": 7
    return "" if value is None else str(value)


class Phase(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class LessonPlanCollector:
    """
    Form state for one lesson plan submission.

    Idle -> Submitting -> (Success | Failed); the next submit starts over.
    State only changes in begin_submit, succeed and fail.
    """

    default_label = "Generate Table"
    busy_label = "Generating..."

    def __init__(self, topic: str = "", grade: str = "", subject: str = "", sub_units: str = ""):
        self.topic = topic
        self.grade = grade
        self.subject = subject
        self.sub_units = sub_units

        self.phase = Phase.IDLE
        self.error: Optional[str] = None
        self.table: Optional[LessonPlanTable] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "LessonPlanCollector":
        sub_units = data.get("subUnits")
        if sub_units is None:
            sub_units = data.get("sub_units")

        return cls(
            topic=_text(data.get("topic")),
            grade=_text(data.get("grade")),
            subject=_text(data.get("subject")),
            sub_units=_text(sub_units),
        )

    @property
    def busy(self) -> bool:
        return self.phase is Phase.SUBMITTING

    @property
    def button_label(self) -> str:
        return self.busy_label if self.busy else self.default_label

    # =====================================================
    # TRANSITIONS
    # =====================================================
    def begin_submit(self):
        if self.busy:
            raise RuntimeError("A lesson plan is already being generated")
        self.phase = Phase.SUBMITTING
        self.error = None
        self.table = None

    def succeed(self, table: LessonPlanTable):
        self._require_submitting()
        self.phase = Phase.SUCCESS
        self.table = table

    def fail(self, message: str):
        self._require_submitting()
        self.phase = Phase.FAILED
        self.error = message

    def _require_submitting(self):
        if not self.busy:
            raise RuntimeError(f"No submission in flight (phase={self.phase.value})")

    # =====================================================
    # SUBMIT
    # =====================================================
    def build_request(self) -> LessonPlanRequest:
        return LessonPlanRequest(
            topic=self.topic,
            grade=self.grade,
            subject=self.subject,
            sub_units=self.sub_units,
        )

    def submit(self, generate: Optional[Callable[[LessonPlanRequest], LessonPlanTable]] = None):
        generate = generate or agents.generate_lesson_plan

        self.begin_submit()

        try:
            request = self.build_request()
        except ValidationError:
            self.fail(MISSING_FIELDS_MESSAGE)
            return self

        try:
            table = generate(request)
        except GenerationError as e:
            logger.warning("[LESSON] Generation failed: %s", e.message)
            self.fail(e.message)
        else:
            self.succeed(table)

        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "busy": self.busy,
            "error": self.error,
            "table": self.table.as_rows() if self.table is not None else None,
        }
