import json
import logging

from llm import generate_json, ParseError, ShapeError
from schemas import (
    LessonPlanRequest,
    LessonPlanRow,
    LessonPlanTable,
    response_schema,
)

logger = logging.getLogger(__name__)


# =========================================================
# PROMPT
# =========================================================
def build_prompt(request: LessonPlanRequest) -> str:
    return (
        "Generate a lesson plan table for the following: "
        f"Topic: {request.topic}, "
        f"Grade: {request.grade}, "
        f"Subject: {request.subject}, "
        f"Sub-units: {request.sub_units}. "
        "Provide Duration, Guide, and Remarks."
    )


# =========================================================
# RESPONSE → TABLE
# =========================================================
def parse_table(raw_text: str) -> LessonPlanTable:
    """
    Parse the model's JSON body into a LessonPlanTable.

    Invalid JSON raises ParseError (the raw body is logged, not shown),
    anything other than an array raises ShapeError. Array elements are
    never rejected: missing fields become empty strings.
    """
    try:
        lesson_plans = json.loads(raw_text)
    except json.JSONDecodeError as e:
        logger.error("[LESSON] Raw response text: %s", raw_text)
        raise ParseError(str(e)) from e

    if not isinstance(lesson_plans, list):
        logger.warning(
            "[LESSON] Expected an array, got %s", type(lesson_plans).__name__
        )
        raise ShapeError()

    return LessonPlanTable(rows=[LessonPlanRow.from_item(p) for p in lesson_plans])


# =========================================================
# LESSON PLAN GENERATOR
# =========================================================
def generate_lesson_plan(request: LessonPlanRequest) -> LessonPlanTable:
    prompt = build_prompt(request)
    raw_text = generate_json(prompt, schema=response_schema())

    table = parse_table(raw_text)
    logger.info("[LESSON] Generated %d rows for topic %r", len(table.rows), request.topic)

    return table
