"""Per-question statistics over a form's recorded responses."""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from app.schemas.form import (
    Form,
    FormResponse,
    FormStats,
    OptionStat,
    Question,
    QuestionStats,
    QuestionType,
)

logger = logging.getLogger(__name__)


def get_answer_value(response: FormResponse, question_id: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value answered for ``question_id``, or ``default`` if absent"""
    for answer in response.answers:
        if answer.question_id == question_id:
            return answer.value
    return default


def percentage(count: int, total: int) -> float:
    """Share of ``total`` as a percentage rounded to one decimal place; 0 when total is 0"""
    if total == 0:
        return 0.0
    # half up on the exact binary value, so 1/16 shows 6.3 rather than 6.2
    return float(Decimal(count / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def aggregate(question: Question, responses: Sequence[FormResponse]) -> QuestionStats:
    """
    Tally answers to a single question.

    Multiple-choice questions get one count per declared option, in declared
    order. Responses without an answer, and values that are not a declared
    option (options edited after responses were recorded), are not counted.
    Text questions only report the total number of responses.
    """
    total = len(responses)
    option_stats = []

    if question.type == QuestionType.MULTIPLE_CHOICE:
        tally = {option: 0 for option in question.options or []}
        for response in responses:
            value = get_answer_value(response, question.id)
            if value is not None and value in tally:
                tally[value] += 1
        option_stats = [
            OptionStat(option=option, count=count, percentage=percentage(count, total))
            for option, count in tally.items()
        ]

    return QuestionStats(
        question_id=question.id,
        question_text=question.text,
        type=question.type,
        total_responses=total,
        options=option_stats,
    )


def summarize_form(form: Form) -> FormStats:
    """Aggregate every question of a form in declared order"""
    logger.debug(f"Summarizing form {form.id} with {len(form.responses)} responses")
    return FormStats(
        form_id=form.id,
        title=form.title,
        total_responses=len(form.responses),
        question_count=len(form.questions),
        first_submitted_at=form.responses[0].submitted_at if form.responses else None,
        questions=[aggregate(question, form.responses) for question in form.questions],
    )
