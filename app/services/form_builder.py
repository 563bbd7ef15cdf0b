"""Rules applied when admins save forms and respondents submit them."""
from typing import Dict, List

from app.core.config.settings import get_settings
from app.core.exceptions import FormValidationError
from app.schemas.form import Answer, Form, FormResponse, Question, QuestionType

DEFAULT_CHOICE_OPTIONS = ["Option 1", "Option 2", "Option 3", "Option 4"]
MIN_CHOICE_OPTIONS = 2


def new_question() -> Question:
    """Blank text question with a fresh id"""
    return Question(text="", type=QuestionType.TEXT)


def normalize_question(question: Question) -> Question:
    """
    Switching to multiple-choice seeds the default options; text questions
    never carry options.
    """
    if question.type == QuestionType.MULTIPLE_CHOICE:
        if not question.options:
            return question.model_copy(update={"options": list(DEFAULT_CHOICE_OPTIONS)})
        return question
    if question.options is not None:
        return question.model_copy(update={"options": None})
    return question


def validate_form_definition(title: str, questions: List[Question]) -> None:
    """Raise FormValidationError if the title or any question is incomplete"""
    if not title or not title.strip():
        raise FormValidationError("Please enter a form title")

    if any(not question.text or not question.text.strip() for question in questions):
        raise FormValidationError("Please fill in all question texts")

    for question in questions:
        if question.type == QuestionType.MULTIPLE_CHOICE and len(question.options or []) < MIN_CHOICE_OPTIONS:
            raise FormValidationError(
                f"Multiple-choice questions need at least {MIN_CHOICE_OPTIONS} options"
            )


def build_submission(form: Form, answers_by_question: Dict[str, str]) -> FormResponse:
    """
    Turn a respondent's question id -> value mapping into a response.

    Every question of the form must have a non-blank answer. Values are
    trimmed and answers to ids outside the form are ignored.
    """
    unanswered = [
        question for question in form.questions
        if not answers_by_question.get(question.id, "").strip()
    ]
    if unanswered:
        raise FormValidationError("Please answer all questions before submitting.")

    answers = [
        Answer(question_id=question.id, value=answers_by_question[question.id].strip())
        for question in form.questions
    ]
    return FormResponse(form_id=form.id, answers=answers)


def share_url(form_id: str) -> str:
    """Public link respondents use to open a form"""
    return f"{get_settings().PUBLIC_BASE_URL.rstrip('/')}/form/{form_id}"
