from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List, Dict
import enum

from app.utils.helpers import generate_id, get_utc_now

class QuestionType(str, enum.Enum):
    TEXT = "text"
    MULTIPLE_CHOICE = "multiple-choice"

class CamelModel(BaseModel):
    """Base model using camelCase names on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

class Question(CamelModel):
    id: str = Field(default_factory=generate_id)
    text: str = ""
    type: QuestionType = QuestionType.TEXT
    options: Optional[List[str]] = None  # multiple-choice only

class Answer(CamelModel):
    question_id: str
    value: str

    class Config:
        frozen = True

class FormResponse(CamelModel):
    """One respondent's answers; never modified after submission"""
    id: str = Field(default_factory=generate_id)
    form_id: str
    answers: List[Answer] = []
    submitted_at: datetime = Field(default_factory=get_utc_now)

    class Config:
        frozen = True

class Form(CamelModel):
    id: str = Field(default_factory=generate_id)
    title: str = ""
    questions: List[Question] = []
    created_at: datetime = Field(default_factory=get_utc_now)
    responses: List[FormResponse] = []

class PublicForm(CamelModel):
    """Form as shown to respondents, without recorded responses"""
    id: str
    title: str
    questions: List[Question]

# Request bodies

class FormSaveRequest(CamelModel):
    title: str = ""
    questions: List[Question] = []

class PublicSubmission(CamelModel):
    answers: Dict[str, str] = {}  # question id -> value

# Statistics

class OptionStat(CamelModel):
    option: str
    count: int
    percentage: float

class QuestionStats(CamelModel):
    question_id: str
    question_text: str
    type: QuestionType
    total_responses: int
    options: List[OptionStat] = []

class FormStats(CamelModel):
    form_id: str
    title: str
    total_responses: int
    question_count: int
    first_submitted_at: Optional[datetime] = None
    questions: List[QuestionStats] = []

class FormSummary(CamelModel):
    id: str
    title: str
    created_at: datetime
    question_count: int
    response_count: int
    share_url: str
