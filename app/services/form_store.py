"""
Form repository.

Forms are kept in id order of last save: saving an existing form replaces it
and moves it to the end of the listing. Responses are only ever appended.
"""
import abc
import logging
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config.settings import get_settings
from app.core.exceptions import FormNotFoundError
from app.db.session import SessionLocal
from app.models.form import FormRecord, FormResponseRecord
from app.schemas.form import Answer, Form, FormResponse, Question
from app.services.form_builder import new_question
from app.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class FormStore(abc.ABC):
    """Storage interface used by the API; aggregation and export only see Form values"""

    @abc.abstractmethod
    def list_forms(self) -> List[Form]:
        ...

    @abc.abstractmethod
    def get_form(self, form_id: str) -> Optional[Form]:
        ...

    @abc.abstractmethod
    def save_form(self, form: Form) -> Form:
        """Insert ``form`` or replace the stored form with the same id"""

    @abc.abstractmethod
    def delete_form(self, form_id: str) -> bool:
        """Remove a form and its responses; False if it did not exist"""

    @abc.abstractmethod
    def append_response(self, form_id: str, response: FormResponse) -> FormResponse:
        """Record a response. Raises FormNotFoundError for unknown forms"""

    def create_form(self, title: str = "", questions: Optional[List[Question]] = None) -> Form:
        """Create and store a new form, starting with one blank text question"""
        form = Form(title=title, questions=questions or [new_question()])
        saved = self.save_form(form)
        logger.info(f"Created form {saved.id}")
        return saved

    def get_response(self, form_id: str, response_id: str) -> Optional[FormResponse]:
        form = self.get_form(form_id)
        if form is None:
            return None
        return next((r for r in form.responses if r.id == response_id), None)


class InMemoryFormStore(FormStore):
    def __init__(self):
        self._forms: Dict[str, Form] = {}

    def list_forms(self) -> List[Form]:
        return [form.model_copy(deep=True) for form in self._forms.values()]

    def get_form(self, form_id: str) -> Optional[Form]:
        form = self._forms.get(form_id)
        return form.model_copy(deep=True) if form is not None else None

    def save_form(self, form: Form) -> Form:
        self._forms.pop(form.id, None)
        self._forms[form.id] = form.model_copy(deep=True)
        return form.model_copy(deep=True)

    def delete_form(self, form_id: str) -> bool:
        return self._forms.pop(form_id, None) is not None

    def append_response(self, form_id: str, response: FormResponse) -> FormResponse:
        form = self._forms.get(form_id)
        if form is None:
            raise FormNotFoundError(form_id)
        form.responses.append(response)
        logger.info(f"Stored response {response.id} for form {form_id}")
        return response


class SqlFormStore(FormStore):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @staticmethod
    def _to_response(record: FormResponseRecord) -> FormResponse:
        return FormResponse(
            id=record.id,
            form_id=record.form_id,
            answers=[Answer.model_validate(answer) for answer in record.answers],
            submitted_at=ensure_utc(record.submitted_at),
        )

    @staticmethod
    def _to_response_record(response: FormResponse) -> FormResponseRecord:
        return FormResponseRecord(
            id=response.id,
            form_id=response.form_id,
            answers=[answer.to_json() for answer in response.answers],
            submitted_at=response.submitted_at,
        )

    def _to_form(self, record: FormRecord) -> Form:
        return Form(
            id=record.id,
            title=record.title,
            questions=[Question.model_validate(question) for question in record.questions],
            created_at=ensure_utc(record.created_at),
            responses=[self._to_response(response) for response in record.responses],
        )

    def list_forms(self) -> List[Form]:
        with self._session_factory() as db:
            records = db.query(FormRecord).order_by(FormRecord.position).all()
            return [self._to_form(record) for record in records]

    def get_form(self, form_id: str) -> Optional[Form]:
        with self._session_factory() as db:
            record = db.get(FormRecord, form_id)
            return self._to_form(record) if record is not None else None

    def save_form(self, form: Form) -> Form:
        with self._session_factory() as db:
            try:
                next_position = (db.query(func.max(FormRecord.position)).scalar() or 0) + 1
                record = db.get(FormRecord, form.id)
                if record is None:
                    record = FormRecord(id=form.id)
                    db.add(record)
                record.title = form.title
                record.created_at = form.created_at
                record.questions = [question.to_json() for question in form.questions]
                record.position = next_position

                # responses are immutable, so rows already stored are kept as is
                existing = {response.id: response for response in record.responses}
                record.responses = [
                    existing.get(response.id) or self._to_response_record(response)
                    for response in form.responses
                ]
                db.commit()
                db.refresh(record)
                return self._to_form(record)
            except Exception:
                db.rollback()
                raise

    def delete_form(self, form_id: str) -> bool:
        with self._session_factory() as db:
            try:
                record = db.get(FormRecord, form_id)
                if record is None:
                    return False
                db.delete(record)
                db.commit()
                return True
            except Exception:
                db.rollback()
                raise

    def append_response(self, form_id: str, response: FormResponse) -> FormResponse:
        with self._session_factory() as db:
            try:
                if db.get(FormRecord, form_id) is None:
                    raise FormNotFoundError(form_id)
                db.add(self._to_response_record(response))
                db.commit()
                logger.info(f"Stored response {response.id} for form {form_id}")
                return response
            except Exception:
                db.rollback()
                raise

    def get_response(self, form_id: str, response_id: str) -> Optional[FormResponse]:
        with self._session_factory() as db:
            record = (
                db.query(FormResponseRecord)
                .filter(FormResponseRecord.form_id == form_id, FormResponseRecord.id == response_id)
                .first()
            )
            return self._to_response(record) if record is not None else None


@lru_cache()
def get_form_store() -> FormStore:
    """Dependency returning the configured form store"""
    backend = get_settings().STORAGE_BACKEND
    if backend == "memory":
        return InMemoryFormStore()
    if backend == "sql":
        return SqlFormStore(SessionLocal)
    raise ValueError(f"Unknown storage backend: {backend}")
