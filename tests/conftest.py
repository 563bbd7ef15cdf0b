import os
import tempfile

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "feedback-forms-test-logs"))
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.init_db import init_db
from app.main import app
from app.schemas.form import Answer, Form, FormResponse, Question, QuestionType
from app.services.form_store import InMemoryFormStore, SqlFormStore, get_form_store


def make_response(form_id, values, minutes=0):
    """Build a response answering question ids with the given values"""
    return FormResponse(
        form_id=form_id,
        answers=[Answer(question_id=qid, value=value) for qid, value in values.items()],
        submitted_at=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc) + timedelta(minutes=minutes),
    )


@pytest.fixture
def color_question():
    return Question(id="q1", text="Color?", type=QuestionType.MULTIPLE_CHOICE, options=["Red", "Blue"])


@pytest.fixture
def color_form(color_question):
    form = Form(id="form-1", title="T", questions=[color_question])
    form.responses = [
        make_response(form.id, {"q1": "Red"}, minutes=0),
        make_response(form.id, {"q1": "Red"}, minutes=1),
        make_response(form.id, {"q1": "Blue"}, minutes=2),
    ]
    return form


@pytest.fixture
def memory_store():
    return InMemoryFormStore()


@pytest.fixture
def sql_store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield SqlFormStore(session_factory)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(memory_store):
    app.dependency_overrides[get_form_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()
