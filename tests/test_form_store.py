import pytest

from app.core.exceptions import FormNotFoundError
from app.schemas.form import Form, Question, QuestionType
from app.services.form_store import InMemoryFormStore, get_form_store

from .conftest import make_response


def test_create_form_defaults(store):
    form = store.create_form()

    assert len(form.questions) == 1
    assert form.questions[0].type == QuestionType.TEXT
    assert form.questions[0].text == ""
    assert form.responses == []
    assert store.get_form(form.id) == form


def test_create_form_ids_are_unique(store):
    ids = {store.create_form(title=f"Form {i}").id for i in range(20)}
    assert len(ids) == 20


def test_save_form_replaces_and_moves_to_end(store):
    first = store.create_form(title="First")
    second = store.create_form(title="Second")

    store.save_form(first.model_copy(update={"title": "First (edited)"}))

    forms = store.list_forms()
    assert [f.id for f in forms] == [second.id, first.id]
    assert forms[-1].title == "First (edited)"


def test_save_form_keeps_responses(store, color_form):
    store.save_form(color_form)
    store.append_response(color_form.id, make_response(color_form.id, {"q1": "Blue"}, minutes=9))

    stored = store.get_form(color_form.id)
    store.save_form(stored.model_copy(update={"title": "Renamed"}))

    reloaded = store.get_form(color_form.id)
    assert reloaded.title == "Renamed"
    assert len(reloaded.responses) == 4
    assert [r.id for r in reloaded.responses] == [r.id for r in stored.responses]


def test_delete_form(store):
    form = store.create_form(title="Doomed")

    assert store.delete_form(form.id) is True
    assert store.get_form(form.id) is None
    assert store.delete_form(form.id) is False


def test_append_and_lookup_response(store, color_question):
    form = store.create_form(title="T", questions=[color_question])
    response = make_response(form.id, {"q1": "Red"})

    store.append_response(form.id, response)

    found = store.get_response(form.id, response.id)
    assert found is not None
    assert found.answers == response.answers
    assert found.submitted_at == response.submitted_at
    assert store.get_response(form.id, "nope") is None


def test_append_response_to_unknown_form(store):
    with pytest.raises(FormNotFoundError):
        store.append_response("missing", make_response("missing", {}))


def test_responses_keep_submission_order(store, color_question):
    form = store.create_form(title="T", questions=[color_question])
    responses = [make_response(form.id, {"q1": "Red"}, minutes=i) for i in range(3)]
    for response in responses:
        store.append_response(form.id, response)

    assert [r.id for r in store.get_form(form.id).responses] == [r.id for r in responses]


def test_returned_forms_are_copies(store):
    form = store.create_form(title="Original")

    fetched = store.get_form(form.id)
    fetched.title = "Changed locally"
    fetched.questions.append(Question(text="Extra"))

    stored = store.get_form(form.id)
    assert stored.title == "Original"
    assert len(stored.questions) == 1


def test_sql_store_round_trips_timestamps(sql_store, color_form):
    sql_store.save_form(color_form)

    reloaded = sql_store.get_form(color_form.id)
    assert reloaded.created_at == color_form.created_at
    assert reloaded.created_at.tzinfo is not None
    assert reloaded.questions == color_form.questions
    assert reloaded.responses == color_form.responses


def test_get_form_store_uses_memory_backend():
    assert isinstance(get_form_store(), InMemoryFormStore)


def test_stale_save_overwrites_appended_responses(store, color_question):
    form = store.create_form(title="T", questions=[color_question])
    stale = store.get_form(form.id)

    store.append_response(form.id, make_response(form.id, {"q1": "Red"}))
    assert len(store.get_form(form.id).responses) == 1

    # whole-form writes are last-writer-wins
    store.save_form(stale.model_copy(update={"title": "Edited"}))

    reloaded = store.get_form(form.id)
    assert reloaded.title == "Edited"
    assert reloaded.responses == []
