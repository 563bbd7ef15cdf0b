import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from app.core.exceptions import FormValidationError, NoResponsesError
from app.schemas.form import Form, FormSaveRequest, FormSummary
from app.services.aggregation import summarize_form
from app.services.csv_export import CSV_MEDIA_TYPE, content_disposition, export_csv
from app.services.form_builder import normalize_question, share_url, validate_form_definition
from app.services.form_store import FormStore, get_form_store
from app.utils.helpers import paginate_results

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/forms", tags=["admin"])


def get_form_or_404(form_id: str, store: FormStore) -> Form:
    form = store.get_form(form_id)
    if form is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    return form


@router.get("")
async def list_forms(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    store: FormStore = Depends(get_form_store)
):
    summaries = [
        FormSummary(
            id=form.id,
            title=form.title,
            created_at=form.created_at,
            question_count=len(form.questions),
            response_count=len(form.responses),
            share_url=share_url(form.id),
        ).to_json()
        for form in store.list_forms()
    ]
    return paginate_results(summaries, page=page, page_size=page_size)


@router.post("")
async def create_form(
    form_data: Optional[FormSaveRequest] = None,
    store: FormStore = Depends(get_form_store)
):
    """Create a form; without questions it starts with a single blank text question"""
    form_data = form_data or FormSaveRequest()
    questions = [normalize_question(question) for question in form_data.questions]
    form = store.create_form(title=form_data.title, questions=questions)
    return JSONResponse(status_code=201, content={"form": form.to_json()})


@router.get("/{form_id}")
async def get_form(form_id: str, store: FormStore = Depends(get_form_store)):
    form = get_form_or_404(form_id, store)
    return {"form": form.to_json(), "shareUrl": share_url(form.id)}


@router.put("/{form_id}")
async def save_form(
    form_id: str,
    form_data: FormSaveRequest,
    store: FormStore = Depends(get_form_store)
):
    """Save the title and questions of a form, keeping its recorded responses"""
    form = get_form_or_404(form_id, store)
    questions = [normalize_question(question) for question in form_data.questions]

    try:
        validate_form_definition(form_data.title, questions)
    except FormValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    updated = form.model_copy(update={"title": form_data.title.strip(), "questions": questions})
    saved = store.save_form(updated)
    logger.info(f"Saved form {saved.id}")
    return {"form": saved.to_json()}


@router.delete("/{form_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_form(form_id: str, store: FormStore = Depends(get_form_store)):
    if not store.delete_form(form_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    logger.info(f"Deleted form {form_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{form_id}/stats")
async def get_form_stats(form_id: str, store: FormStore = Depends(get_form_store)):
    form = get_form_or_404(form_id, store)
    return summarize_form(form).to_json()


@router.get("/{form_id}/export")
async def export_responses(form_id: str, store: FormStore = Depends(get_form_store)):
    form = get_form_or_404(form_id, store)
    try:
        content = export_csv(form)
    except NoResponsesError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(form)},
    )
