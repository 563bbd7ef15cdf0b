import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.core.exceptions import FormNotFoundError, FormValidationError
from app.schemas.form import PublicForm, PublicSubmission
from app.services.form_builder import build_submission
from app.services.form_store import FormStore, get_form_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/public/forms", tags=["public"])


@router.get("/{form_id}")
async def get_public_form(form_id: str, store: FormStore = Depends(get_form_store)):
    form = store.get_form(form_id)
    if form is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    return PublicForm(id=form.id, title=form.title, questions=form.questions).to_json()


@router.post("/{form_id}/responses")
async def submit_public_response(
    form_id: str,
    submission: PublicSubmission,
    store: FormStore = Depends(get_form_store)
):
    try:
        form = store.get_form(form_id)
        if form is None:
            raise FormNotFoundError(form_id)

        response = build_submission(form, submission.answers)
        store.append_response(form_id, response)
        return JSONResponse(status_code=201, content={"response": response.to_json()})
    except FormNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    except FormValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Failed to store response for form {form_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while submitting your response. Please try again."
        )
