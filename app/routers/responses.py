import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status
from fastapi.responses import JSONResponse

from app.utils.helpers import generate_id, get_utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/responses", tags=["responses"])

@router.post("")
async def submit_response(response_data: Any = Body(...)):
    """Check the required fields and echo the response back with generated fields. Nothing is stored."""
    try:
        if (
            not isinstance(response_data, dict)
            or not response_data.get("formId")
            or not isinstance(response_data.get("answers"), list)
        ):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid response data"
            )

        response = {
            "id": generate_id(),
            "formId": response_data["formId"],
            "answers": response_data["answers"],
            "submittedAt": get_utc_now().isoformat(),
        }
        return JSONResponse(status_code=201, content={"response": response})
    except HTTPException as he:
        raise he
    except Exception as e:
        logger.error(f"Failed to submit response: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit response"
        )
