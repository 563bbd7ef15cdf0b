import logging
from typing import List
from urllib.parse import quote

from app.core.exceptions import NoResponsesError
from app.schemas.form import Form
from app.services.aggregation import get_answer_value
from app.utils.helpers import format_local_datetime, sanitize_filename

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv"


def _format_row(cells: List[str]) -> str:
    # Cells are quoted but not escaped; embedded quotes/commas/newlines pass through.
    return ",".join(f'"{cell}"' for cell in cells)


def export_csv(form: Form) -> str:
    """
    Serialize a form's responses as CSV text.

    The first line is the header (response id, submission time, then each
    question's text); every response follows in recorded order. Questions a
    response has no answer for export as an empty cell.

    Raises:
        NoResponsesError: if the form has no responses
    """
    if not form.responses:
        raise NoResponsesError(form.id)

    header = ["Response ID", "Submitted At"] + [question.text for question in form.questions]
    rows = [header]
    for response in form.responses:
        row = [response.id, format_local_datetime(response.submitted_at)]
        for question in form.questions:
            row.append(get_answer_value(response, question.id, ""))
        rows.append(row)

    logger.info(f"Exported {len(form.responses)} responses for form {form.id}")
    return "\n".join(_format_row(row) for row in rows)


def export_filename(form: Form) -> str:
    """Download name for a form's CSV export"""
    return f"{sanitize_filename(form.title)}-responses.csv"


def content_disposition(form: Form) -> str:
    """
    Attachment header for the export download. Header values must be
    latin-1, so titles outside ASCII get an ASCII ``filename`` fallback plus
    an RFC 5987 ``filename*`` carrying the real name.
    """
    filename = export_filename(form)
    fallback = filename.encode("ascii", "ignore").decode("ascii").strip()
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
