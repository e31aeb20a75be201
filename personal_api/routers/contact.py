# personal_api/routers/contact.py
import logging
import uuid
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from personal_api.config import Settings
from personal_api.deps import get_email_transport, get_settings
from personal_api.schemas import ContactIn, ContactOut
from personal_api.services.email import EmailError, send_contact_email
from personal_api.services.validation import Invalid, validate_contact
from personal_api.utils.sanitize import sanitize_input, sanitize_multiline

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])

MSG_SENT = "Thank you for your message. We'll get back to you soon!"
MSG_NOT_NOTIFIED = (
    "Your message was received, but there was an issue sending the notification email. "
    "Please try again or contact us directly."
)


def _bad_body(errors: list) -> JSONResponse:
    return JSONResponse(
        {"success": False, "message": "Invalid request body", "errors": errors},
        status_code=400,
    )


def _structural_errors(exc: ValidationError) -> list[dict]:
    # keep it JSON-safe: pydantic's ctx/input may hold arbitrary objects
    return [
        {"loc": [str(p) for p in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


@router.post("/contact", response_model=ContactOut)
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_email_transport),
):
    # --- Parse body (JSON only) ---
    try:
        raw = await request.json()
    except ValueError as e:
        log.info("Rejected contact body: malformed JSON (%s)", e)
        return _bad_body([{"loc": ["body"], "msg": "Malformed JSON", "type": "json_invalid"}])

    try:
        form = ContactIn.model_validate(raw)
    except ValidationError as e:
        return _bad_body(_structural_errors(e))

    # --- Field limits ---
    result = validate_contact(form)
    if isinstance(result, Invalid):
        return JSONResponse(
            {"success": False, "message": "Validation failed", "errors": result.errors},
            status_code=400,
        )

    clean = ContactIn(
        email=sanitize_input(form.email),
        first_name=sanitize_input(form.first_name),
        last_name=sanitize_input(form.last_name),
        phone_number=sanitize_input(form.phone_number),
        message=sanitize_multiline(form.message),
    )
    contact_id = str(uuid.uuid4())

    # the log line is the record of the submission
    log.info(
        "Contact form submitted: %s %s <%s> - ID: %s",
        clean.first_name, clean.last_name, clean.email, contact_id,
    )

    try:
        await send_contact_email(clean, contact_id, settings, transport=transport)
    except EmailError as e:
        log.error("Failed to send contact form email for ID %s: %s", contact_id, e)
        out = ContactOut(success=False, message=MSG_NOT_NOTIFIED, id=contact_id)
        return JSONResponse(out.model_dump(), status_code=500)

    log.info("Contact form email sent successfully for ID: %s", contact_id)
    return ContactOut(success=True, message=MSG_SENT, id=contact_id)
