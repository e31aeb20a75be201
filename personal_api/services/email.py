# personal_api/services/email.py
from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from personal_api.config import Settings
from personal_api.schemas import BrevoEmail, BrevoRecipient, BrevoSender, ContactIn

log = logging.getLogger(__name__)

RECIPIENT_DISPLAY_NAME = "Contact Form"


class EmailError(Exception):
    """Notification email could not be sent."""


class EmailConfigError(EmailError):
    """A required provider setting is missing; nothing was sent."""


class EmailSendError(EmailError):
    """Provider answered non-2xx, or the request never completed."""


@dataclass(frozen=True)
class BrevoConfig:
    api_key: str
    sender_email: str
    sender_name: str
    recipient_email: str
    api_url: str
    dry_run: bool = False


def resolve_brevo_config(settings: Settings) -> BrevoConfig:
    missing = settings.missing_email_settings()
    if missing:
        raise EmailConfigError(f"{missing[0]} environment variable not set")
    return BrevoConfig(
        api_key=settings.BREVO_API_KEY,
        sender_email=settings.BREVO_SENDER_EMAIL,
        sender_name=settings.BREVO_SENDER_NAME,
        recipient_email=settings.CONTACT_RECIPIENT_EMAIL or settings.BREVO_SENDER_EMAIL,
        api_url=settings.BREVO_API_URL,
        dry_run=settings.EMAIL_DRY_RUN,
    )


# ---- message building --------------------------------------------------------


def _contact_subject(form: ContactIn) -> str:
    return f"New Contact Form Submission from {form.first_name} {form.last_name}"


def _contact_html(form: ContactIn, contact_id: str) -> str:
    e = html.escape
    message = e(form.message).replace("\n", "<br>")
    return f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Contact ID:</strong> {e(contact_id)}</p>
        <p><strong>Name:</strong> {e(form.first_name)} {e(form.last_name)}</p>
        <p><strong>Email:</strong> {e(form.email)}</p>
        <p><strong>Phone:</strong> {e(form.phone_number)}</p>
        <p><strong>Message:</strong></p>
        <p>{message}</p>
        <hr>
        <p><em>This message was sent from your website contact form.</em></p>
        """


def build_contact_email(form: ContactIn, contact_id: str, cfg: BrevoConfig) -> BrevoEmail:
    return BrevoEmail(
        sender=BrevoSender(name=cfg.sender_name, email=cfg.sender_email),
        to=[BrevoRecipient(email=cfg.recipient_email, name=RECIPIENT_DISPLAY_NAME)],
        subject=_contact_subject(form),
        html_content=_contact_html(form, contact_id),
    )


# ---- public API --------------------------------------------------------------


async def send_contact_email(
    form: ContactIn,
    contact_id: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """
    Send the contact notification through Brevo's transactional email API.

    - one POST, no retries, default httpx timeout
    - raises EmailConfigError before any network call if settings are incomplete
    - raises EmailSendError on non-2xx or transport failure
    - `transport` lets callers swap the network layer (tests use httpx.MockTransport)
    """
    log.debug("Attempting to send email via Brevo for contact ID: %s", contact_id)
    cfg = resolve_brevo_config(settings)
    log.debug(
        "Using sender: %s <%s>, recipient: %s",
        cfg.sender_name, cfg.sender_email, cfg.recipient_email,
    )

    email = build_contact_email(form, contact_id, cfg)
    if cfg.dry_run:
        log.info("[EMAIL DRY RUN] to=%s subject=%s", cfg.recipient_email, email.subject)
        return

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            resp = await client.post(
                f"{cfg.api_url}/smtp/email",
                headers={
                    "api-key": cfg.api_key,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                json=email.model_dump(by_alias=True),
            )
    except httpx.HTTPError as e:
        log.error("Brevo network error: %s", e)
        raise EmailSendError(f"Failed to send email: {e}") from e

    if resp.is_success:
        log.info("Email sent successfully via Brevo for contact ID: %s", contact_id)
        return

    body = resp.text or "Unknown error"
    log.error("Brevo HTTP %s: %s", resp.status_code, body)
    raise EmailSendError(f"Failed to send email: {body}")
