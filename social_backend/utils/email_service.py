"""
Contact email service (async).
===============================

Delivers contact-form submissions to a fixed recipient over SMTP. The relay
defaults to SendGrid's, where the username is the literal ``apikey`` and the
provider API key is the password.
"""
import logging
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from ..core.config import get_settings
from ..domain.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def build_contact_subject(name: str) -> str:
    """Subject line for a contact notification."""
    return f"Message from {name}"


def build_contact_body(name: str, email: str, phone: Optional[str], message: str) -> str:
    """Plain-text body listing every submitted field."""
    return (
        f"Name: {name}\n"
        f"Email: {email}\n"
        f"Phone: {phone or '-'}\n"
        f"Message:\n{message}"
    )


async def send_contact_email_async(
    name: str,
    email: str,
    phone: Optional[str],
    message: str,
) -> None:
    """
    Send a contact notification to the configured recipient.

    Args:
        name: Sender's name
        email: Sender's email address (used as Reply-To)
        phone: Sender's phone number, optional
        message: Free-text message

    Raises:
        ExternalServiceError: If email delivery is not configured or the relay rejects the message
    """
    settings = get_settings()
    if not settings.contact_recipient or not settings.email_from or not settings.email_provider_api_key:
        logger.warning(
            "[email_service] Email not configured. Set CONTACT_RECIPIENT, EMAIL_FROM and EMAIL_PROVIDER_API_KEY"
        )
        raise ExternalServiceError("Email delivery is not configured", service_name="email")

    msg = MIMEText(build_contact_body(name, email, phone, message), "plain", "utf-8")
    msg["Subject"] = build_contact_subject(name)
    msg["From"] = f"{settings.email_from_name} <{settings.email_from}>"
    msg["To"] = settings.contact_recipient
    msg["Reply-To"] = email

    try:
        await aiosmtplib.send(
            msg,
            sender=settings.email_from,
            recipients=[settings.contact_recipient],
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.email_provider_api_key,
            use_tls=settings.smtp_use_tls,
        )
    except (aiosmtplib.SMTPException, OSError) as e:
        logger.exception("[email_service] Failed to send contact email: %s", e)
        raise ExternalServiceError(f"Email delivery failed: {e}", service_name="email")

    logger.info("[email_service] Contact email from %s delivered to %s", email, settings.contact_recipient)
