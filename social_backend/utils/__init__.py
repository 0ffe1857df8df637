"""Utility modules for the social posts backend."""

from .email_service import send_contact_email_async

__all__ = [
    "send_contact_email_async",
]
