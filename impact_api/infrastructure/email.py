"""Utility helpers for sending transactional email notifications via SendGrid.

Emails are sent independently of in-app notifications; a failed email never
affects the notification log and vice versa.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from impact_api.config import get_settings
from impact_api.utils import to_app_timezone

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _log_sendgrid_exception(exc: Exception) -> None:
    """Log a SendGrid API error with helpful troubleshooting details."""

    status_code = getattr(exc, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(exc, "body", None))

    if status_code and details:
        logger.error(
            "SendGrid API request failed with status %s: %s", status_code, details
        )
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.exception("Error sending email via SendGrid: %s", exc)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_exception(exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        details = _extract_sendgrid_error_details(getattr(response, "body", None))
        if details:
            logger.error("SendGrid API responded with status %s: %s", status_code, details)
        else:
            logger.error("SendGrid API responded with status %s", status_code)
        return False

    return True


def send_participation_decision_email(
    email: str,
    *,
    volunteer_name: str,
    event_title: str,
    accepted: bool,
    reason: str | None = None,
    event_date: datetime | None = None,
) -> bool:
    """Tell a volunteer by email whether their participation was accepted.

    ``event_date`` is rendered in ``APP_TIMEZONE`` when given.
    """

    name = escape(volunteer_name)
    title = escape(event_title)
    if accepted:
        subject = f"You're in: {event_title}"
        parts = [
            f"<p>Hi {name},</p>",
            f"<p>Your request to join <strong>{title}</strong> has been accepted.</p>",
        ]
        if event_date is not None:
            starts = to_app_timezone(event_date).strftime("%B %d, %Y at %H:%M %Z")
            parts.append(f"<p>The event starts on {starts}.</p>")
        parts.append("<p>See you there!</p>")
    else:
        subject = f"Update on your request for {event_title}"
        parts = [
            f"<p>Hi {name},</p>",
            f"<p>Your request to join <strong>{title}</strong> was not accepted this time.</p>",
        ]
        if reason:
            parts.append(f"<p><strong>Reason:</strong> {escape(reason)}</p>")
    return send_email(subject, "".join(parts), email)
