"""Send transactional email (password reset, contact notifications) over SMTP."""

from __future__ import annotations

import html
import logging
import smtplib
from email.message import EmailMessage
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from techvision.core.config import Settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the SMTP server cannot be reached or rejects the message."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def is_email_configured(settings: Settings) -> bool:
    return bool(settings.SMTP_HOST and settings.SMTP_HOST.strip())


def build_reset_link(token: str, settings: Settings) -> str:
    return f"{settings.FRONTEND_URL}{settings.PASSWORD_RESET_PATH}?token={token}"


def send_email(to_email: str, subject: str, html_body: str, text_body: str, settings: Settings) -> None:
    """Deliver one message. Raises EmailDeliveryError on a malformed header or any SMTP or socket failure."""
    msg = EmailMessage()
    try:
        msg["Subject"] = subject
        msg["From"] = settings.MAIL_FROM
        msg["To"] = to_email
    except ValueError as e:
        # CR/LF in a header value (e.g. a user-supplied name or address).
        raise EmailDeliveryError("Email headers are invalid.", cause=e) from e
    msg.set_content(text_body)
    msg.add_alternative(html_body, subtype="html")

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT_SEC) as smtp:
            if settings.SMTP_USE_TLS:
                smtp.starttls()
            if settings.SMTP_USER and settings.SMTP_PASSWORD is not None:
                smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD.get_secret_value())
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise EmailDeliveryError("Email delivery failed.", cause=e) from e
    logger.info("Email sent", extra={"subject": subject, "smtp_host": settings.SMTP_HOST})


def send_password_reset_email(to_email: str, name: str, reset_token: str, settings: Settings) -> bool:
    """
    Send the reset link to the user. Returns False when SMTP is not configured
    (nothing sent), True when delivered. Raises EmailDeliveryError on failure.
    """
    if not is_email_configured(settings):
        logger.warning("SMTP_HOST is not set; password reset email not sent.")
        return False
    link = build_reset_link(reset_token, settings)
    minutes = settings.PASSWORD_RESET_EXPIRE_MINUTES
    safe_name = html.escape(name)
    html_body = f"""<h2>Password Reset Request</h2>
<p>Hello {safe_name},</p>
<p>You requested a password reset. Click the link below to reset your password. This link is valid for {minutes} minutes.</p>
<a href="{html.escape(link, quote=True)}" style="padding: 10px 20px; background: #007bff; color: white; text-decoration: none; border-radius: 5px;">Reset Password</a>
<p>If you didn't request this, please ignore this email.</p>
"""
    text_body = f"""Hello {name},

You requested a password reset. Open the link below to set a new password:

{link}

This link is valid for {minutes} minutes. If you didn't request this, please ignore this email.
"""
    send_email(to_email, "Password Reset Request", html_body, text_body, settings)
    return True


def send_contact_notification(name: str, email: str, message: str, settings: Settings) -> bool:
    """Forward a contact form submission to CONTACT_INBOX. Returns False when not configured."""
    if not is_email_configured(settings) or not settings.CONTACT_INBOX:
        return False
    html_body = f"""<h2>New contact form message</h2>
<p><strong>From:</strong> {html.escape(name)} &lt;{html.escape(email)}&gt;</p>
<p>{html.escape(message)}</p>
"""
    text_body = f"From: {name} <{email}>\n\n{message}\n"
    send_email(settings.CONTACT_INBOX, f"Contact form: {name}", html_body, text_body, settings)
    return True
