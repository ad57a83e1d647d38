"""Unit tests for techvision.services.email (SMTP is mocked)."""

import smtplib
import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from techvision.services.email import (
    EmailDeliveryError,
    build_reset_link,
    send_contact_notification,
    send_password_reset_email,
)

SMTP = "techvision.services.email.smtplib.SMTP"


def _settings(host: str = "smtp.example.com", inbox: str | None = None) -> MagicMock:
    settings = MagicMock()
    settings.SMTP_HOST = host
    settings.SMTP_PORT = 587
    settings.SMTP_USER = "mailer"
    settings.SMTP_PASSWORD = SecretStr("mailpw")
    settings.SMTP_USE_TLS = True
    settings.SMTP_TIMEOUT_SEC = 5.0
    settings.MAIL_FROM = "TechVision Solutions <noreply@techvision.com>"
    settings.FRONTEND_URL = "http://localhost:5000"
    settings.PASSWORD_RESET_PATH = "/reset-password.html"
    settings.PASSWORD_RESET_EXPIRE_MINUTES = 10
    settings.CONTACT_INBOX = inbox
    return settings


class TestResetEmail(unittest.TestCase):
    def test_reset_link(self) -> None:
        self.assertEqual(
            build_reset_link("abc123", _settings()),
            "http://localhost:5000/reset-password.html?token=abc123",
        )

    @patch(SMTP)
    def test_not_configured_sends_nothing(self, mock_smtp: MagicMock) -> None:
        self.assertFalse(send_password_reset_email("a@x.com", "A", "tok", _settings(host="")))
        mock_smtp.assert_not_called()

    @patch(SMTP)
    def test_sends_link_over_tls_with_login(self, mock_smtp: MagicMock) -> None:
        smtp = mock_smtp.return_value.__enter__.return_value
        self.assertTrue(send_password_reset_email("a@x.com", "<A>", "tok123", _settings()))

        mock_smtp.assert_called_once_with("smtp.example.com", 587, timeout=5.0)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("mailer", "mailpw")
        msg = smtp.send_message.call_args[0][0]
        self.assertEqual(msg["To"], "a@x.com")
        self.assertEqual(msg["Subject"], "Password Reset Request")
        text = msg.get_body(("plain",)).get_content()
        self.assertIn("reset-password.html?token=tok123", text)
        self.assertIn("&lt;A&gt;", msg.get_body(("html",)).get_content())

    @patch(SMTP)
    def test_smtp_failure_raises_delivery_error(self, mock_smtp: MagicMock) -> None:
        mock_smtp.return_value.__enter__.return_value.send_message.side_effect = (
            smtplib.SMTPRecipientsRefused({})
        )
        with self.assertRaises(EmailDeliveryError) as ctx:
            send_password_reset_email("a@x.com", "A", "tok", _settings())
        self.assertIsInstance(ctx.exception.cause, smtplib.SMTPException)

    @patch(SMTP)
    def test_newline_in_address_raises_delivery_error(self, mock_smtp: MagicMock) -> None:
        with self.assertRaises(EmailDeliveryError) as ctx:
            send_password_reset_email("a@x.com\nBcc: evil@x.com", "A", "tok", _settings())
        self.assertIsInstance(ctx.exception.cause, ValueError)
        mock_smtp.assert_not_called()

    @patch(SMTP, side_effect=ConnectionRefusedError())
    def test_connection_failure_raises_delivery_error(self, _mock_smtp: MagicMock) -> None:
        with self.assertRaises(EmailDeliveryError):
            send_password_reset_email("a@x.com", "A", "tok", _settings())


class TestContactNotification(unittest.TestCase):
    @patch(SMTP)
    def test_skipped_without_inbox(self, mock_smtp: MagicMock) -> None:
        self.assertFalse(send_contact_notification("Ann", "ann@x.com", "Hi", _settings(inbox=None)))
        mock_smtp.assert_not_called()

    @patch(SMTP)
    def test_sent_to_inbox(self, mock_smtp: MagicMock) -> None:
        smtp = mock_smtp.return_value.__enter__.return_value
        self.assertTrue(
            send_contact_notification("Ann", "ann@x.com", "Hi", _settings(inbox="sales@techvision.com"))
        )
        msg = smtp.send_message.call_args[0][0]
        self.assertEqual(msg["To"], "sales@techvision.com")
        self.assertIn("Ann", msg["Subject"])


class TestContactSubmission(unittest.TestCase):
    @patch(
        "techvision.services.contact.send_contact_notification",
        side_effect=EmailDeliveryError("down"),
    )
    def test_notification_failure_keeps_message(self, _mock_notify: MagicMock) -> None:
        from techvision.models import ContactMessage
        from techvision.services.contact import submit_contact_message
        from tests.support import make_session

        db = make_session()
        self.addCleanup(db.close)
        record = submit_contact_message(db, "Ann", "ann@x.com", "Hi", _settings(inbox="x@y.z"))
        self.assertIsNotNone(record.id)
        self.assertEqual(db.query(ContactMessage).count(), 1)

    @patch(SMTP)
    def test_newline_in_name_keeps_message(self, mock_smtp: MagicMock) -> None:
        from techvision.models import ContactMessage
        from techvision.services.contact import submit_contact_message
        from tests.support import make_session

        db = make_session()
        self.addCleanup(db.close)
        record = submit_contact_message(
            db, "Ann\nBcc: evil@x.com", "ann@x.com", "Hi", _settings(inbox="sales@techvision.com")
        )
        self.assertIsNotNone(record.id)
        self.assertEqual(db.query(ContactMessage).count(), 1)
        mock_smtp.assert_not_called()


if __name__ == "__main__":
    unittest.main()
