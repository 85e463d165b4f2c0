"""
Unit Tests for Mailer

SMTP is mocked; message construction is checked on the real EmailMessage.
"""

import smtplib
from unittest.mock import patch, MagicMock

import pytest
from core.delivery import mailer as mailer_module
from core.delivery.mailer import Attachment, OutboundMessage, SmtpMailer
from core.errors import DeliveryError


@pytest.fixture
def smtp_mailer():
    return SmtpMailer(
        host="smtp.example.com",
        port=465,
        username="advisor@example.com",
        password="app-password",
        sender="advisor@example.com",
    )


class TestOutboundMessage:
    """Test EmailMessage construction."""

    def test_html_only_message(self):
        message = OutboundMessage(to="a@example.com", subject="SA - Output", html_body="<p>x</p>")
        email = message.to_email_message("me@example.com")
        assert email["To"] == "a@example.com"
        assert email["From"] == "me@example.com"
        assert email["Subject"] == "SA - Output"
        assert email.get_content_type() == "text/html"
        assert "<p>x</p>" in email.get_content()

    def test_pdf_attachment(self):
        message = OutboundMessage(
            to="a@example.com",
            subject="SA - Output",
            text_body="Attached is the strategic report for SA.",
            attachments=[Attachment(filename="SA-Output.pdf", content=b"%PDF-1.4")],
        )
        email = message.to_email_message("me@example.com")
        assert email.is_multipart()

        attachments = list(email.iter_attachments())
        assert len(attachments) == 1
        assert attachments[0].get_filename() == "SA-Output.pdf"
        assert attachments[0].get_content_type() == "application/pdf"
        assert attachments[0].get_content() == b"%PDF-1.4"

        body = email.get_body(preferencelist=("plain",))
        assert "Attached is the strategic report for SA." in body.get_content()

    def test_text_with_html_alternative(self):
        message = OutboundMessage(to="a@example.com", subject="s", text_body="plain", html_body="<p>rich</p>")
        email = message.to_email_message("me@example.com")
        assert email.get_content_type() == "multipart/alternative"
        assert "rich" in email.get_body(preferencelist=("html",)).get_content()


class TestSmtpMailer:
    """Test SMTP delivery."""

    def test_send_over_ssl(self, smtp_mailer):
        smtp = MagicMock()
        with patch.object(mailer_module.smtplib, "SMTP_SSL") as smtp_ssl:
            smtp_ssl.return_value.__enter__.return_value = smtp
            smtp_mailer.send(OutboundMessage(to="a@example.com", subject="s", html_body="<p>x</p>"))

        assert smtp_ssl.call_args[0][:2] == ("smtp.example.com", 465)
        smtp.login.assert_called_once_with("advisor@example.com", "app-password")
        sent = smtp.send_message.call_args[0][0]
        assert sent["To"] == "a@example.com"

    def test_send_with_starttls(self):
        mailer = SmtpMailer(host="smtp.example.com", port=587, sender="me@example.com", use_ssl=False)
        smtp = MagicMock()
        with patch.object(mailer_module.smtplib, "SMTP") as plain:
            plain.return_value = smtp
            smtp.__enter__.return_value = smtp
            mailer.send(OutboundMessage(to="a@example.com", subject="s", text_body="x"))

        smtp.starttls.assert_called_once()
        smtp.login.assert_not_called()
        smtp.send_message.assert_called_once()

    def test_smtp_failure_becomes_delivery_error(self, smtp_mailer):
        with patch.object(mailer_module.smtplib, "SMTP_SSL") as smtp_ssl:
            smtp_ssl.return_value.__enter__.return_value.send_message.side_effect = (
                smtplib.SMTPRecipientsRefused({})
            )
            with pytest.raises(DeliveryError, match="Email delivery failed"):
                smtp_mailer.send(OutboundMessage(to="a@example.com", subject="s", text_body="x"))

    def test_connection_failure_becomes_delivery_error(self, smtp_mailer):
        with patch.object(mailer_module.smtplib, "SMTP_SSL", side_effect=ConnectionRefusedError("down")):
            with pytest.raises(DeliveryError):
                smtp_mailer.send(OutboundMessage(to="a@example.com", subject="s", text_body="x"))

    def test_missing_recipient(self, smtp_mailer):
        with pytest.raises(DeliveryError, match="No recipient"):
            smtp_mailer.send(OutboundMessage(to="", subject="s", text_body="x"))

    def test_missing_sender(self):
        mailer = SmtpMailer(host="smtp.example.com", port=465)
        with pytest.raises(DeliveryError, match="No sender"):
            mailer.send(OutboundMessage(to="a@example.com", subject="s", text_body="x"))

    def test_from_settings(self, test_settings):
        mailer = SmtpMailer.from_settings(test_settings)
        assert mailer.host == "smtp.gmail.com"
        assert mailer.port == 465
        assert mailer.sender == "advisor@example.com"
