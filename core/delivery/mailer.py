#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Mailer - Outbound delivery of reports by email.

SmtpMailer sends one EmailMessage per call over SMTP (implicit SSL or
STARTTLS). Any failure surfaces as DeliveryError; nothing is retried.
"""

import smtplib
import ssl
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import List, Optional

from config.constants import SMTP_TIMEOUT_SECONDS
from config.logging_config import get_logger
from core.errors import DeliveryError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    maintype: str = "application"
    subtype: str = "pdf"


@dataclass
class OutboundMessage:
    """A single message to a single recipient."""
    to: str
    subject: str
    text_body: Optional[str] = None
    html_body: Optional[str] = None
    attachments: List[Attachment] = field(default_factory=list)

    def to_email_message(self, sender: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = sender
        message["To"] = self.to
        message["Subject"] = self.subject

        if self.text_body is not None:
            message.set_content(self.text_body)
            if self.html_body is not None:
                message.add_alternative(self.html_body, subtype="html")
        elif self.html_body is not None:
            message.set_content(self.html_body, subtype="html")
        else:
            message.set_content("")

        for attachment in self.attachments:
            message.add_attachment(
                attachment.content,
                maintype=attachment.maintype,
                subtype=attachment.subtype,
                filename=attachment.filename,
            )
        return message


class BaseMailer(ABC):
    """Delivery channel interface."""

    @abstractmethod
    def send(self, message: OutboundMessage) -> None:
        """
        Send the message.

        Raises:
            DeliveryError: If the message could not be sent
        """
        pass


class SmtpMailer(BaseMailer):
    """
    SMTP delivery channel.

    Usage:
        mailer = SmtpMailer(host="smtp.gmail.com", port=465,
                            username=user, password=app_password, sender=user)
        mailer.send(OutboundMessage(to=..., subject=..., html_body=...))
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        sender: str = "",
        use_ssl: bool = True,
        timeout: float = SMTP_TIMEOUT_SECONDS,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "SmtpMailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            sender=settings.mail_sender,
            use_ssl=settings.smtp_use_ssl,
        )

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, context=context, timeout=self.timeout)

        smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        smtp.starttls(context=context)
        return smtp

    def send(self, message: OutboundMessage) -> None:
        if not message.to:
            raise DeliveryError("No recipient configured (set MAIL_RECIPIENT)")
        if not self.sender:
            raise DeliveryError("No sender configured (set MAIL_SENDER or SMTP_USERNAME)")

        email_message = message.to_email_message(self.sender)

        try:
            with self._connect() as smtp:
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(email_message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Email sending failed: {e}")
            raise DeliveryError(f"Email delivery failed: {e}") from e

        logger.info(
            f"Email sent to {message.to}: '{message.subject}' "
            f"({len(message.attachments)} attachment(s))"
        )
