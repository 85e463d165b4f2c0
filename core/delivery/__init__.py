"""
Delivery channels for rendered reports.
"""

from .mailer import Attachment, OutboundMessage, BaseMailer, SmtpMailer

__all__ = ["Attachment", "OutboundMessage", "BaseMailer", "SmtpMailer"]
