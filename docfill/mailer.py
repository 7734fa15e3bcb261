# docfill/mailer.py
"""SMTP delivery of processed documents."""
from __future__ import annotations
import logging
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid
from .exceptions import DeliveryError, MissingRecipientError
from .schema import Attachment, DeliveryReceipt, SmtpSettings

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Processed Document"
DEFAULT_BODY = "Hello,\n\nPlease find the processed document attached.\n"

def build_message(attachment: Attachment, recipient: str, sender: str,
                  subject: str = DEFAULT_SUBJECT, body: str = DEFAULT_BODY) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = recipient
    msg["Subject"] = subject
    msg["Message-ID"] = make_msgid()
    msg.set_content(body)
    maintype, _, subtype = attachment.content_type.partition("/")
    msg.add_attachment(
        attachment.content,
        maintype=maintype,
        subtype=subtype or "octet-stream",
        filename=attachment.filename,
    )
    return msg

def _connect(settings: SmtpSettings) -> smtplib.SMTP:
    if settings.secure:
        return smtplib.SMTP_SSL(settings.host, settings.port, timeout=settings.timeout)
    server = smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout)
    try:
        server.ehlo()
        if server.has_extn("starttls"):
            server.starttls()
            server.ehlo()
    except BaseException:
        server.close()
        raise
    return server

def send_attachment(attachment: Attachment, recipient: str, settings: SmtpSettings,
                    subject: str = DEFAULT_SUBJECT, body: str = DEFAULT_BODY) -> DeliveryReceipt:
    if not recipient:
        raise MissingRecipientError()
    sender = settings.sender or ""
    msg = build_message(attachment, recipient, sender, subject, body)
    try:
        with _connect(settings) as server:
            if settings.user:
                server.login(settings.user, settings.password or "")
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Delivery of %s to %s failed: %s", attachment.filename, recipient, e)
        raise DeliveryError(str(e) or e.__class__.__name__) from e
    logger.info("Sent %s to %s via %s:%s", attachment.filename, recipient, settings.host, settings.port)
    return DeliveryReceipt(
        ok=True,
        message_id=msg["Message-ID"],
        recipient=recipient,
        filename=attachment.filename,
    )
