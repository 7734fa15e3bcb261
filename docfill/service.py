# docfill/service.py
"""
Request-level operations shared by the HTTP API and the CLI.

Each call is independent: the document is re-read and its variables are
re-extracted every time, nothing is cached between calls.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Callable, Dict, Optional, Union
from .config import load_smtp_settings
from .exceptions import InvalidValuesError, MissingRecipientError
from .exporter import build_attachment
from .mailer import send_attachment
from .parser import extract_text
from .schema import Attachment, DeliveryReceipt, InspectResult, SmtpSettings
from .substitution import substitute
from .tokenizer import extract_variables

logger = logging.getLogger(__name__)

Sender = Callable[[Attachment, str, SmtpSettings], DeliveryReceipt]

def parse_values(raw: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """Decode the JSON value mapping sent alongside an upload."""
    if raw is None or raw == "":
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        values = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise InvalidValuesError() from e
    if not isinstance(values, dict):
        raise InvalidValuesError()
    return values

def inspect_document(filename: str, content: bytes) -> InspectResult:
    text = extract_text(filename, content)
    return InspectResult(variables=extract_variables(text))

def process_document(filename: str, content: bytes, values: Optional[Dict[str, Any]]) -> Attachment:
    text = extract_text(filename, content)
    variables = extract_variables(text)
    processed = substitute(text, variables, values)
    logger.info("Filled %d variable(s) in %s", len(variables), filename)
    return build_attachment(processed, filename)

def send_document(filename: str, content: bytes, recipient: Optional[str],
                  values: Union[str, Dict[str, Any], None] = None,
                  settings: Optional[SmtpSettings] = None,
                  sender: Optional[Sender] = None) -> DeliveryReceipt:
    if not recipient:
        raise MissingRecipientError()
    parsed = parse_values(values)
    attachment = process_document(filename, content, parsed)
    if settings is None:
        settings = load_smtp_settings()
    return (sender or send_attachment)(attachment, recipient, settings)
