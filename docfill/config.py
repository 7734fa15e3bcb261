# docfill/config.py
from __future__ import annotations
import os
from dotenv import load_dotenv
from pydantic import ValidationError
from .exceptions import ConfigurationError
from .schema import SmtpSettings

DEFAULT_SMTP_PORT = 465
DEFAULT_HTTP_PORT = 3000

def load_smtp_settings() -> SmtpSettings:
    load_dotenv()
    host = os.getenv("SMTP_HOST")
    if not host:
        raise ConfigurationError("SMTP_HOST missing. Add it to .env")
    try:
        return SmtpSettings(
            host=host,
            port=os.getenv("SMTP_PORT") or DEFAULT_SMTP_PORT,
            secure=os.getenv("SMTP_SECURE") != "false",  # only the exact string "false" disables TLS
            user=os.getenv("SMTP_USER") or None,
            password=os.getenv("SMTP_PASS") or None,
            from_email=os.getenv("FROM_EMAIL") or None,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid SMTP settings: {e}") from e

def http_port() -> int:
    load_dotenv()
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_HTTP_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}") from e
