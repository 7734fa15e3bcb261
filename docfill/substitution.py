# docfill/substitution.py
from __future__ import annotations
import logging
import re
from typing import Any, Iterable, Mapping, Optional
from .tokenizer import extract_variables

logger = logging.getLogger(__name__)

PAD_CHAR = "_"

def _to_text(raw: Any) -> str:
    # string form of one JSON value; lists join with "," and whole floats drop ".0"
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    if isinstance(raw, (list, tuple)):
        return ",".join(_to_text(item) for item in raw)
    if isinstance(raw, dict):
        return "[object Object]"
    return str(raw)

def coerce_value(raw: Any) -> str:
    # Missing, None, "", 0 and False all read as "no value"; an empty object does not
    if not raw and not isinstance(raw, dict):
        return ""
    return _to_text(raw)

def pad_value(name: str, value: str) -> str:
    """
    Widen a short value with underscores so it fills the token name's width.

    The left side gets the extra underscore when the deficit is odd:
    pad_value("name", "Bo") -> "_Bo_", pad_value("city", "X") -> "__X_".
    Values at least as long as the name are returned unchanged.
    """
    deficit = len(name) - len(value)
    if deficit <= 0:
        return value
    left = deficit // 2 + deficit % 2
    right = deficit // 2
    return PAD_CHAR * left + value + PAD_CHAR * right

def token_pattern(name: str) -> "re.Pattern[str]":
    # {{ name }} with any whitespace inside the braces; the name is literal
    return re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}")

def substitute(text: Optional[str], variables: Iterable[str], values: Optional[Mapping[str, Any]]) -> str:
    """
    Replace every token of each variable, one variable at a time, in order.

    Each pass runs over the output of the previous one, so a replacement that
    itself contains "{{other}}" is rewritten if "other" comes later in
    `variables`. Callers rely on that ordering; do not switch to a single
    simultaneous pass.
    """
    values = values or {}
    working = text or ""
    for name in variables:
        replacement = pad_value(name, coerce_value(values.get(name)))
        # a callable keeps backslashes in the replacement literal
        working, count = token_pattern(name).subn(lambda _m: replacement, working)
        logger.debug("Replaced %d occurrence(s) of %r", count, name)
    return working

def fill(text: Optional[str], values: Optional[Mapping[str, Any]]) -> str:
    return substitute(text, extract_variables(text), values)
