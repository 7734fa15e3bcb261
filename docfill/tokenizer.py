# docfill/tokenizer.py
"""
Placeholder scanning.

A token is "{{", one or more characters that are not "}", then "}}". The
inner text ends at the first "}" after the opening, so "{{a{{b}}}}" yields
the inner text "a{{b" and leaves a stray "}}" behind. Nested braces are not
supported; this scanner makes that behaviour explicit rather than relying on
a regex.
"""
from __future__ import annotations
import logging
from typing import Iterator, List, Optional
from .schema import Token

logger = logging.getLogger(__name__)

OPEN = "{{"
CLOSE = "}}"


class TokenScanner:
    """Walks text left to right and yields non-overlapping tokens."""

    def __init__(self, text: Optional[str]):
        self.text = text or ""

    def find_start(self, pos: int) -> int:
        """Index of the next "{{" at or after pos, or -1."""
        return self.text.find(OPEN, pos)

    def find_end(self, start: int) -> int:
        """
        Index just past the "}}" closing the candidate at start, or -1.

        The inner text runs up to the first "}" after the opening. The
        candidate is a token only if that inner text is non-empty and the
        "}" is the first half of a "}}".
        """
        inner_start = start + len(OPEN)
        brace = self.text.find("}", inner_start)
        if brace == -1 or brace == inner_start:
            return -1
        if not self.text.startswith(CLOSE, brace):
            return -1
        return brace + len(CLOSE)

    def inner_name(self, start: int, end: int) -> str:
        return self.text[start + len(OPEN):end - len(CLOSE)]

    def tokens(self) -> Iterator[Token]:
        pos = 0
        while True:
            start = self.find_start(pos)
            if start == -1:
                return
            end = self.find_end(start)
            if end == -1:
                # not a token here; a token may still open one brace later ("{{{a}}")
                pos = start + 1
                continue
            raw = self.inner_name(start, end)
            yield Token(name=raw.strip(), raw=raw, start=start, end=end)
            pos = end


def extract_variables(text: Optional[str]) -> List[str]:
    """Return placeholder names in first-occurrence order, without duplicates."""
    names: List[str] = []
    for tok in TokenScanner(text).tokens():
        if tok.name not in names:
            names.append(tok.name)
    logger.debug("Found %d variable(s): %s", len(names), names)
    return names
