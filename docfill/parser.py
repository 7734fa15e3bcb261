# docfill/parser.py
from __future__ import annotations
import io, logging, os
from typing import Iterator, List
from .exceptions import DocumentReadError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".doc")   # .doc is read as plain text, never as Word binary
DOCX_EXTENSION = ".docx"

def _iter_blocks(parent) -> Iterator:
    """Paragraphs and tables directly under a document body or table cell, in order."""
    from docx.oxml.ns import qn
    from docx.table import Table, _Cell
    from docx.text.paragraph import Paragraph
    elm = parent._tc if isinstance(parent, _Cell) else parent.element.body
    for child in elm.iterchildren():
        if child.tag == qn("w:p"):
            yield Paragraph(child, parent)
        elif child.tag == qn("w:tbl"):
            yield Table(child, parent)

def _iter_paragraphs(parent, seen=None) -> Iterator:
    """Every paragraph in document order, descending into table cells."""
    from docx.text.paragraph import Paragraph
    seen = set() if seen is None else seen
    for block in _iter_blocks(parent):
        if isinstance(block, Paragraph):
            yield block
            continue
        for row in block.rows:
            for cell in row.cells:
                # merged cells repeat the same <w:tc> across the span
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                yield from _iter_paragraphs(cell, seen)

def _docx_text(content: bytes) -> str:
    from docx import Document
    try:
        doc = Document(io.BytesIO(content))
    except Exception as e:  # python-docx raises zipfile/KeyError/lxml errors for junk input
        raise DocumentReadError(f"Could not read .docx file: {e}") from e
    lines: List[str] = [p.text for p in _iter_paragraphs(doc)]
    return "\n".join(lines)

def extract_text(filename: str, content: bytes) -> str:
    name = (filename or "").lower()
    if name.endswith(DOCX_EXTENSION):
        text = _docx_text(content)
    elif name.endswith(TEXT_EXTENSIONS):
        text = content.decode("utf-8", errors="replace")
    else:
        raise UnsupportedFileTypeError(filename)
    logger.info("Extracted %d characters from %s", len(text), filename)
    return text

def read_document(path: str) -> str:
    with open(path, "rb") as f:
        content = f.read()
    return extract_text(os.path.basename(path), content)
