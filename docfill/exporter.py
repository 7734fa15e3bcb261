# docfill/exporter.py
from __future__ import annotations
import io, os, re
from pathlib import Path
from docx import Document
from .schema import Attachment, DOCX_MIME, TEXT_MIME

def _base_name(original_name: str) -> str:
    # drop directories and only the last extension: "a.b.docx" -> "a.b"
    return re.sub(r"\.[^/.]+$", "", os.path.basename(original_name))

def _extension(original_name: str) -> str:
    return original_name.split(".")[-1].lower()

def _docx_bytes(processed_text: str) -> bytes:
    doc = Document()
    for line in processed_text.split("\n"):
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()

def build_attachment(processed_text: str, original_name: str) -> Attachment:
    base = _base_name(original_name)
    if _extension(original_name) in ("txt", "doc"):
        return Attachment(
            filename=f"processed_{base}.txt",
            content=processed_text.encode("utf-8"),
            content_type=TEXT_MIME,
        )
    return Attachment(
        filename=f"processed_{base}.docx",
        content=_docx_bytes(processed_text),
        content_type=DOCX_MIME,
    )

def write_attachment(attachment: Attachment, out_dir: str) -> Path:
    os.makedirs(out_dir, exist_ok=True)
    out_path = Path(out_dir) / attachment.filename
    out_path.write_bytes(attachment.content)
    return out_path
