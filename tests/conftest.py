"""
Shared fixtures for docfill tests.
"""

import io

import pytest
from docx import Document
from fastapi.testclient import TestClient

from docfill.api import app
from docfill.schema import SmtpSettings


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_docx():
    """Build .docx bytes from body paragraphs and optional single-cell tables."""
    def _make(paragraphs, cells=()):
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        for text in cells:
            table = doc.add_table(rows=1, cols=1)
            table.cell(0, 0).text = text
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()
    return _make


@pytest.fixture
def smtp_settings():
    return SmtpSettings(
        host="smtp.example.test",
        port=465,
        secure=True,
        user="mailer@example.test",
        password="app-password",
    )
