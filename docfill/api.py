# docfill/api.py
"""
HTTP surface: upload a document, list its placeholders, or fill and email it.

Errors are returned as {"error": "..."} so browser clients can show the
message directly.
"""
import logging
from typing import Optional
from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from .exceptions import InvalidValuesError, MissingRecipientError
from .service import inspect_document, parse_values, send_document

logger = logging.getLogger(__name__)

app = FastAPI(
    title="docfill",
    description="Fill {{placeholder}} documents and deliver them by email",
    version="0.1.0",
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/inspect")
async def inspect(file: Optional[UploadFile] = File(None)):
    """Return the placeholder names found in the uploaded document."""
    if file is None:
        return _error(400, "No file uploaded")
    try:
        content = await file.read()
        result = inspect_document(file.filename or "", content)
    except Exception as e:
        logger.exception("Inspect failed for %s", file.filename)
        return _error(400, str(e) or "Inspect failed")
    return {"variables": result.variables}


@app.post("/api/send")
async def send(
    file: Optional[UploadFile] = File(None),
    email: Optional[str] = Form(None),
    values: Optional[str] = Form(None),
):
    """Fill the uploaded document with `values` (a JSON object) and email it."""
    if not email:
        return _error(400, str(MissingRecipientError()))
    if file is None:
        return _error(400, "No file uploaded")
    try:
        parsed = parse_values(values)
    except InvalidValuesError as e:
        return _error(400, str(e))

    try:
        content = await file.read()
        receipt = await run_in_threadpool(
            send_document, file.filename or "", content, email, parsed
        )
    except Exception as e:
        logger.exception("Send failed for %s", file.filename)
        return _error(500, str(e) or "Send failed")
    return {"ok": True, "messageId": receipt.message_id}
