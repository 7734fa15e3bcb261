# docfill/schema.py
from pydantic import BaseModel, Field
from typing import List, Optional

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

class Token(BaseModel):
    name: str                 # trimmed inner text, used as the variable name
    raw: str                  # inner text exactly as written
    start: int                # offset of the opening "{{"
    end: int                  # offset just past the closing "}}"

class InspectResult(BaseModel):
    variables: List[str] = Field(default_factory=list)

class Attachment(BaseModel):
    filename: str
    content: bytes
    content_type: str = TEXT_MIME

class DeliveryReceipt(BaseModel):
    ok: bool = True
    message_id: Optional[str] = None
    recipient: str
    filename: str

class SmtpSettings(BaseModel):
    host: str
    port: int = 465
    secure: bool = True       # implicit TLS; False means plain SMTP + STARTTLS
    user: Optional[str] = None
    password: Optional[str] = None
    from_email: Optional[str] = None
    timeout: float = 30.0

    @property
    def sender(self) -> Optional[str]:
        return self.from_email or self.user
