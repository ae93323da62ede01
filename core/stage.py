from enum import Enum
from typing import Optional
from pydantic import BaseModel

# Failure categories; the response formatter maps them to HTTP status codes
class ErrorKind(str, Enum):
    CLIENT_INPUT = "client_input"
    UNSUPPORTED_MEDIA = "unsupported_media"
    UPSTREAM_EMPTY = "upstream_empty"
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_FAILURE = "upstream_failure"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"

CLIENT_ERROR_KINDS = {ErrorKind.CLIENT_INPUT, ErrorKind.UNSUPPORTED_MEDIA}

class StageResult(BaseModel):
    """Outcome of one pipeline stage: either text or a user-facing failure"""
    ok: bool
    text: str = ""
    error_kind: Optional[ErrorKind] = None
    user_message: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "StageResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "StageResult":
        return cls(ok=False, error_kind=kind, user_message=message)

    @property
    def is_client_error(self) -> bool:
        return not self.ok and self.error_kind in CLIENT_ERROR_KINDS
