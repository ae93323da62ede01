from fastapi import HTTPException, Header, Request
from typing import Optional
from enum import Enum

# Room for multipart boundaries and the question field on top of the file itself
MULTIPART_OVERHEAD = 64 * 1024

class MediaFamily(str, Enum):
    IMAGE = "image"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"

async def valid_content_length(request: Request, content_length: Optional[int] = Header(None)) -> Optional[int]:
    """
    Checks the content header before accepting the body.
    The exact file size is enforced again while streaming the upload to disk.
    """
    files = request.app.state.settings.files
    if content_length is not None and content_length > files.max_file_size_bytes + MULTIPART_OVERHEAD:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max size is {files.max_file_size}MB.",
        )
    return content_length

def media_family(mime_type: Optional[str]) -> MediaFamily:
    """Images and PDFs are the only supported uploads"""
    mime_type = (mime_type or "").lower()
    if mime_type.startswith("image/"):
        return MediaFamily.IMAGE
    if mime_type == "application/pdf":
        return MediaFamily.PDF
    return MediaFamily.UNSUPPORTED
