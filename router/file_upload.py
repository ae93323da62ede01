import logging
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, UploadFile, File, Form, Depends, HTTPException

# --- IMPORTS FOR SECURE UPLOAD ---
from core import messages
from core.file_manager import TemporaryArtifact, save_upload_file_securely, unique_artifact_path
from core.responses import to_response
from utils.file_validator import valid_content_length
from schemas.chat import ChatReply
from services.classifier import build_file_job
from services.pipeline_runner import PipelineRunner
from router.deps import get_app_settings, get_runner
from config.settings import AppSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])

@router.post("/file-analyze", response_model=ChatReply)
async def file_analyze(
    file: Optional[UploadFile] = File(None),
    question: Optional[str] = Form(None),
    file_size_header: Optional[int] = Depends(valid_content_length),  # Validates size before upload
    runner: PipelineRunner = Depends(get_runner),
    settings: AppSettings = Depends(get_app_settings),
):
    """
    Analyze an uploaded image (vision model) or PDF (text extraction + summary).
    The upload is streamed to disk and deleted once the analysis ends.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail=messages.NO_FILE)

    # Secure stream save (writes to disk in chunks, deletes the partial file on overflow)
    file_path = unique_artifact_path(settings.files.uploads_dir, "file", Path(file.filename).suffix)
    real_file_size = await save_upload_file_securely(
        file, file_path, max_size=settings.files.max_file_size_bytes
    )
    logger.info("Upload received: filename=%s size=%d mime=%s", file.filename, real_file_size, file.content_type)

    artifact = TemporaryArtifact(file_path)
    try:
        job = build_file_job(artifact, file.content_type, question, size_bytes=real_file_size)
    except Exception:
        artifact.release()
        raise
    return to_response(await runner.run(job))
