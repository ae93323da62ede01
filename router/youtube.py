from fastapi import APIRouter, Depends, HTTPException
from core import messages
from core.responses import to_response
from schemas.chat import YouTubeRequest, ChatReply
from services.classifier import build_youtube_job
from services.pipeline_runner import PipelineRunner
from router.deps import get_runner

router = APIRouter(prefix="/api", tags=["youtube"])

@router.post("/youtube-transcribe", response_model=ChatReply)
async def youtube_transcribe(request: YouTubeRequest, runner: PipelineRunner = Depends(get_runner)):
    """
    Download -> transcribe -> summarize one video.
    """
    if not request.url or not request.url.strip():
        raise HTTPException(status_code=400, detail=messages.YOUTUBE_URL_REQUIRED)

    job = build_youtube_job(request.url, request.question)
    return to_response(await runner.run(job))
