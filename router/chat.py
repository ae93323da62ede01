import logging
from fastapi import APIRouter, Depends, HTTPException
from core import messages
from core.responses import to_response
from schemas.chat import ChatRequest, ChatReply, PlainChat
from services.classifier import classify_text
from services.pipeline_runner import PipelineRunner
from router.deps import get_runner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

@router.post("/chat", response_model=ChatReply)
async def chat(request: ChatRequest, runner: PipelineRunner = Depends(get_runner)):
    """
    Plain chat over the full visible history sent by the client.
    """
    if request.messages is None:
        raise HTTPException(status_code=400, detail=messages.MESSAGES_REQUIRED)

    result = await runner.run(PlainChat(conversation=request.messages))
    return to_response(result)

@router.post("/message", response_model=ChatReply)
async def message(request: ChatRequest, runner: PipelineRunner = Depends(get_runner)):
    """
    Classifies the latest user turn: a YouTube link goes to the summarize
    pipeline, anything else to plain chat.
    """
    if not request.messages:
        raise HTTPException(status_code=400, detail=messages.MESSAGES_REQUIRED)

    job = classify_text(request.messages)
    logger.info("Classified message as %s", job.kind)
    return to_response(await runner.run(job))
