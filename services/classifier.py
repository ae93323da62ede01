import re
from typing import List, Optional, Union
from core.file_manager import TemporaryArtifact
from schemas.chat import ChatTurn, PlainChat, YouTubeJob
from schemas.upload import FileJob
from services import prompts
from utils.file_validator import MediaFamily, media_family

# watch?v=, youtu.be/ and shorts/ links, each with an 11 character video id
YOUTUBE_URL_RE = re.compile(
    r"(https?://(?:www\.)?(?:youtube\.com/watch\?v=[\w-]{11}"
    r"|youtu\.be/[\w-]{11}"
    r"|youtube\.com/shorts/[\w-]{11}))"
)

DEFAULT_QUESTIONS = {
    MediaFamily.IMAGE: prompts.DEFAULT_IMAGE_QUESTION,
    MediaFamily.PDF: prompts.DEFAULT_PDF_QUESTION,
    MediaFamily.UNSUPPORTED: prompts.DEFAULT_FILE_QUESTION,
}


def extract_youtube_url(text: str) -> Optional[str]:
    match = YOUTUBE_URL_RE.search(text or "")
    return match.group(1) if match else None


def _clean_question(question: Optional[str]) -> Optional[str]:
    question = (question or "").strip()
    return question or None


def build_youtube_job(url: str, question: Optional[str] = None) -> YouTubeJob:
    return YouTubeJob(url=url.strip(), question=_clean_question(question))


def classify_text(conversation: List[ChatTurn]) -> Union[YouTubeJob, PlainChat]:
    """
    A YouTube link in the final turn, when the user sent it, selects the
    summarize pipeline with the rest of that turn as the question. Anything
    else is plain chat over the whole visible history.
    """
    latest = conversation[-1] if conversation else None
    if latest is not None and latest.role == "user":
        url = extract_youtube_url(latest.content)
        if url:
            return build_youtube_job(url, latest.content.replace(url, "", 1))
    return PlainChat(conversation=list(conversation))


def build_file_job(
    artifact: TemporaryArtifact,
    mime_type: Optional[str],
    question: Optional[str] = None,
    size_bytes: int = 0,
) -> FileJob:
    mime_type = mime_type or "application/octet-stream"
    question = _clean_question(question) or DEFAULT_QUESTIONS[media_family(mime_type)]
    return FileJob(artifact=artifact, mime_type=mime_type, question=question, size_bytes=size_bytes)
