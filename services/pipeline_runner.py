import asyncio
import base64
import logging
from typing import Any, Awaitable, Callable, Union
from config.settings import AppSettings
from core import messages
from core.errors import AdapterError, TranscriptionStatusError
from core.file_manager import TemporaryArtifact, unique_artifact_path
from core.pdf_reader import extract_text_from_pdf, normalize_whitespace
from core.stage import ErrorKind, StageResult
from schemas.chat import PlainChat, YouTubeJob
from schemas.upload import FileJob
from services import prompts
from services.completion import GroqCompletion
from services.media_fetch import YtDlpMediaFetch
from services.transcription import AssemblyAITranscription
from utils.file_validator import MediaFamily

logger = logging.getLogger(__name__)

PipelineRequest = Union[PlainChat, YouTubeJob, FileJob]


def truncate(text: str, limit: int, label: str) -> str:
    if len(text) > limit:
        logger.info("%s too long (%d), trimming to %d chars", label, len(text), limit)
        return text[:limit]
    return text


class PipelineRunner:
    """
    Runs one classified request through its fixed stage sequence.

    Each stage yields a StageResult and the first failure ends the pipeline.
    Temporary artifacts (downloaded audio, the uploaded file) are released
    on every exit path. Adapters are injected so tests can swap in fakes.
    """

    def __init__(
        self,
        completion,
        transcription,
        media_fetch,
        settings: AppSettings,
        pdf_extractor: Callable[[bytes], str] = extract_text_from_pdf,
    ):
        self.completion = completion
        self.transcription = transcription
        self.media_fetch = media_fetch
        self.pdf_extractor = pdf_extractor
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "PipelineRunner":
        return cls(
            completion=GroqCompletion(settings),
            transcription=AssemblyAITranscription(settings),
            media_fetch=YtDlpMediaFetch(settings),
            settings=settings,
        )

    async def run(self, request: PipelineRequest) -> StageResult:
        """Outermost pipeline boundary: nothing escapes as an exception."""
        try:
            if isinstance(request, PlainChat):
                return await self.run_plain_chat(request)
            if isinstance(request, YouTubeJob):
                return await self.run_youtube(request)
            if isinstance(request, FileJob):
                return await self.run_file(request)
            raise TypeError(f"Unknown pipeline request: {type(request).__name__}")
        except Exception:
            logger.exception("Pipeline %s crashed", getattr(request, "kind", "?"))
            return StageResult.failure(ErrorKind.UNEXPECTED, messages.BACKEND_DISCONNECTED)

    # --- stage helpers ---

    async def _call(
        self,
        stage: str,
        call: Awaitable[Any],
        timeout: float,
        failure_message: str,
    ) -> StageResult:
        try:
            value = await asyncio.wait_for(call, timeout)
        except asyncio.TimeoutError:
            logger.error("Stage %s timed out after %.0fs", stage, timeout)
            return StageResult.failure(ErrorKind.TIMEOUT, messages.SERVICE_TIMEOUT)
        except TranscriptionStatusError as e:
            logger.error("Transcript failed: %s", e.engine_error)
            return StageResult.failure(
                ErrorKind.UPSTREAM_ERROR, messages.TRANSCRIPTION_FAILED + e.engine_error
            )
        except AdapterError as e:
            logger.error("Stage %s failed: %s", stage, e)
            return StageResult.failure(ErrorKind.UPSTREAM_FAILURE, failure_message)
        return StageResult.success(str(value or ""))

    @staticmethod
    def _require_text(result: StageResult, empty_message: str) -> StageResult:
        if result.ok and not result.text.strip():
            return StageResult.failure(ErrorKind.UPSTREAM_EMPTY, empty_message)
        return result

    async def _complete(self, chat_messages, temperature, failure_message, empty_message, vision=False):
        result = await self._call(
            "completion",
            self.completion.complete(chat_messages, temperature=temperature, vision=vision),
            self.settings.timeouts.completion,
            failure_message,
        )
        return self._require_text(result, empty_message)

    # --- pipelines ---

    async def run_plain_chat(self, job: PlainChat) -> StageResult:
        chat_messages = [{"role": "system", "content": prompts.CHAT_SYSTEM_PROMPT}]
        chat_messages.extend(turn.model_dump() for turn in job.conversation)
        return await self._complete(
            chat_messages,
            self.settings.ai.chat_temperature,
            messages.BACKEND_DISCONNECTED,
            messages.EMPTY_CHAT_REPLY,
        )

    async def run_youtube(self, job: YouTubeJob) -> StageResult:
        logger.info("YT transcribe hit with: url=%s question=%r", job.url, job.question)
        timeouts = self.settings.timeouts
        audio = TemporaryArtifact(
            unique_artifact_path(self.settings.media.temp_dir, "phoenix", ".webm")
        )

        with audio:
            # 1) Download audio
            fetched = await self._call(
                "media_fetch",
                self.media_fetch.fetch_audio(job.url, audio.path),
                timeouts.media_fetch,
                messages.YOUTUBE_FAILED,
            )
            if not fetched.ok:
                return fetched
            logger.info("Audio downloaded to: %s", audio.path)

            # 2) Transcribe
            transcribed = self._require_text(
                await self._call(
                    "transcription",
                    self.transcription.transcribe(audio.path, speaker_labels=False),
                    timeouts.transcription,
                    messages.YOUTUBE_FAILED,
                ),
                messages.TRANSCRIPT_EMPTY,
            )
            if not transcribed.ok:
                return transcribed

            # 3) Trim transcript for token limit
            transcript = truncate(
                transcribed.text, self.settings.limits.transcript_max_chars, "Transcript"
            )

            # 4) Summarize / answer
            question = job.question or prompts.DEFAULT_YOUTUBE_QUESTION
            return await self._complete(
                [
                    {"role": "system", "content": prompts.YOUTUBE_SYSTEM_PROMPT},
                    {"role": "user", "content": prompts.youtube_user_message(transcript, question)},
                ],
                self.settings.ai.youtube_temperature,
                messages.YOUTUBE_FAILED,
                messages.EMPTY_TRANSCRIPT_REPLY,
            )

    async def run_file(self, job: FileJob) -> StageResult:
        with job.artifact:
            family = job.family
            logger.info("File analyze: %s (%s, %d bytes)", job.artifact.path.name, job.mime_type, job.size_bytes)
            if family is MediaFamily.IMAGE:
                return await self._analyze_image(job)
            if family is MediaFamily.PDF:
                return await self._analyze_pdf(job)
            return StageResult.failure(ErrorKind.UNSUPPORTED_MEDIA, messages.UNSUPPORTED_FILE)

    async def _analyze_image(self, job: FileJob) -> StageResult:
        image_bytes = await asyncio.to_thread(job.artifact.read_bytes)
        data_url = f"data:{job.mime_type};base64," + base64.b64encode(image_bytes).decode("ascii")
        chat_messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": job.question + prompts.IMAGE_INSTRUCTION},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            }
        ]
        return await self._complete(
            chat_messages,
            None,
            messages.FILE_FAILED,
            messages.EMPTY_IMAGE_REPLY,
            vision=True,
        )

    async def _analyze_pdf(self, job: FileJob) -> StageResult:
        pdf_bytes = await asyncio.to_thread(job.artifact.read_bytes)
        extracted = await self._call(
            "pdf_extract",
            asyncio.to_thread(self.pdf_extractor, pdf_bytes),
            self.settings.timeouts.pdf_extract,
            messages.FILE_FAILED,
        )
        if not extracted.ok:
            return extracted

        text = normalize_whitespace(extracted.text)
        if not text:
            return StageResult.failure(ErrorKind.UPSTREAM_EMPTY, messages.PDF_NO_TEXT)
        text = truncate(text, self.settings.limits.pdf_max_chars, "PDF text")

        return await self._complete(
            [
                {"role": "system", "content": prompts.PDF_SYSTEM_PROMPT},
                {"role": "user", "content": prompts.pdf_user_message(text, job.question)},
            ],
            self.settings.ai.pdf_temperature,
            messages.FILE_FAILED,
            messages.EMPTY_PDF_REPLY,
        )
