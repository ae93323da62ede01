import asyncio
import logging
from pathlib import Path
import assemblyai as aai
from config.settings import AppSettings
from core.errors import TranscriptionError, TranscriptionStatusError

logger = logging.getLogger(__name__)

class AssemblyAITranscription:
    """Transcription adapter: local audio file in, transcript text out"""

    def __init__(self, settings: AppSettings):
        if not settings.assemblyai_api_key:
            logger.warning("ASSEMBLYAI_API_KEY is missing; transcription calls will fail")
        aai.settings.api_key = settings.assemblyai_api_key

    async def transcribe(self, audio_path: Path, speaker_labels: bool = False) -> str:
        """
        Uploads and transcribes the file, blocking until AssemblyAI finishes.
        Raises TranscriptionStatusError when the engine reports an error status,
        TranscriptionError when the request itself fails.
        Returns "" when the engine succeeds without text.
        """
        config = aai.TranscriptionConfig(speaker_labels=speaker_labels)
        transcriber = aai.Transcriber(config=config)

        try:
            transcript = await asyncio.to_thread(transcriber.transcribe, str(audio_path))
        except Exception as e:
            raise TranscriptionError(f"AssemblyAI request failed: {e}") from e

        if transcript.status == aai.TranscriptStatus.error:
            raise TranscriptionStatusError(transcript.error or "unknown error")

        return transcript.text or ""
