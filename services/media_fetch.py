import asyncio
import logging
from pathlib import Path
from config.settings import AppSettings
from core.errors import MediaFetchError

logger = logging.getLogger(__name__)

class YtDlpMediaFetch:
    """Media-Fetch adapter: runs the yt-dlp CLI to pull best audio to a given path"""

    def __init__(self, settings: AppSettings):
        self.ytdlp_path = settings.media.ytdlp_path
        self.audio_format = settings.media.audio_format

    def build_command(self, url: str, destination: Path) -> list[str]:
        return [self.ytdlp_path, "-f", self.audio_format, "-o", str(destination), "--no-part", url]

    async def fetch_audio(self, url: str, destination: Path) -> Path:
        cmd = self.build_command(url, destination)
        logger.info("Running yt-dlp with args: %s", cmd)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise MediaFetchError(f"Could not start yt-dlp: {e}") from e

        try:
            _, stderr = await proc.communicate()
        except asyncio.CancelledError:
            # Timed out or cancelled upstream; do not leave yt-dlp running
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise

        if proc.returncode != 0:
            err = (stderr or b"").decode("utf-8", errors="replace").strip()
            raise MediaFetchError(f"yt-dlp exited with {proc.returncode}: {err[-1500:]}")

        if not destination.exists():
            raise MediaFetchError("yt-dlp did not produce audio file")

        return destination
