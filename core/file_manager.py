import glob
import logging
import time
import uuid
from pathlib import Path
from typing import Union
from fastapi import UploadFile, HTTPException

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


def unique_artifact_path(directory: Union[str, Path], prefix: str, suffix: str = "") -> Path:
    """
    Build a per-request file name so concurrent requests never collide
    in the shared uploads/temp directory.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{prefix}-{time.time_ns()}-{uuid.uuid4().hex[:8]}{suffix}"


class TemporaryArtifact:
    """
    Handle over a transient file (downloaded audio, uploaded file).
    Released on exit from its `with` block whatever the outcome. Release also
    removes `<name>.*` siblings such as a downloader's `.part` file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._released = False

    def exists(self) -> bool:
        return self.path.exists()

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        siblings = self.path.parent.glob(glob.escape(self.path.name) + ".*")
        for path in [self.path, *siblings]:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not delete temporary artifact %s: %s", path, e)

    def __enter__(self) -> "TemporaryArtifact":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"TemporaryArtifact({str(self.path)!r})"


async def save_upload_file_securely(
    file: UploadFile,
    destination: Path,
    max_size: int,
) -> int:
    """
    Reads the upload in chunks and saves it to disk.
    If size exceeds the limit during upload, it stops and deletes the partial file.
    """
    file_size = 0
    limit = max_size

    try:
        with destination.open("wb") as buffer:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break

                file_size += len(chunk)
                if file_size > limit:
                    raise HTTPException(
                        status_code=413,
                        detail=f"File too large. Max size is {limit // (1024 * 1024)}MB.",
                    )

                buffer.write(chunk)
    except Exception:
        # If anything goes wrong, clean up the partial file
        if destination.exists():
            destination.unlink()
        raise

    return file_size
