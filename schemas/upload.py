from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
from core.file_manager import TemporaryArtifact
from utils.file_validator import MediaFamily, media_family

class FileJob(BaseModel):
    """An uploaded file waiting for analysis. Owns the on-disk artifact."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["file"] = "file"
    artifact: TemporaryArtifact
    mime_type: str
    question: str
    size_bytes: int = Field(0, description="File size in bytes")

    @property
    def family(self) -> MediaFamily:
        return media_family(self.mime_type)
