import tempfile
from typing import List
from functools import lru_cache
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class FileSettings(BaseModel):
    """File upload related configuration"""
    max_file_size: int = 5  # MB
    uploads_dir: str = "uploads"

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size * 1024 * 1024

class APISettings(BaseModel):
    """API related configuration"""
    title: str = "PHOENIX MARK 4"
    version: str = "1.0.0"
    description: str = "Chat, YouTube summaries and file analysis backed by Groq and AssemblyAI"
    cors_origins: List[str] = ["*"]
    static_dir: str = "public"

class AISettings(BaseModel):
    """Model selection and sampling"""
    chat_model: str = "llama-3.1-8b-instant"
    vision_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    chat_temperature: float = 0.7
    youtube_temperature: float = 0.5
    pdf_temperature: float = 0.4

class MediaSettings(BaseModel):
    """yt-dlp invocation"""
    ytdlp_path: str = "yt-dlp"
    audio_format: str = "bestaudio"
    temp_dir: str = Field(default_factory=tempfile.gettempdir)

class LimitSettings(BaseModel):
    """Character ceilings applied before summarization"""
    transcript_max_chars: int = 5500
    pdf_max_chars: int = 6000

class TimeoutSettings(BaseModel):
    """Per adapter call timeouts in seconds"""
    completion: float = 120.0
    transcription: float = 900.0
    media_fetch: float = 600.0
    pdf_extract: float = 60.0

class AppSettings(BaseSettings):
    """Main application settings"""
    # Credentials and server, read from flat env names (GROQ_API_KEY, PORT, ...)
    groq_api_key: str = ""
    assemblyai_api_key: str = ""
    host: str = "0.0.0.0"
    port: int = 5100
    log_level: str = "INFO"

    # Nested configurations
    api: APISettings = Field(default_factory=APISettings)
    files: FileSettings = Field(default_factory=FileSettings)
    ai: AISettings = Field(default_factory=AISettings)
    media: MediaSettings = Field(default_factory=MediaSettings)
    limits: LimitSettings = Field(default_factory=LimitSettings)
    timeouts: TimeoutSettings = Field(default_factory=TimeoutSettings)

    # Pydantic settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached settings instance.
    Using lru_cache ensures settings are loaded only once.
    """
    return AppSettings()

# Create a global settings instance
settings = get_settings()
