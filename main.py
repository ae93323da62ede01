import logging
from pathlib import Path
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from config.settings import AppSettings, get_settings
from core.responses import register_exception_handlers
from router import chat, file_upload, youtube
from services.pipeline_runner import PipelineRunner

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(runner: Optional[PipelineRunner] = None, settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the app. Adapters are constructed once here and shared by every
    request; pass `runner` to substitute them.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description=settings.api.description
    )
    app.state.settings = settings
    app.state.runner = runner or PipelineRunner.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(chat.router)
    app.include_router(youtube.router)
    app.include_router(file_upload.router)

    static_dir = Path(settings.api.static_dir)
    index_file = static_dir / "index.html"

    @app.get("/health")
    def health():
        return {
            "status": "running",
        }

    @app.get("/", include_in_schema=False)
    def root():
        if index_file.is_file():
            return FileResponse(index_file)
        return health()

    # Static UI assets are served as-is
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")

    return app


configure_logging(get_settings().log_level)
app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger.info("PHOENIX MARK 4 running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
