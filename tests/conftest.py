"""
Shared fixtures: fake adapters, isolated settings and a TestClient wired to them.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import AppSettings, FileSettings, MediaSettings, TimeoutSettings
from main import create_app
from services.pipeline_runner import PipelineRunner

from helpers import FakeCompletion, FakeMediaFetch, FakeTranscription


@pytest.fixture
def test_settings(tmp_path):
    return AppSettings(
        groq_api_key="",
        assemblyai_api_key="",
        files=FileSettings(uploads_dir=str(tmp_path / "uploads")),
        media=MediaSettings(temp_dir=str(tmp_path / "tmp")),
        timeouts=TimeoutSettings(completion=5, transcription=5, media_fetch=5, pdf_extract=5),
    )


@pytest.fixture
def completion():
    return FakeCompletion()


@pytest.fixture
def transcription():
    return FakeTranscription()


@pytest.fixture
def media_fetch():
    return FakeMediaFetch()


@pytest.fixture
def runner(completion, transcription, media_fetch, test_settings):
    return PipelineRunner(completion, transcription, media_fetch, test_settings)


@pytest.fixture
def client(runner, test_settings):
    app = create_app(runner=runner, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client
