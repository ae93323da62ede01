"""End-to-end HTTP behaviour through FastAPI's TestClient with fake adapters."""

import fitz
import pytest
from fastapi.testclient import TestClient

from core import messages
from config.settings import FileSettings
from core.errors import MediaFetchError
from main import create_app

from helpers import FakeCompletion, FakeMediaFetch, files_in


def blank_pdf() -> bytes:
    doc = fitz.open()
    doc.new_page()
    data = doc.tobytes()
    doc.close()
    return data


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "running"}


# --- /api/chat ---

def test_chat_returns_reply(client, completion):
    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

    assert response.status_code == 200
    assert response.json() == {"reply": "Hello from Phoenix"}
    assert len(completion.calls) == 1


@pytest.mark.parametrize("body", [{}, {"messages": "hi"}, {"messages": None}, {"messages": [{"content": "no role"}]}])
def test_chat_requires_messages_array(client, completion, body):
    response = client.post("/api/chat", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": messages.MESSAGES_REQUIRED}
    assert completion.calls == []


def test_chat_empty_reply_is_500_not_empty_success(client, completion):
    completion.reply = ""

    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

    assert response.status_code == 500
    body = response.json()
    assert body == {"error": messages.EMPTY_CHAT_REPLY}
    assert "reply" not in body


# --- /api/message ---

def test_message_with_youtube_link_runs_summary(client, completion, media_fetch):
    response = client.post(
        "/api/message",
        json={"messages": [{"role": "user", "content": "https://youtu.be/ABCDEFGHIJK key points?"}]},
    )

    assert response.status_code == 200
    assert len(media_fetch.destinations) == 1
    assert completion.calls[0]["messages"][1]["content"].endswith("User request: key points?")


def test_message_without_link_runs_plain_chat(client, completion, media_fetch):
    response = client.post("/api/message", json={"messages": [{"role": "user", "content": "hello"}]})

    assert response.status_code == 200
    assert media_fetch.destinations == []
    assert completion.calls[0]["messages"][-1] == {"role": "user", "content": "hello"}


def test_message_requires_non_empty_history(client):
    response = client.post("/api/message", json={"messages": []})
    assert response.status_code == 400
    assert response.json() == {"error": messages.MESSAGES_REQUIRED}


# --- /api/youtube-transcribe ---

def test_youtube_requires_url(client, media_fetch):
    response = client.post("/api/youtube-transcribe", json={"question": "summary?"})

    assert response.status_code == 400
    assert response.json() == {"error": messages.YOUTUBE_URL_REQUIRED}
    assert media_fetch.destinations == []


def test_youtube_fetch_failure_returns_500_and_no_temp_file(client, runner, test_settings):
    runner.media_fetch = FakeMediaFetch(error=MediaFetchError("yt-dlp did not produce audio file"))

    response = client.post("/api/youtube-transcribe", json={"url": "https://youtu.be/ABCDEFGHIJK"})

    assert response.status_code == 500
    assert response.json() == {"error": messages.YOUTUBE_FAILED}
    assert files_in(test_settings.media.temp_dir) == []


def test_youtube_success(client, test_settings):
    response = client.post(
        "/api/youtube-transcribe",
        json={"url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ", "question": ""},
    )

    assert response.status_code == 200
    assert response.json() == {"reply": "Hello from Phoenix"}
    assert files_in(test_settings.media.temp_dir) == []


# --- /api/file-analyze ---

def test_file_analyze_requires_file(client):
    response = client.post("/api/file-analyze", data={"question": "what is this?"})

    assert response.status_code == 400
    assert response.json() == {"error": messages.NO_FILE}


def test_unsupported_mime_is_400_and_upload_deleted(client, completion, test_settings):
    response = client.post(
        "/api/file-analyze",
        files={"file": ("notes.txt", b"plain text", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": messages.UNSUPPORTED_FILE}
    assert completion.calls == []
    assert files_in(test_settings.files.uploads_dir) == []


def test_pdf_without_text_is_500_and_no_adapter_call(client, completion, test_settings):
    response = client.post(
        "/api/file-analyze",
        files={"file": ("scan.pdf", blank_pdf(), "application/pdf")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": messages.PDF_NO_TEXT}
    assert completion.calls == []
    assert files_in(test_settings.files.uploads_dir) == []


def test_image_empty_reply_is_500(client, runner, test_settings):
    runner.completion = FakeCompletion(reply="")

    response = client.post(
        "/api/file-analyze",
        files={"file": ("graph.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
        data={"question": "explain the graph"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": messages.EMPTY_IMAGE_REPLY}
    assert files_in(test_settings.files.uploads_dir) == []


def test_image_analysis_success(client, completion, test_settings):
    response = client.post(
        "/api/file-analyze",
        files={"file": ("graph.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )

    assert response.status_code == 200
    assert response.json() == {"reply": "Hello from Phoenix"}
    assert completion.calls[0]["vision"] is True
    assert files_in(test_settings.files.uploads_dir) == []


def test_oversized_upload_rejected_before_pipeline(client, completion, test_settings):
    too_big = b"0" * (test_settings.files.max_file_size_bytes + 1)

    response = client.post(
        "/api/file-analyze",
        files={"file": ("big.pdf", too_big, "application/pdf")},
    )

    assert response.status_code == 413
    assert "error" in response.json()
    assert completion.calls == []
    assert files_in(test_settings.files.uploads_dir) == []


@pytest.fixture
def small_limit_client(runner, test_settings, tmp_path):
    test_settings.files = FileSettings(max_file_size=1, uploads_dir=str(tmp_path / "up"))
    with TestClient(create_app(runner=runner, settings=test_settings)) as test_client:
        yield test_client


def test_content_length_over_configured_limit_rejected_before_saving(small_limit_client, completion, tmp_path):
    two_mb_png = b"\x89PNG\r\n\x1a\n" + b"0" * (2 * 1024 * 1024)

    response = small_limit_client.post(
        "/api/file-analyze",
        files={"file": ("big.png", two_mb_png, "image/png")},
    )

    assert response.status_code == 413
    assert response.json() == {"error": "File too large. Max size is 1MB."}
    assert completion.calls == []
    assert not (tmp_path / "up").exists()


def test_stream_over_configured_limit_rejected_in_configured_dir(small_limit_client, completion, tmp_path):
    # within the multipart allowance of the header check, one byte over the limit on disk
    just_over = b"0" * (1024 * 1024 + 1)

    response = small_limit_client.post(
        "/api/file-analyze",
        files={"file": ("big.pdf", just_over, "application/pdf")},
    )

    assert response.status_code == 413
    assert completion.calls == []
    assert (tmp_path / "up").is_dir()
    assert files_in(tmp_path / "up") == []


def test_upload_under_configured_limit_uses_configured_dir(small_limit_client, completion, tmp_path):
    response = small_limit_client.post(
        "/api/file-analyze",
        files={"file": ("graph.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )

    assert response.status_code == 200
    assert completion.calls[0]["vision"] is True
    assert (tmp_path / "up").is_dir()
    assert files_in(tmp_path / "up") == []
