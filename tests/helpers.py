"""Fake adapters and small helpers shared by the tests."""

import asyncio
from pathlib import Path


class FakeCompletion:
    def __init__(self, reply="Hello from Phoenix", error=None, delay=0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def complete(self, messages, temperature=None, vision=False):
        self.calls.append({"messages": messages, "temperature": temperature, "vision": vision})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.reply


class FakeTranscription:
    def __init__(self, text="transcript text", error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def transcribe(self, audio_path, speaker_labels=False):
        audio_path = Path(audio_path)
        self.calls.append({"audio_path": audio_path, "exists": audio_path.exists(), "speaker_labels": speaker_labels})
        if self.error:
            raise self.error
        return self.text


class FakeMediaFetch:
    def __init__(self, error=None):
        self.error = error
        self.destinations = []

    async def fetch_audio(self, url, destination):
        destination = Path(destination)
        self.destinations.append(destination)
        if self.error:
            raise self.error
        destination.write_bytes(b"fake audio")
        return destination


def files_in(directory) -> list:
    directory = Path(directory)
    if not directory.exists():
        return []
    return [p for p in directory.iterdir() if p.is_file()]
