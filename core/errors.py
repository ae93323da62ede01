class AdapterError(Exception):
    """Raised when an external service call fails at the transport or service level"""


class CompletionError(AdapterError):
    pass


class TranscriptionError(AdapterError):
    pass


class TranscriptionStatusError(TranscriptionError):
    """The transcription engine finished but reported an error status"""

    def __init__(self, engine_error: str):
        super().__init__(f"Transcription engine reported an error: {engine_error}")
        self.engine_error = engine_error


class MediaFetchError(AdapterError):
    pass


class PdfExtractionError(AdapterError):
    pass
