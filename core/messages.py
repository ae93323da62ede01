# User-facing reply texts. These never carry technical detail.

BACKEND_DISCONNECTED = (
    "Bro Damnn it someone just disconnected me from the backend. "
    "Man I have to cut these guys salary."
)
SERVICE_TIMEOUT = "The AI service took too long to respond. Try again in a bit."
INVALID_REQUEST = "Invalid request."

# /api/chat
MESSAGES_REQUIRED = "messages array required"
EMPTY_CHAT_REPLY = "Empty reply from Phoenix. Try asking again."

# /api/youtube-transcribe
YOUTUBE_URL_REQUIRED = "YouTube URL is required."
YOUTUBE_FAILED = "Phoenix couldn't process this YouTube video right now. Try another link or later."
TRANSCRIPTION_FAILED = "Transcription failed: "
TRANSCRIPT_EMPTY = "Transcription completed but text was empty."
EMPTY_TRANSCRIPT_REPLY = "Empty reply from Groq for this transcript."

# /api/file-analyze
NO_FILE = "No file uploaded."
UNSUPPORTED_FILE = "Only images and PDFs are supported right now."
FILE_FAILED = "Phoenix couldn't analyze this file right now. Try another one or smaller size."
PDF_NO_TEXT = "Could not extract any text from this PDF."
EMPTY_IMAGE_REPLY = "Empty reply from Phoenix for this image."
EMPTY_PDF_REPLY = "Empty reply from Groq for this PDF."

# Client error message per route, used when the request body fails validation
CLIENT_ERRORS_BY_PATH = {
    "/api/chat": MESSAGES_REQUIRED,
    "/api/message": MESSAGES_REQUIRED,
    "/api/youtube-transcribe": YOUTUBE_URL_REQUIRED,
    "/api/file-analyze": NO_FILE,
}
