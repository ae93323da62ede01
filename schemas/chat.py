from pydantic import BaseModel, Field
from typing import List, Literal, Optional

class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str

# Request bodies. Required fields are Optional here so the routes can
# answer with their own 400 messages instead of a generic validation error.
class ChatRequest(BaseModel):
    messages: Optional[List[ChatTurn]] = None

class YouTubeRequest(BaseModel):
    url: Optional[str] = None
    question: Optional[str] = None

# Reply envelope: exactly one of these is returned
class ChatReply(BaseModel):
    reply: str

class ErrorReply(BaseModel):
    error: str

# Pipeline requests produced by the classifier
class PlainChat(BaseModel):
    kind: Literal["plain_chat"] = "plain_chat"
    conversation: List[ChatTurn] = Field(default_factory=list)

class YouTubeJob(BaseModel):
    kind: Literal["youtube"] = "youtube"
    url: str
    question: Optional[str] = None
