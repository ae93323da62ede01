import asyncio
import logging
from typing import Any, Dict, List, Optional
from groq import Groq
from config.settings import AppSettings
from core.errors import CompletionError

logger = logging.getLogger(__name__)

Message = Dict[str, Any]

class GroqCompletion:
    """Completion adapter: ordered chat messages in, generated text out"""

    def __init__(self, settings: AppSettings):
        self.chat_model = settings.ai.chat_model
        self.vision_model = settings.ai.vision_model
        self.client = None

        # Configure Groq
        if not settings.groq_api_key:
            logger.warning("GROQ_API_KEY is missing; completion calls will fail")
        else:
            self.client = Groq(api_key=settings.groq_api_key)

    async def complete(
        self,
        messages: List[Message],
        temperature: Optional[float] = None,
        vision: bool = False,
    ) -> str:
        """
        Returns the stripped reply text, or "" when the model produced nothing.
        Raises CompletionError when the call itself fails.
        """
        if self.client is None:
            raise CompletionError("Groq client is not configured")

        model = self.vision_model if vision else self.chat_model
        kwargs: Dict[str, Any] = {"model": model, "messages": messages}
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            # Call Groq (run in thread to not block asyncio)
            response = await asyncio.to_thread(self.client.chat.completions.create, **kwargs)
        except Exception as e:
            raise CompletionError(f"Groq request failed: {e}") from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        reply = (content or "").strip()
        logger.info("Groq reply length: %d (model=%s)", len(reply), model)
        return reply
