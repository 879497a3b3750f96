"""BannerCraft controller - form, asset analyzer and director chat state."""

import logging
from pathlib import Path
from typing import BinaryIO

from ..clients.gemini import GeminiClient
from ..config import BANNER_MODEL
from ..errors import ConfigurationError, GeminiStudioError, GenerationError
from ..models.banner import BannerRequest, BannerSpec
from ..services.banner import DEFAULT_ANALYSIS_PROMPT, BannerService
from ..services.chat import ChatSession
from ..services.media import load_image

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "API key not found. Set GEMINI_API_KEY and try again."
GENERATE_ERROR_MESSAGE = "Failed to generate banner. Please check API key and try again."
ANALYZE_ERROR_MESSAGE = "Failed to analyze image. Please ensure your API key is valid."
CHAT_ERROR_MESSAGE = "Sorry, I encountered a glitch in my neural network. Please try again."


class BannerCraftApp:
    """Holds what the BannerCraft screens display and maps failures to messages."""

    def __init__(self, model: str = BANNER_MODEL):
        self.model = model
        self.spec: BannerSpec | None = None
        self.analysis: str | None = None
        self.error: str | None = None
        self.chat: ChatSession | None = None

    def generate(self, request: BannerRequest) -> BannerSpec | None:
        """Generate a banner spec; on failure set error and return None."""
        self.spec = None
        self.error = None
        try:
            self.spec = self._service().generate_strategy(request)
        except ConfigurationError as e:
            logger.error(f"Banner generation blocked: {e}")
            self.error = CONFIG_ERROR_MESSAGE
        except GeminiStudioError as e:
            logger.error(f"Banner Generation Error: {e}")
            self.error = GENERATE_ERROR_MESSAGE
        return self.spec

    def analyze(
        self,
        source: str | Path | BinaryIO,
        prompt_text: str = DEFAULT_ANALYSIS_PROMPT,
        mime_type: str | None = None,
    ) -> str:
        """Analyze an uploaded asset; the failure message replaces the analysis."""
        self.analysis = None
        try:
            media = load_image(source, mime_type)
            self.analysis = self._service().analyze_image(media, prompt_text)
        except GeminiStudioError as e:
            logger.error(f"Image Analysis Error: {e}")
            self.analysis = ANALYZE_ERROR_MESSAGE
        return self.analysis

    def ask(self, text: str) -> str:
        """Send a chat message to the creative director."""
        try:
            if self.chat is None:
                self.chat = self._service().new_chat()
            return self.chat.send(text)
        except (ConfigurationError, GenerationError) as e:
            logger.error(f"Chat Error: {e}")
            return CHAT_ERROR_MESSAGE

    def _service(self) -> BannerService:
        return BannerService(GeminiClient.from_env(self.model))
