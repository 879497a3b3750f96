"""PlantDoctor controller - diagnosis, history, feedback and follow-up chat state."""

import logging
from pathlib import Path
from typing import BinaryIO

from ..clients.gemini import GeminiClient
from ..clients.store import LocalStore
from ..config import DIAGNOSIS_MODEL
from ..errors import ConfigurationError, GeminiStudioError, GenerationError, SessionNotStartedError
from ..models.diagnosis import PlantDiagnosis, PlantMetadata
from ..models.history import HistoryRecord, Vote
from ..services.chat import ChatSession
from ..services.diagnosis import DiagnosisService
from ..services.history import FeedbackService, HistoryService
from ..services.media import load_image, make_thumbnail

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "API Key not found in environment."
ANALYSIS_ERROR_MESSAGE = (
    "Could not analyze the image. Please try a clearer photo or check your connection."
)
CHAT_ERROR_MESSAGE = "Sorry, I'm having trouble connecting right now."


class PlantDoctorApp:
    """Holds the current diagnosis, its chat, and the persisted history."""

    def __init__(self, store: LocalStore, model: str = DIAGNOSIS_MODEL):
        self.model = model
        self.history_service = HistoryService(store)
        self.feedback_service = FeedbackService(store)
        self.result: PlantDiagnosis | None = None
        self.image_preview: str | None = None
        self.error: str | None = None
        self.metadata = PlantMetadata()
        self.chat: ChatSession | None = None

    @property
    def history(self) -> list[HistoryRecord]:
        return self.history_service.records()

    @property
    def feedback(self) -> Vote | None:
        if self.result is None:
            return None
        return self.feedback_service.get(self.result.diagnosis)

    def diagnose(
        self,
        source: str | Path | BinaryIO,
        metadata: PlantMetadata | None = None,
        mime_type: str | None = None,
    ) -> PlantDiagnosis | None:
        """
        Run a full diagnosis for an uploaded photo.

        On success the result is stored in history and a follow-up chat
        seeded with it replaces any previous chat. On failure error is set
        and None is returned.
        """
        if metadata is not None:
            self.metadata = metadata
        self._reset_result()

        try:
            media = load_image(source, mime_type)
            self.image_preview = media.data_url
            thumbnail = make_thumbnail(media)
            service = self._service()
            result = service.analyze(media, self.metadata)
            chat = service.follow_up_session(result)
        except ConfigurationError as e:
            logger.error(f"Analysis blocked: {e}")
            self.error = CONFIG_ERROR_MESSAGE
            return None
        except GeminiStudioError as e:
            logger.error(f"Analysis Failed: {e}")
            self.error = ANALYSIS_ERROR_MESSAGE
            return None

        self.history_service.add(HistoryService.build_record(result, thumbnail, self.metadata))
        self.result = result
        self.chat = chat
        return result

    def ask(self, text: str) -> str:
        """
        Ask a follow-up question about the current diagnosis.

        Raises:
            SessionNotStartedError: No diagnosis is loaded yet.
        """
        if self.chat is None:
            if self.result is None:
                raise SessionNotStartedError("Chat session not initialized. Analyze a plant first.")
            try:
                self.chat = self._service().follow_up_session(self.result)
            except ConfigurationError as e:
                logger.error(f"Chat blocked: {e}")
                return CHAT_ERROR_MESSAGE
        try:
            return self.chat.send(text)
        except GenerationError as e:
            logger.error(f"Chat Error: {e}")
            return CHAT_ERROR_MESSAGE

    def restore(self, record_id: str) -> PlantDiagnosis | None:
        """Show a past diagnosis; its chat is opened on the next question."""
        record = self.history_service.get(record_id)
        if record is None:
            return None
        self._reset_result()
        self.result = record.result
        self.image_preview = record.thumbnail
        return record.result

    def vote(self, vote: Vote) -> None:
        if self.result is None:
            raise ValueError("No diagnosis to vote on")
        self.feedback_service.vote(self.result.diagnosis, vote)

    def clear(self) -> None:
        self._reset_result()
        self.metadata = PlantMetadata()

    def _reset_result(self) -> None:
        if self.chat is not None:
            self.chat.discard()
        self.chat = None
        self.result = None
        self.image_preview = None
        self.error = None

    def _service(self) -> DiagnosisService:
        return DiagnosisService(GeminiClient.from_env(self.model))
