"""Business logic services."""

from .banner import BannerService
from .chat import ChatSession, SessionState
from .diagnosis import DiagnosisService
from .history import FeedbackService, HistoryService
from .media import load_image, make_thumbnail

__all__ = [
    "BannerService",
    "ChatSession",
    "SessionState",
    "DiagnosisService",
    "FeedbackService",
    "HistoryService",
    "load_image",
    "make_thumbnail",
]
