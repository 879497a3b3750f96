"""Data models."""

from .banner import BannerRequest, BannerSpec, VisualDirection
from .chat import ChatTurn, Role
from .diagnosis import PlantDiagnosis, PlantMetadata, RecommendedStep, Safety, SevenDayCarePlan
from .history import HistoryRecord, Vote
from .media import MediaPayload

__all__ = [
    "BannerRequest",
    "BannerSpec",
    "VisualDirection",
    "ChatTurn",
    "Role",
    "PlantDiagnosis",
    "PlantMetadata",
    "RecommendedStep",
    "Safety",
    "SevenDayCarePlan",
    "HistoryRecord",
    "Vote",
    "MediaPayload",
]
