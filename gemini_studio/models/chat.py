"""Chat turn model."""

from dataclasses import dataclass, field
from enum import Enum

from ..utils import now_ms


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class ChatTurn:
    """One message in a conversation."""

    role: Role
    text: str
    timestamp: int = field(default_factory=now_ms)
