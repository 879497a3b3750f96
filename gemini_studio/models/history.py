"""History and feedback models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .diagnosis import PlantDiagnosis


class Vote(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class HistoryRecord:
    """A past diagnosis kept in the history strip."""

    id: str
    timestamp: int
    thumbnail: str       # data URL
    diagnosis: str
    plant_name: str
    result: PlantDiagnosis

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "thumbnail": self.thumbnail,
            "diagnosis": self.diagnosis,
            "plantName": self.plant_name,
            "result": self.result.model_dump(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryRecord":
        return cls(
            id=str(data["id"]),
            timestamp=int(data["timestamp"]),
            thumbnail=data["thumbnail"],
            diagnosis=data["diagnosis"],
            plant_name=data["plantName"],
            result=PlantDiagnosis.model_validate(data["result"]),
        )
