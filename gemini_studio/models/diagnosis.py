"""PlantDoctor request and result models."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..config import LOW_CONFIDENCE_THRESHOLD
from .fields import NonEmptyStr


@dataclass(frozen=True)
class PlantMetadata:
    """Optional user-provided context for a diagnosis."""

    plant_name: str = ""
    age: str = ""
    environment: str = "Indoor"
    sunlight: str = ""
    watering: str = ""
    fertilizer: str = ""
    soil_type: str = ""
    potted: str = ""
    recent_changes: str = ""
    previous_issues: str = ""


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Safety(_FrozenModel):
    recommendation_level: Literal["informational", "seek-expert", "emergency"]
    safety_text: str = Field(description="Safety instructions regarding treatments or handling.")
    confidence: float = Field(ge=0, le=100)
    evidence: list[str]


class RecommendedStep(_FrozenModel):
    step: int
    action: str
    duration: str
    tools: list[str]


class SevenDayCarePlan(_FrozenModel):
    day1: str
    day2: str
    day3: str
    day4: str
    day5: str
    day6: str
    day7: str

    def days(self) -> list[str]:
        return [self.day1, self.day2, self.day3, self.day4, self.day5, self.day6, self.day7]


class PlantDiagnosis(_FrozenModel):
    """Diagnostic report returned by the analysis call."""

    diagnosis: NonEmptyStr = Field(description="Short diagnosis label (e.g., Fungal Leaf Spot)")
    confidence: float = Field(ge=0, le=100, description="Confidence score 0-100")
    safety: Safety
    plant_name_identified: str = Field(
        description="The identified name of the plant (e.g., Ficus elastica)"
    )
    causes: list[str] = Field(description="List of potential causes")
    severity: Literal["low", "medium", "high"] = Field(description="Severity level of the issue")
    visual_markup: str = Field(
        description="Description of where the issue is located on the plant (e.g. 'lower left leaves')"
    )
    evidence: list[str] = Field(
        description="List of max 3 evidence sentences justifying the diagnosis"
    )
    explanation_simple: str = Field(description="One paragraph ELI5 explanation")
    recommended_steps: list[RecommendedStep]
    seven_day_care_plan: SevenDayCarePlan
    preventive_tips: list[str]
    follow_up_tests: list[str]
    unclear: bool | None = Field(default=None, description="True if image is too blurry or not a plant")
    advice: str | None = Field(default=None, description="Advice if image is unclear")

    @property
    def safety_confidence(self) -> float:
        """Safety-block confidence, which supersedes the top-level score."""
        return self.safety.confidence

    @property
    def is_low_confidence(self) -> bool:
        return self.safety_confidence < LOW_CONFIDENCE_THRESHOLD
