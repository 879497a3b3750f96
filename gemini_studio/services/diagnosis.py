"""PlantDoctor service - image diagnosis and seeded follow-up chat."""

from dataclasses import asdict

from ..clients.gemini import GeminiClient
from ..config import DIAGNOSIS_TEMPERATURE
from ..models.diagnosis import PlantDiagnosis, PlantMetadata
from ..models.media import MediaPayload
from ..utils import load_prompt
from .chat import ChatSession

# Metadata fields rendered as "Unknown" when left blank
_UNKNOWN_WHEN_BLANK = ("plant_name", "age", "watering")

FOLLOW_UP_GREETING = "I've analyzed your plant! Do you have any specific questions about the care plan?"


class DiagnosisService:
    """Diagnose plant photos and open follow-up chats about the result."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    def analyze(self, media: MediaPayload, metadata: PlantMetadata) -> PlantDiagnosis:
        """
        Diagnose a plant image.

        Args:
            media: Encoded plant photo.
            metadata: Optional user context; visual evidence wins on conflict.

        Returns:
            A validated PlantDiagnosis.
        """
        contents = [GeminiClient.image_part(media), self._build_request(metadata)]

        print("Analyzing plant image...", flush=True)
        result = self.gemini.generate_structured(
            contents,
            PlantDiagnosis,
            system_instruction=load_prompt("diagnosis_system"),
            temperature=DIAGNOSIS_TEMPERATURE,
        )
        print(f"  Diagnosis: {result.diagnosis} ({result.severity}, {result.confidence:.0f}%)", flush=True)
        return result

    def follow_up_session(self, result: PlantDiagnosis) -> ChatSession:
        """Start a chat whose context is the given diagnosis."""
        seed = load_prompt("diagnosis_followup_seed").format(diagnosis_json=result.model_dump_json())
        session = ChatSession(
            self.gemini,
            system_instruction=load_prompt("diagnosis_followup"),
            greeting=FOLLOW_UP_GREETING,
        )
        return session.start(seed)

    def _build_request(self, metadata: PlantMetadata) -> str:
        values = asdict(metadata)
        for name in _UNKNOWN_WHEN_BLANK:
            values[name] = values[name] or "Unknown"
        return load_prompt("diagnosis_request").format(**values)
