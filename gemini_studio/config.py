import os
from dotenv import load_dotenv

load_dotenv()

# Models
BANNER_MODEL = os.getenv("BANNER_MODEL", "gemini-3-pro-preview")
DIAGNOSIS_MODEL = os.getenv("DIAGNOSIS_MODEL", "gemini-2.5-flash")

# Sampling / compute-effort per call path
BANNER_THINKING_BUDGET = 32768  # deep creative strategy
ANALYZER_THINKING_BUDGET = 1024
DIAGNOSIS_TEMPERATURE = 0.4

# Local persistence
STORE_PATH = os.getenv("GEMINI_STUDIO_STORE", ".gemini_studio.json")
HISTORY_KEY = "plant_doctor_history"
HISTORY_CAPACITY = 5
FEEDBACK_KEY_PREFIX = "feedback_"

# Below this confidence the diagnosis asks for follow-up tests
LOW_CONFIDENCE_THRESHOLD = 60


def get_api_key() -> str | None:
    """Return the Gemini credential from the environment (read at call time)."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
