"""API clients and local persistence."""

from .gemini import GeminiClient
from .store import LocalStore

__all__ = ["GeminiClient", "LocalStore"]
