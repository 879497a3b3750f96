"""Gemini client for schema-constrained, free-text and chat generation."""

import base64
import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from ..config import get_api_key
from ..errors import ConfigurationError, EmptyResponseError, GenerationError, ResponseValidationError
from ..models.chat import ChatTurn
from ..models.media import MediaPayload

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


class GeminiClient:
    """Single-attempt client around google-genai.

    Every call is one request: no retry, no backoff. Failures surface as
    GenerationError subclasses; structured calls never return raw text.
    """

    def __init__(self, api_key: str | None, model: str):
        if not api_key:
            raise ConfigurationError("API Key not found in environment.")
        self.client = genai.Client(api_key=api_key)
        self.model = model

    @classmethod
    def from_env(cls, model: str) -> "GeminiClient":
        """Build a client from the credential currently in the environment."""
        return cls(get_api_key(), model)

    @staticmethod
    def image_part(media: MediaPayload) -> types.Part:
        """Inline-data part for an encoded image."""
        return types.Part.from_bytes(data=base64.b64decode(media.data), mime_type=media.mime_type)

    def generate_structured(
        self,
        contents,
        result_type: type[ResultT],
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        thinking_budget: int | None = None,
    ) -> ResultT:
        """
        Generate JSON constrained to result_type's schema and decode it.

        Args:
            contents: Prompt text, parts, or a list of either.
            result_type: Pydantic model declaring the expected shape.
            system_instruction: Optional system prompt.
            temperature: Optional sampling temperature.
            thinking_budget: Optional thinking token budget.

        Returns:
            A validated result_type instance.

        Raises:
            EmptyResponseError: The model returned no text.
            ResponseValidationError: The text is not valid JSON for result_type.
            GenerationError: The request itself failed.
        """
        config = self._build_config(
            system_instruction=system_instruction,
            temperature=temperature,
            thinking_budget=thinking_budget,
            response_mime_type="application/json",
            response_schema=result_type,
        )
        text = self._generate(contents, config)
        try:
            return result_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Response did not match {result_type.__name__}: {e}")
            raise ResponseValidationError(
                f"Failed to parse {result_type.__name__} from model response", raw_output=text
            ) from e

    def generate_text(
        self,
        contents,
        *,
        system_instruction: str | None = None,
        thinking_budget: int | None = None,
    ) -> str:
        """Generate free text."""
        config = self._build_config(
            system_instruction=system_instruction,
            thinking_budget=thinking_budget,
        )
        return self._generate(contents, config)

    def chat(
        self,
        history: list[ChatTurn],
        message: str,
        *,
        system_instruction: str | None = None,
    ) -> str:
        """Replay history plus a new user message and return the reply text."""
        contents = [
            types.Content(role=turn.role.value, parts=[types.Part(text=turn.text)])
            for turn in history
        ]
        contents.append(types.Content(role="user", parts=[types.Part(text=message)]))
        config = self._build_config(system_instruction=system_instruction)
        return self._generate(contents, config)

    def _build_config(
        self,
        system_instruction: str | None = None,
        temperature: float | None = None,
        thinking_budget: int | None = None,
        **kwargs,
    ) -> types.GenerateContentConfig:
        if system_instruction is not None:
            kwargs["system_instruction"] = system_instruction
        if temperature is not None:
            kwargs["temperature"] = temperature
        if thinking_budget is not None:
            kwargs["thinking_config"] = types.ThinkingConfig(thinking_budget=thinking_budget)
        return types.GenerateContentConfig(**kwargs)

    def _generate(self, contents, config: types.GenerateContentConfig) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini API error ({self.model}): {e}")
            raise GenerationError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise EmptyResponseError("No response text received from Gemini.")
        return text
