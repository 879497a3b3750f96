"""Shared field types for schema-declared results."""

from typing import Annotated

from pydantic import AfterValidator


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _require_items(value: list) -> list:
    if not value:
        raise ValueError("must contain at least one item")
    return value


# Validated locally after decoding; not part of the schema sent to the model.
NonEmptyStr = Annotated[str, AfterValidator(_require_text)]
NonEmptyList = Annotated[list[NonEmptyStr], AfterValidator(_require_items)]
