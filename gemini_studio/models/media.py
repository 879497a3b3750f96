"""Encoded image payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaPayload:
    """Base64 image data plus its content type."""

    data: str       # base64, no data-URL prefix
    mime_type: str  # e.g. "image/png"

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"
