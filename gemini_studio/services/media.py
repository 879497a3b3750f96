"""Media ingestion - image files to base64 payloads."""

import base64
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from ..errors import MediaDecodeError, MediaReadError
from ..models.media import MediaPayload


def load_image(source: str | Path | BinaryIO, mime_type: str | None = None) -> MediaPayload:
    """
    Read an image file fully and encode it for transport.

    Args:
        source: Path or binary file object.
        mime_type: Caller-reported content type. Detected from the image
            format when omitted.

    Returns:
        MediaPayload with base64 data and an image/* MIME type.

    Raises:
        MediaReadError: The file could not be read.
        MediaDecodeError: The bytes are not a supported image.
    """
    raw = _read_bytes(source)
    detected = _detect_mime(raw)

    mime_type = mime_type or detected
    if not mime_type.startswith("image/"):
        raise MediaDecodeError(f"Unsupported media type: {mime_type}")

    return MediaPayload(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)


def make_thumbnail(media: MediaPayload, max_size: int = 256) -> MediaPayload:
    """Return a reduced copy of an image payload for history previews."""
    try:
        img = Image.open(BytesIO(base64.b64decode(media.data)))
        img.thumbnail((max_size, max_size))
    except Exception as e:
        raise MediaDecodeError(f"Could not build thumbnail: {e}") from e

    if img.mode in ("RGBA", "LA", "P"):
        img = img.convert("RGBA")
        fmt, mime_type = "PNG", "image/png"
    else:
        img = img.convert("RGB")
        fmt, mime_type = "JPEG", "image/jpeg"

    output = BytesIO()
    img.save(output, format=fmt)
    return MediaPayload(data=base64.b64encode(output.getvalue()).decode("ascii"), mime_type=mime_type)


def _read_bytes(source: str | Path | BinaryIO) -> bytes:
    try:
        if isinstance(source, (str, Path)):
            return Path(source).read_bytes()
        return source.read()
    except (OSError, ValueError) as e:
        raise MediaReadError(f"Failed to read image: {e}") from e


def _detect_mime(raw: bytes) -> str:
    """Decode the header with Pillow and map its format to a MIME type."""
    if not raw:
        raise MediaDecodeError("Image file is empty")
    try:
        img = Image.open(BytesIO(raw))
        img.verify()
        # verify() only checks structure; decode the pixels too
        Image.open(BytesIO(raw)).load()
    except Exception as e:
        raise MediaDecodeError(f"Could not decode image: {e}") from e

    mime_type = Image.MIME.get(img.format or "")
    if not mime_type:
        raise MediaDecodeError(f"Unsupported image format: {img.format}")
    return mime_type
