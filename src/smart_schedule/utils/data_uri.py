"""Helpers for ``data:<mimetype>;base64,<data>`` image URIs."""

from __future__ import annotations

import base64
import binascii
import mimetypes
import re
from pathlib import Path

from smart_schedule.exceptions import InvalidDataUriError

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.S)


def split_data_uri(uri: str) -> tuple[str, str]:
    """Split an image data URI into its MIME type and base64 payload.

    Args:
        uri: The data URI, e.g. ``data:image/png;base64,iVBORw0...``.

    Returns:
        Tuple of (mime_type, base64_payload).

    Raises:
        InvalidDataUriError: If the URI is not a base64 data URI or the
            payload is not valid base64.
    """
    if not isinstance(uri, str):
        raise InvalidDataUriError("data URI must be a string")

    m = _DATA_URI_RE.match(uri.strip())
    if not m:
        raise InvalidDataUriError("expected data:<mimetype>;base64,<encoded_data>")

    payload = "".join(m.group("data").split())
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidDataUriError(f"payload is not valid base64: {e}") from e

    return m.group("mime").lower(), payload


def encode_image_bytes(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def encode_image_file(path: Path) -> str:
    """Read an image file and return it as a base64 data URI.

    The MIME type is guessed from the file extension.

    Raises:
        InvalidDataUriError: If the extension does not map to an image type.
    """
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidDataUriError(f"cannot determine image type for {path.name!r}")
    return encode_image_bytes(path.read_bytes(), mime_type)
