"""
Compact string encoding of build records.

Builds are serialized as compact JSON, deflated with zlib and encoded with
base64 so that they can be shared as a single printable string.
"""

from __future__ import annotations

import base64
import binascii
import json
import zlib

from .errors import ImportExportError


def compress(obj: dict) -> str:
    """
    Encode a build record as a compact string.

    Args:
        obj: JSON-serializable build record (ship or module).

    Returns:
        Base64 text of the deflated JSON document.
    """
    raw = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(zlib.compress(raw, 9)).decode("ascii")


def decompress(code: str) -> dict:
    """
    Decode a string produced by :func:`compress`.

    Args:
        code: Compact build code.

    Returns:
        The decoded build record.

    Raises:
        ImportExportError: If the code is not valid base64, not a deflate
            stream, not JSON, or does not decode to an object.
    """
    try:
        raw = zlib.decompress(base64.b64decode(code, validate=True))
        obj = json.loads(raw.decode("utf-8"))
    except (binascii.Error, zlib.error, UnicodeDecodeError, ValueError) as e:
        raise ImportExportError(f"Can't decompress build code: {e}") from e

    if not isinstance(obj, dict):
        raise ImportExportError("Build code does not contain an object")
    return obj
