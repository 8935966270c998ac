"""
Core JWT decoding logic.

Splits a compact-serialised JWT into its three parts and decodes the header
and payload to JSON text.  Signature verification is **not** performed and no
claims are checked — this is for inspection only.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any

from .errors import Base64DecodeError, InvalidFormatError, JsonParseError

__all__ = ["DecodedToken", "decode_token", "decode"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedToken:
    """Holds the three parts of a JWT token.

    ``header`` and ``payload`` are the decoded JSON text exactly as it was
    encoded; ``signature`` is the third segment, still base64url encoded.
    """

    header: str
    payload: str
    signature: str

    def header_json(self) -> Any:
        return json.loads(self.header)

    def payload_json(self) -> Any:
        return json.loads(self.payload)


def _add_base64_padding(data: str) -> str:
    """Add padding characters for base64url decoding."""
    padding = len(data) % 4
    if padding:
        data += "=" * (4 - padding)
    return data


def _reject_constant(name: str) -> Any:
    # json.loads() accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def _b64url_decode(segment: str, label: str) -> bytes:
    """Decode a base64url segment, padded or not, in either alphabet."""
    b64 = _add_base64_padding(segment.rstrip("=")).replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.debug("%s is not valid base64url: %s", label, exc)
        raise Base64DecodeError(label, str(exc)) from exc


def _parse_json_text(raw: bytes, label: str) -> str:
    """Validate that *raw* is UTF-8 JSON with an object or array at the top."""
    try:
        text = raw.decode("utf-8")
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # RecursionError: nesting deeper than the interpreter stack allows
        logger.debug("%s is not valid JSON: %s", label, exc)
        raise JsonParseError(label, str(exc)) from exc

    if not isinstance(value, (dict, list)):
        raise JsonParseError(
            label, f"expected a JSON object or array, got {type(value).__name__}"
        )
    return text


def _decode_segment(segment: str, label: str) -> str:
    """Decode a single base64url-encoded JWT segment into JSON text."""
    return _parse_json_text(_b64url_decode(segment, label), label)


def decode_token(token: str) -> DecodedToken:
    """
    Decode a JWT token string into its three components.

    The token is split on ``'.'``; the header and payload segments are
    base64url-decoded and checked to be JSON.  The header is fully decoded
    before the payload, so a broken header is always the reported error.

    Raises:
        InvalidFormatError: If the token does not have exactly 3 parts.
        Base64DecodeError: If the header or payload is not valid base64url.
        JsonParseError: If the header or payload is not UTF-8 JSON.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise InvalidFormatError(len(parts))

    header = _decode_segment(parts[0], "header")
    payload = _decode_segment(parts[1], "payload")
    signature = parts[2]

    return DecodedToken(header=header, payload=payload, signature=signature)


decode = decode_token
