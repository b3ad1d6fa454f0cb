"""Base64url helpers."""

import base64
import binascii

from .exceptions import DataError


def b64url_encode(data: bytes) -> str:
    """Base64url encode without '=' padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(value: str, field: str | None = None) -> bytes:
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError, TypeError) as e:
        raise DataError(f"invalid base64url {field or 'value'}", field=field) from e


def to_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)
