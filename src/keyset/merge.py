"""Field merging for key record construction."""

import json
from collections.abc import Mapping
from typing import Any

from .exceptions import DataError


def parse_jwk_data(data: Mapping[str, Any] | str | bytes) -> dict[str, Any]:
    """Return a fresh dict for mapping or JSON text input."""
    if isinstance(data, (str, bytes)):
        try:
            parsed = json.loads(data)
        except (ValueError, UnicodeDecodeError) as e:
            raise DataError("invalid JWK JSON string") from e
        if not isinstance(parsed, dict):
            raise DataError("invalid JWK JSON string")
        return parsed
    if isinstance(data, Mapping):
        return dict(data)
    raise DataError("invalid JWK data")


def merge_fields(data: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge construction options into key data.

    Data fields keep their position and value; option fields absent from the
    data are appended in option order. A field present in both with
    different values raises DataError naming the field.
    """
    merged = dict(data)
    for name, value in (options or {}).items():
        if name in merged and merged[name] != value:
            raise DataError(f"conflicting {name}", field=name)
        merged.setdefault(name, value)
    return merged
