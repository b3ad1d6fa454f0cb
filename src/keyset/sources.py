"""Classification of key import inputs."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import DataError


class SourceKind(str, Enum):
    LIST = "list"
    JSON_TEXT = "json_text"
    URL = "url"
    FILE = "file"
    KEY_SET = "key_set"
    KEY = "key"


@dataclass(frozen=True)
class Source:
    kind: SourceKind
    value: Any


def classify(data: Any) -> Source:
    """Decide how an import input is resolved. Raises DataError for unusable input."""
    if isinstance(data, os.PathLike):
        return Source(SourceKind.FILE, os.fspath(data))
    if isinstance(data, (list, tuple)):
        return Source(SourceKind.LIST, list(data))
    if not data:
        raise DataError("invalid input")
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DataError("invalid input") from e
    if isinstance(data, str):
        text = data.strip()
        if text.startswith(("{", "[")):
            return Source(SourceKind.JSON_TEXT, text)
        if text.lower().startswith(("http://", "https://")):
            return Source(SourceKind.URL, text)
        return Source(SourceKind.FILE, data)
    if isinstance(data, Mapping):
        return Source(SourceKind.KEY_SET if "keys" in data else SourceKind.KEY, data)
    raise DataError("invalid input")
