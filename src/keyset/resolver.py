"""Recursive import of keys from heterogeneous sources."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .exceptions import DataError
from .jwk import JWK
from .sources import SourceKind, classify

if TYPE_CHECKING:
    from .jwkset import JWKSet

logger = logging.getLogger(__name__)

ImportResult = JWK | list[Any]


class ImportResolver:
    """Turns import input into key records appended to ``key_set``.

    Every step reduces the input: text to parsed JSON, lists to elements,
    key set documents to their ``keys``, until single key descriptors are
    imported through the provider.
    """

    def __init__(self, key_set: JWKSet) -> None:
        self._key_set = key_set
        self._handlers: dict[SourceKind, Callable[[Any], Awaitable[ImportResult]]] = {
            SourceKind.LIST: self._resolve_list,
            SourceKind.JSON_TEXT: self._resolve_json_text,
            SourceKind.URL: self._resolve_url,
            SourceKind.FILE: self._resolve_file,
            SourceKind.KEY_SET: self._resolve_key_set,
            SourceKind.KEY: self._resolve_key,
        }

    async def resolve(self, data: Any) -> ImportResult:
        source = classify(data)
        return await self._handlers[source.kind](source.value)

    async def _resolve_list(self, items: list[Any]) -> list[Any]:
        return list(await asyncio.gather(*(self.resolve(item) for item in items)))

    async def _resolve_json_text(self, text: str) -> ImportResult:
        try:
            parsed = json.loads(text)
        except ValueError as e:
            raise DataError("invalid JSON input") from e
        return await self._resolve_document(parsed)

    async def _resolve_url(self, url: str) -> ImportResult:
        logger.debug("Fetching keys from %s", url)
        document = await self._key_set.fetcher.fetch_json(url)
        return await self._resolve_document(document, source=url)

    async def _resolve_file(self, path: str) -> ImportResult:
        logger.debug("Reading keys from %s", path)
        try:
            text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataError(f"unable to read {path}: {e}", source=path) from e
        try:
            parsed = json.loads(text)
        except ValueError as e:
            raise DataError(f"invalid JSON in {path}", source=path) from e
        return await self._resolve_document(parsed, source=path)

    async def _resolve_document(self, document: Any, source: str | None = None) -> ImportResult:
        # Parsed documents must be objects or arrays; a bare string would re-enter URL/file resolution.
        if not isinstance(document, (Mapping, list)):
            raise DataError(f"invalid key document{f' from {source}' if source else ''}", source=source)
        return await self.resolve(document)

    async def _resolve_key_set(self, document: Mapping[str, Any]) -> ImportResult:
        self._key_set.metadata.update((k, v) for k, v in document.items() if k != "keys")
        return await self.resolve(document["keys"])

    async def _resolve_key(self, descriptor: Mapping[str, Any]) -> JWK:
        key_set = self._key_set
        jwk = await JWK.import_key(descriptor, provider=key_set.provider, config=key_set.config)
        key_set.keys.append(jwk)
        return jwk
