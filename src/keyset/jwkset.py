"""JSON Web Key Sets."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from src.provider import CryptoProvider, KeyPair, get_default_provider

from .config import DEFAULT_CONFIG, KeySetConfig
from .exceptions import DataError
from .jwk import JWK
from .query import compile_predicate
from .resolver import ImportResolver, ImportResult
from .thumbprint import compute_thumbprint
from .transport import KeySetFetcher

logger = logging.getLogger(__name__)

# Descriptor members copied onto generated records rather than only forwarded to the provider.
_RECORD_OPTIONS = ("kid", "use")


class JWKSet:
    """An ordered collection of key records plus free-form metadata.

    ``data`` may be a list of records (kept as the ``keys`` list itself) or a
    mapping whose members become metadata, with any ``keys`` it holds
    wrapped as unbound records. Keys that need provider handles are added
    with :meth:`import_keys` or :meth:`generate_keys`.
    """

    def __init__(self, data: list[Any] | Mapping[str, Any] | None = None, *,
                 provider: CryptoProvider | None = None, config: KeySetConfig | None = None,
                 fetcher: KeySetFetcher | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.provider = provider or get_default_provider()
        self.fetcher = fetcher or KeySetFetcher(self.config.http_timeout, self.config.http_max_retries)
        self.metadata: dict[str, Any] = {}
        self.keys: list[JWK] = []
        if isinstance(data, list):
            self.keys = self._adopt(data)
        elif isinstance(data, Mapping):
            self.metadata.update((k, v) for k, v in data.items() if k != "keys")
            self.keys = self._adopt(list(data.get("keys") or []))
        elif data is not None:
            raise DataError("invalid input")

    def _adopt(self, items: list[Any]) -> list[JWK]:
        for i, item in enumerate(items):
            if not isinstance(item, JWK):
                items[i] = JWK(item, config=self.config)
        return items

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[JWK]:
        return iter(self.keys)

    def __repr__(self) -> str:
        return f"JWKSet(keys={len(self.keys)}, metadata={sorted(self.metadata)})"

    @classmethod
    async def generate(cls, data: Any, **kwargs: Any) -> JWKSet:
        """Create a key set and generate ``data`` into it."""
        jwks = cls(**kwargs)
        await jwks.generate_keys(data)
        return jwks

    @classmethod
    async def load(cls, data: Any, **kwargs: Any) -> JWKSet:
        """Create a key set and import ``data`` into it."""
        jwks = cls(**kwargs)
        await jwks.import_keys(data)
        return jwks

    async def import_keys(self, data: Any) -> ImportResult:
        """Import keys from a mapping, JSON text, URL, file path or a list of those."""
        before = len(self.keys)
        result = await ImportResolver(self).resolve(data)
        logger.info("Imported %d key(s), set now holds %d", len(self.keys) - before, len(self.keys))
        return result

    async def generate_keys(self, data: Any) -> JWK | list[Any]:
        """Generate keys for an algorithm name, a descriptor mapping or a list of those.

        Keypairs are returned and appended as ``[private, public]`` sharing
        one ``kid``; symmetric algorithms produce a single secret record.
        """
        if isinstance(data, (list, tuple)):
            return list(await asyncio.gather(*(self.generate_keys(item) for item in data)))
        if isinstance(data, str) and data:
            alg, params = data, {"key_ops": list(self.config.default_key_ops)}
        elif isinstance(data, Mapping):
            if not data.get("alg"):
                raise DataError("missing alg", field="alg")
            alg = data["alg"]
            params = {k: v for k, v in data.items() if k != "alg"}
            params.setdefault("key_ops", list(self.config.default_key_ops))
        else:
            raise DataError("invalid input")

        generated = await self.provider.generate_key(alg, params)
        options = {"alg": alg, **{k: params[k] for k in _RECORD_OPTIONS if params.get(k) is not None}}
        if isinstance(generated, KeyPair):
            if "kid" not in options:
                options["kid"] = compute_thumbprint(await self.provider.export_key(generated.public_key))
            private = await JWK.from_crypto_key(generated.private_key, options, provider=self.provider, config=self.config)
            public = await JWK.from_crypto_key(generated.public_key, options, provider=self.provider, config=self.config)
            self.keys.extend((private, public))
            logger.info("Generated %s keypair kid=%s", alg, options["kid"])
            return [private, public]

        if "kid" not in options:
            options["kid"] = compute_thumbprint(await self.provider.export_key(generated))
        secret = await JWK.from_crypto_key(generated, options, provider=self.provider, config=self.config)
        self.keys.append(secret)
        logger.info("Generated %s secret key kid=%s", alg, options["kid"])
        return secret

    def filter(self, predicate: Callable[[JWK], bool] | Mapping[str, Any]) -> list[JWK]:
        match = compile_predicate(predicate)
        return [key for key in self.keys if match(key)]

    def find(self, predicate: Callable[[JWK], bool] | Mapping[str, Any]) -> JWK | None:
        match = compile_predicate(predicate)
        return next((key for key in self.keys if match(key)), None)

    def to_dict(self) -> dict[str, Any]:
        return {**self.metadata, "keys": [key.to_dict() for key in self.keys]}

    def public_dict(self) -> dict[str, Any]:
        return {**self.metadata, "keys": [key.to_dict() for key in self.keys if key.is_public]}

    def export_keys(self) -> str:
        """Serialize every key, private material included."""
        return json.dumps(self.to_dict())

    @property
    def public_jwks(self) -> str:
        """JSON of the metadata and public keys only, safe to publish."""
        return json.dumps(self.public_dict())
