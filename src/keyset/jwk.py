"""JSON Web Key records bound to crypto provider handles."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from src.provider import CryptoKey, CryptoProvider, get_default_provider

from ._constants import KEY_REFERENCE_HEADERS
from .config import DEFAULT_CONFIG, KeySetConfig
from .encoding import b64url_decode, b64url_encode, to_bytes
from .exceptions import DataError
from .merge import merge_fields, parse_jwk_data
from .thumbprint import compute_thumbprint, thumbprint_uri
from .types import EncryptedPayload, KeyType, KeyUse, KidPolicy

logger = logging.getLogger(__name__)

_KEY_TYPES = frozenset(t.value for t in KeyType)


class JWK(BaseModel):
    """A validated JSON Web Key.

    Construct from a mapping or JSON text plus optional ``options`` (usually
    ``alg`` / ``kid``). Unknown members are kept as-is and serialized back.
    The provider handle is attached once by :meth:`import_key`,
    :meth:`from_crypto_key` or key set generation, and never serialized.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kty: str
    alg: str
    kid: str
    use: str | None = None
    key_ops: list[str] | None = None
    n: str | None = None
    e: str | None = None
    d: str | None = None
    p: str | None = None
    q: str | None = None
    dp: str | None = None
    dq: str | None = None
    qi: str | None = None
    crv: str | None = None
    x: str | None = None
    y: str | None = None
    k: str | None = None
    ext: bool | None = None

    _crypto_key: CryptoKey | None = PrivateAttr(default=None)
    _provider: CryptoProvider | None = PrivateAttr(default=None)
    _config: KeySetConfig = PrivateAttr(default=DEFAULT_CONFIG)

    def __init__(self, data: Mapping[str, Any] | str | bytes, options: Mapping[str, Any] | None = None,
                 *, config: KeySetConfig | None = None) -> None:
        config = config or DEFAULT_CONFIG
        fields = merge_fields(parse_jwk_data(data), options)
        if not fields.get("alg"):
            raise DataError("missing alg", field="alg")
        kty = fields.get("kty")
        if not isinstance(kty, str) or kty not in _KEY_TYPES:
            raise DataError("invalid kty", field="kty")
        if not fields.get("kid"):
            if config.kid_policy is KidPolicy.STRICT:
                raise DataError("missing kid", field="kid")
            fields["kid"] = compute_thumbprint(fields)
        try:
            super().__init__(**fields)
        except ValidationError as e:
            err = e.errors()[0]
            name = ".".join(str(part) for part in err["loc"]) or None
            raise DataError(f"invalid JWK member {name}: {err['msg']}", field=name) from e
        self._config = config

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JWK):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(json.dumps(self.to_dict(), sort_keys=True))

    def __repr__(self) -> str:
        return f"JWK(kty={self.kty!r}, alg={self.alg!r}, kid={self.kid!r}, role={self.role!r})"

    @classmethod
    async def import_key(cls, data: Mapping[str, Any] | str | bytes, options: Mapping[str, Any] | None = None,
                         *, provider: CryptoProvider | None = None, config: KeySetConfig | None = None) -> JWK:
        """Validate key data and import its material through the provider."""
        jwk = cls(data, options, config=config)
        provider = provider or get_default_provider()
        handle = await provider.import_key(jwk.to_dict(), jwk.alg)
        jwk._bind(handle, provider)
        logger.debug("Imported %s key kid=%s alg=%s", jwk.role, jwk.kid, jwk.alg)
        return jwk

    @classmethod
    async def from_crypto_key(cls, handle: CryptoKey, options: Mapping[str, Any] | None = None,
                              *, provider: CryptoProvider | None = None, config: KeySetConfig | None = None) -> JWK:
        """Wrap an existing provider handle, exporting its material as JWK members."""
        provider = provider or get_default_provider()
        exported = await provider.export_key(handle)
        jwk = cls(exported, options, config=config)
        jwk._bind(handle, provider)
        return jwk

    def _bind(self, handle: CryptoKey, provider: CryptoProvider) -> None:
        if self._crypto_key is not None:
            raise DataError("key is already bound to a crypto key")
        self._crypto_key = handle
        self._provider = provider

    @property
    def crypto_key(self) -> CryptoKey | None:
        return self._crypto_key

    @property
    def role(self) -> str:
        """``public``, ``private`` or ``secret``; taken from the handle once bound."""
        if self._crypto_key is not None:
            return self._crypto_key.type
        if self.kty == KeyType.OCT.value:
            return "secret"
        return "private" if self.d is not None else "public"

    @property
    def is_public(self) -> bool:
        return self.role == "public"

    @property
    def is_private(self) -> bool:
        return self.role == "private"

    @property
    def is_secret(self) -> bool:
        return self.role == "secret"

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def thumbprint(self) -> str:
        return compute_thumbprint(self.to_dict())

    def thumbprint_uri(self) -> str:
        return thumbprint_uri(self.to_dict())

    def get_protected_header(self, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Build a JWS protected header for this key.

        Requires a signing key (``"sign"`` in ``key_ops`` or ``use == "sig"``).
        A ``jku`` header always carries this key's ``kid``.
        """
        extra = dict(extra or {})
        if not ("sign" in (self.key_ops or ()) or self.use == KeyUse.SIG.value):
            raise DataError("invalid key usage option", field="key_ops")
        if self._config.require_key_reference and sum(name in extra for name in KEY_REFERENCE_HEADERS) != 1:
            raise DataError("protected header requires exactly one of jku or jwk")
        header = {"alg": self.alg, "kid": self.kid, **extra}
        if "jku" in extra:
            header["kid"] = self.kid
        if not header.get("alg") or not header.get("kid"):
            raise DataError("protected header requires alg and kid")
        return header

    async def sign(self, message: str | bytes) -> str:
        provider, handle = self._require_key()
        return b64url_encode(await provider.sign(self.alg, handle, to_bytes(message)))

    async def verify(self, message: str | bytes, signature: str) -> bool:
        provider, handle = self._require_key()
        try:
            raw = b64url_decode(signature, "signature")
        except DataError:
            return False
        return await provider.verify(self.alg, handle, raw, to_bytes(message))

    async def encrypt(self, message: str | bytes, aad: str | bytes | None = None) -> EncryptedPayload:
        """Encrypt ``message``; ``iv``, ``ciphertext`` and ``tag`` are base64url.

        Text ``aad`` is echoed back so the result can be passed straight to
        :meth:`decrypt` as keyword arguments. Bytes ``aad`` is not echoed,
        keeping the payload JSON-serializable; pass it to :meth:`decrypt`.
        """
        provider, handle = self._require_key()
        result = await provider.encrypt(self.alg, handle, to_bytes(message),
                                        to_bytes(aad) if aad is not None else None)
        payload = EncryptedPayload()
        if result.iv is not None:
            payload["iv"] = b64url_encode(result.iv)
        payload["ciphertext"] = b64url_encode(result.ciphertext)
        if result.tag is not None:
            payload["tag"] = b64url_encode(result.tag)
        if isinstance(aad, str):
            payload["aad"] = aad
        return payload

    async def decrypt(self, ciphertext: str, iv: str | None = None, tag: str | None = None,
                      aad: str | bytes | None = None, *, as_text: bool = True) -> str | bytes:
        """Decrypt to UTF-8 text, or to raw bytes with ``as_text=False``."""
        provider, handle = self._require_key()
        plaintext = await provider.decrypt(
            self.alg, handle, b64url_decode(ciphertext, "ciphertext"),
            b64url_decode(iv, "iv") if iv is not None else None,
            b64url_decode(tag, "tag") if tag is not None else None,
            to_bytes(aad) if aad is not None else None,
        )
        if not as_text:
            return plaintext
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DataError("plaintext is not UTF-8 text, decrypt with as_text=False") from e

    def _require_key(self) -> tuple[CryptoProvider, CryptoKey]:
        if self._crypto_key is None or self._provider is None:
            raise DataError("key is not imported")
        return self._provider, self._crypto_key
