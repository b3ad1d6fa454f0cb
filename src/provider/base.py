"""Crypto provider interface and opaque key handles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, NamedTuple

KeyRole = Literal["public", "private", "secret"]


@dataclass(frozen=True, eq=False)
class CryptoKey:
    """Opaque handle to provider-native key material."""

    type: KeyRole
    algorithm: str
    extractable: bool
    usages: tuple[str, ...]
    key: Any = field(repr=False)

    def allows(self, usage: str) -> bool:
        return usage in self.usages


class KeyPair(NamedTuple):
    private_key: CryptoKey
    public_key: CryptoKey


class EncryptionResult(NamedTuple):
    ciphertext: bytes
    iv: bytes | None = None
    tag: bytes | None = None


class CryptoProvider(ABC):
    """Performs every cryptographic computation on behalf of key records."""

    @abstractmethod
    async def import_key(self, jwk: Mapping[str, Any], alg: str | None = None) -> CryptoKey:
        """Import JWK fields as a native key handle."""

    @abstractmethod
    async def export_key(self, key: CryptoKey) -> dict[str, Any]:
        """Export a handle's material as JWK fields."""

    @abstractmethod
    async def generate_key(self, alg: str, params: Mapping[str, Any]) -> KeyPair | CryptoKey:
        """Generate a keypair, or a single secret key for symmetric algorithms."""

    @abstractmethod
    async def sign(self, alg: str, key: CryptoKey, data: bytes) -> bytes: ...

    @abstractmethod
    async def verify(self, alg: str, key: CryptoKey, signature: bytes, data: bytes) -> bool: ...

    @abstractmethod
    async def encrypt(self, alg: str, key: CryptoKey, data: bytes, aad: bytes | None = None) -> EncryptionResult: ...

    @abstractmethod
    async def decrypt(self, alg: str, key: CryptoKey, ciphertext: bytes, iv: bytes | None = None,
                      tag: bytes | None = None, aad: bytes | None = None) -> bytes: ...
