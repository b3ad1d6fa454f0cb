"""Registry of JOSE algorithms supported by the default provider."""

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .base import KeyRole
from .exceptions import NotSupportedError


@dataclass(frozen=True)
class Algorithm:
    name: str
    family: str
    kty: str
    hash: type[hashes.HashAlgorithm] | None = None
    curve: str | None = None
    key_size: int | None = None
    usages: dict[str, tuple[str, ...]] | None = None

    @property
    def symmetric(self) -> bool:
        return self.kty == "oct"

    def usages_for(self, role: KeyRole) -> tuple[str, ...]:
        return (self.usages or {}).get(role, ())


_SIGNING = {"private": ("sign",), "public": ("verify",)}
_HMAC = {"secret": ("sign", "verify")}
_AES = {"secret": ("encrypt", "decrypt", "wrapKey", "unwrapKey")}
_OAEP = {"private": ("decrypt", "unwrapKey"), "public": ("encrypt", "wrapKey")}

CURVES: dict[str, type[ec.EllipticCurve]] = {
    "P-256": ec.SECP256R1,
    "P-384": ec.SECP384R1,
    "P-521": ec.SECP521R1,
}

_ALGORITHMS = [
    Algorithm("RS256", "RSASSA-PKCS1-v1_5", "RSA", hashes.SHA256, usages=_SIGNING),
    Algorithm("RS384", "RSASSA-PKCS1-v1_5", "RSA", hashes.SHA384, usages=_SIGNING),
    Algorithm("RS512", "RSASSA-PKCS1-v1_5", "RSA", hashes.SHA512, usages=_SIGNING),
    Algorithm("PS256", "RSA-PSS", "RSA", hashes.SHA256, usages=_SIGNING),
    Algorithm("PS384", "RSA-PSS", "RSA", hashes.SHA384, usages=_SIGNING),
    Algorithm("PS512", "RSA-PSS", "RSA", hashes.SHA512, usages=_SIGNING),
    Algorithm("ES256", "ECDSA", "EC", hashes.SHA256, curve="P-256", usages=_SIGNING),
    Algorithm("ES384", "ECDSA", "EC", hashes.SHA384, curve="P-384", usages=_SIGNING),
    Algorithm("ES512", "ECDSA", "EC", hashes.SHA512, curve="P-521", usages=_SIGNING),
    Algorithm("HS256", "HMAC", "oct", hashes.SHA256, key_size=32, usages=_HMAC),
    Algorithm("HS384", "HMAC", "oct", hashes.SHA384, key_size=48, usages=_HMAC),
    Algorithm("HS512", "HMAC", "oct", hashes.SHA512, key_size=64, usages=_HMAC),
    Algorithm("A128GCM", "AES-GCM", "oct", key_size=16, usages=_AES),
    Algorithm("A192GCM", "AES-GCM", "oct", key_size=24, usages=_AES),
    Algorithm("A256GCM", "AES-GCM", "oct", key_size=32, usages=_AES),
    Algorithm("RSA-OAEP", "RSA-OAEP", "RSA", hashes.SHA1, usages=_OAEP),
    Algorithm("RSA-OAEP-256", "RSA-OAEP", "RSA", hashes.SHA256, usages=_OAEP),
]

ALGORITHMS: dict[str, Algorithm] = {a.name: a for a in _ALGORITHMS}


def get_algorithm(name: str) -> Algorithm:
    try:
        return ALGORITHMS[name]
    except (KeyError, TypeError):
        raise NotSupportedError(f"Unsupported algorithm: {name!r}") from None


def get_curve(name: str) -> ec.EllipticCurve:
    try:
        return CURVES[name]()
    except (KeyError, TypeError):
        raise NotSupportedError(f"Unsupported curve: {name!r}") from None
