"""Shared constants for JWK handling."""

VERSION = "0.1.0"

THUMBPRINT_MEMBERS: dict[str, tuple[str, ...]] = {
    "RSA": ("e", "kty", "n"),
    "EC": ("crv", "kty", "x", "y"),
    "oct": ("k", "kty"),
}

THUMBPRINT_URN_PREFIX = "urn:ietf:params:oauth:jwk-thumbprint:sha-256:"

DEFAULT_KEY_OPS = ("sign", "verify")

KEY_REFERENCE_HEADERS = ("jku", "jwk")
