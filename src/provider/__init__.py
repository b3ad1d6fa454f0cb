"""Crypto providers for JSON Web Keys."""

from .algorithms import ALGORITHMS, Algorithm, get_algorithm
from .base import CryptoKey, CryptoProvider, EncryptionResult, KeyPair, KeyRole
from .default import CryptographyProvider
from .exceptions import InvalidAccessError, InvalidKeyError, NotSupportedError, OperationFailedError, ProviderError

_default_provider: CryptoProvider | None = None


def get_default_provider() -> CryptoProvider:
    """Return the process-wide default provider, creating it on first use."""
    global _default_provider
    if _default_provider is None:
        _default_provider = CryptographyProvider()
    return _default_provider


__all__ = [
    "CryptoProvider", "CryptographyProvider", "CryptoKey", "KeyPair", "KeyRole", "EncryptionResult",
    "Algorithm", "ALGORITHMS", "get_algorithm", "get_default_provider",
    "ProviderError", "NotSupportedError", "InvalidKeyError", "InvalidAccessError", "OperationFailedError",
]
