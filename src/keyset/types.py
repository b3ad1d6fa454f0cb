"""Type definitions and enums for JSON Web Keys."""

from enum import Enum
from typing import TypedDict


class KeyType(str, Enum):
    RSA = "RSA"
    EC = "EC"
    OCT = "oct"


class KeyUse(str, Enum):
    SIG = "sig"
    ENC = "enc"


class KidPolicy(str, Enum):
    """How a missing ``kid`` is handled when a key record is constructed."""
    STRICT = "strict"
    THUMBPRINT = "thumbprint"


class EncryptedPayload(TypedDict, total=False):
    iv: str
    ciphertext: str
    tag: str
    aad: str

