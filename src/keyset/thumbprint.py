"""RFC 7638 JWK thumbprints."""

import hashlib
import json
from collections.abc import Mapping
from typing import Any

from ._constants import THUMBPRINT_MEMBERS, THUMBPRINT_URN_PREFIX
from .encoding import b64url_encode
from .exceptions import DataError


def canonical_members(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Select the required members for the key's ``kty``.

    Raises DataError for an unknown ``kty`` or a missing required member.
    """
    kty = fields.get("kty")
    members = THUMBPRINT_MEMBERS.get(kty) if isinstance(kty, str) else None
    if members is None:
        raise DataError("invalid kty", field="kty")
    missing = [m for m in members if fields.get(m) is None]
    if missing:
        raise DataError(f"missing {', '.join(missing)} for thumbprint", field=missing[0])
    return {m: fields[m] for m in members}


def compute_thumbprint(fields: Mapping[str, Any]) -> str:
    """Calculate the SHA-256 thumbprint of a JWK.

    Only the required members for the key type take part, serialized in
    lexicographic order without whitespace, so extra members and the order
    in which fields were supplied never change the result.
    """
    canonical = json.dumps(
        canonical_members(fields), sort_keys=True, separators=(",", ":"), ensure_ascii=False,
    ).encode("utf-8")
    return b64url_encode(hashlib.sha256(canonical).digest())


def thumbprint_uri(fields: Mapping[str, Any]) -> str:
    """RFC 9278 URI form of the thumbprint."""
    return THUMBPRINT_URN_PREFIX + compute_thumbprint(fields)
