"""Conversion between JWK members and ``cryptography`` key objects."""

import base64
import binascii
from collections.abc import Mapping
from typing import Any

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from .algorithms import CURVES, get_curve
from .exceptions import InvalidKeyError, NotSupportedError

RSAKey = rsa.RSAPrivateKey | rsa.RSAPublicKey
ECKey = ec.EllipticCurvePrivateKey | ec.EllipticCurvePublicKey


def _b64url_encode(data: bytes) -> str:
    """Member codec; unlike the keyset helper, failures are key errors."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidKeyError("JWK member is not a string")
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as e:
        raise InvalidKeyError(f"Invalid base64url value: {e}") from e


def int_to_b64(value: int, length: int | None = None) -> str:
    length = length or max(1, (value.bit_length() + 7) // 8)
    return _b64url_encode(value.to_bytes(length, "big"))


def b64_to_int(value: str) -> int:
    return int.from_bytes(_b64url_decode(value), "big")


def _member(jwk: Mapping[str, Any], name: str) -> str:
    value = jwk.get(name)
    if value is None:
        raise InvalidKeyError(f"JWK is missing member {name!r}")
    return value


def load_rsa(jwk: Mapping[str, Any]) -> RSAKey:
    """Build an RSA key; CRT parameters are recovered when only ``d`` is given."""
    public_numbers = rsa.RSAPublicNumbers(b64_to_int(_member(jwk, "e")), b64_to_int(_member(jwk, "n")))
    try:
        if jwk.get("d") is None:
            return public_numbers.public_key()
        d = b64_to_int(jwk["d"])
        if all(jwk.get(m) is not None for m in ("p", "q", "dp", "dq", "qi")):
            p, q = b64_to_int(jwk["p"]), b64_to_int(jwk["q"])
            dmp1, dmq1, iqmp = b64_to_int(jwk["dp"]), b64_to_int(jwk["dq"]), b64_to_int(jwk["qi"])
        else:
            p, q = rsa.rsa_recover_prime_factors(public_numbers.n, public_numbers.e, d)
            dmp1, dmq1, iqmp = rsa.rsa_crt_dmp1(d, p), rsa.rsa_crt_dmq1(d, q), rsa.rsa_crt_iqmp(p, q)
        return rsa.RSAPrivateNumbers(p, q, d, dmp1, dmq1, iqmp, public_numbers).private_key()
    except ValueError as e:
        raise InvalidKeyError(f"Invalid RSA key: {e}") from e


def dump_rsa(key: RSAKey) -> dict[str, Any]:
    if isinstance(key, rsa.RSAPrivateKey):
        priv = key.private_numbers()
        pub = priv.public_numbers
        return {"kty": "RSA", "n": int_to_b64(pub.n), "e": int_to_b64(pub.e), "d": int_to_b64(priv.d),
                "p": int_to_b64(priv.p), "q": int_to_b64(priv.q), "dp": int_to_b64(priv.dmp1),
                "dq": int_to_b64(priv.dmq1), "qi": int_to_b64(priv.iqmp)}
    pub = key.public_numbers()
    return {"kty": "RSA", "n": int_to_b64(pub.n), "e": int_to_b64(pub.e)}


def _curve_name(curve: ec.EllipticCurve) -> str:
    for name, cls in CURVES.items():
        if isinstance(curve, cls):
            return name
    raise NotSupportedError(f"Unsupported curve: {curve.name}")


def load_ec(jwk: Mapping[str, Any], expected_curve: str | None = None) -> ECKey:
    crv = _member(jwk, "crv")
    if expected_curve and crv != expected_curve:
        raise InvalidKeyError(f"Curve {crv} does not match algorithm curve {expected_curve}")
    curve = get_curve(crv)
    try:
        public_numbers = ec.EllipticCurvePublicNumbers(
            b64_to_int(_member(jwk, "x")), b64_to_int(_member(jwk, "y")), curve,
        )
        if jwk.get("d") is None:
            return public_numbers.public_key()
        return ec.EllipticCurvePrivateNumbers(b64_to_int(jwk["d"]), public_numbers).private_key()
    except ValueError as e:
        raise InvalidKeyError(f"Invalid EC key: {e}") from e


def dump_ec(key: ECKey) -> dict[str, Any]:
    size = (key.curve.key_size + 7) // 8
    if isinstance(key, ec.EllipticCurvePrivateKey):
        priv = key.private_numbers()
        pub = priv.public_numbers
        extra = {"d": int_to_b64(priv.private_value, size)}
    else:
        pub = key.public_numbers()
        extra = {}
    return {"kty": "EC", "crv": _curve_name(key.curve), "x": int_to_b64(pub.x, size),
            "y": int_to_b64(pub.y, size), **extra}


def load_oct(jwk: Mapping[str, Any], exact_size: int | None = None) -> bytes:
    secret = _b64url_decode(_member(jwk, "k"))
    if exact_size is not None and len(secret) != exact_size:
        raise InvalidKeyError(f"Key must be {exact_size} bytes, got {len(secret)}")
    if not secret:
        raise InvalidKeyError("Symmetric key cannot be empty")
    return secret


def dump_oct(secret: bytes) -> dict[str, Any]:
    return {"kty": "oct", "k": _b64url_encode(secret)}
