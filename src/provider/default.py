"""Crypto provider backed by the ``cryptography`` package."""

import asyncio
import logging
import os
from collections.abc import Mapping
from typing import Any

from cryptography.exceptions import InvalidSignature, InvalidTag
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .algorithms import Algorithm, get_algorithm, get_curve
from .base import CryptoKey, CryptoProvider, EncryptionResult, KeyPair, KeyRole
from .codec import dump_ec, dump_oct, dump_rsa, load_ec, load_oct, load_rsa
from .exceptions import InvalidAccessError, InvalidKeyError, OperationFailedError

logger = logging.getLogger(__name__)

_USE_USAGES = {
    "sig": ("sign", "verify"),
    "enc": ("encrypt", "decrypt", "wrapKey", "unwrapKey"),
}
_GCM_IV_BYTES = 12
_GCM_TAG_BYTES = 16


def _requested_usages(fields: Mapping[str, Any]) -> set[str] | None:
    if fields.get("key_ops") is not None:
        return set(fields["key_ops"])
    if fields.get("use") in _USE_USAGES:
        return set(_USE_USAGES[fields["use"]])
    return None


def _select_usages(algo: Algorithm, role: KeyRole, requested: set[str] | None) -> tuple[str, ...]:
    return tuple(u for u in algo.usages_for(role) if requested is None or u in requested)


def _public_exponent(value: Any) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, (bytes, bytearray, list, tuple)):
        return int.from_bytes(bytes(value), "big")
    raise InvalidKeyError(f"Invalid publicExponent: {value!r}")


class CryptographyProvider(CryptoProvider):
    """Default provider: RSA, EC (P-256/384/521), HMAC and AES-GCM via pyca/cryptography."""

    async def import_key(self, jwk: Mapping[str, Any], alg: str | None = None) -> CryptoKey:
        algo = get_algorithm(alg or jwk.get("alg"))
        if jwk.get("kty") != algo.kty:
            raise InvalidKeyError(f"{algo.name} requires kty {algo.kty}, got {jwk.get('kty')!r}")

        key: Any
        role: KeyRole
        if algo.kty == "RSA":
            key = load_rsa(jwk)
            role = "private" if isinstance(key, rsa.RSAPrivateKey) else "public"
        elif algo.kty == "EC":
            key = load_ec(jwk, algo.curve)
            role = "private" if isinstance(key, ec.EllipticCurvePrivateKey) else "public"
        else:
            key = load_oct(jwk, algo.key_size if algo.family == "AES-GCM" else None)
            role = "secret"

        usages = _select_usages(algo, role, _requested_usages(jwk))
        logger.debug("Imported %s %s key with usages %s", algo.name, role, usages)
        return CryptoKey(role, algo.name, bool(jwk.get("ext", True)), usages, key)

    async def export_key(self, key: CryptoKey) -> dict[str, Any]:
        if not key.extractable:
            raise InvalidAccessError("Key is not extractable")
        if isinstance(key.key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
            fields = dump_rsa(key.key)
        elif isinstance(key.key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
            fields = dump_ec(key.key)
        else:
            fields = dump_oct(key.key)
        fields.update(alg=key.algorithm, key_ops=list(key.usages), ext=True)
        return fields

    async def generate_key(self, alg: str, params: Mapping[str, Any]) -> KeyPair | CryptoKey:
        algo = get_algorithm(alg)
        requested = _requested_usages(params)
        extractable = bool(params.get("extractable", True))

        if algo.symmetric:
            usages = _select_usages(algo, "secret", requested)
            if not usages:
                raise InvalidAccessError(f"No usable key_ops requested for {alg}")
            length = params.get("length")
            size = int(length) // 8 if length and algo.family == "HMAC" else algo.key_size
            logger.debug("Generating %d byte %s secret", size, alg)
            return CryptoKey("secret", alg, extractable, usages, os.urandom(size))

        private_usages = _select_usages(algo, "private", requested)
        public_usages = _select_usages(algo, "public", requested)
        if not private_usages and not public_usages:
            raise InvalidAccessError(f"No usable key_ops requested for {alg}")

        if algo.kty == "RSA":
            modulus = int(params.get("modulusLength", params.get("modulus_length", 2048)))
            exponent = _public_exponent(params.get("publicExponent", params.get("public_exponent", 65537)))
            logger.debug("Generating %d bit RSA keypair for %s", modulus, alg)
            try:
                private = await asyncio.to_thread(rsa.generate_private_key, public_exponent=exponent, key_size=modulus)
            except ValueError as e:
                raise InvalidKeyError(f"Invalid RSA generation parameters: {e}") from e
        else:
            private = ec.generate_private_key(get_curve(algo.curve))

        return KeyPair(
            CryptoKey("private", alg, extractable, private_usages, private),
            CryptoKey("public", alg, True, public_usages, private.public_key()),
        )

    async def sign(self, alg: str, key: CryptoKey, data: bytes) -> bytes:
        algo = self._check(alg, key, "sign")
        h = algo.hash()
        if algo.family == "RSASSA-PKCS1-v1_5":
            return key.key.sign(data, padding.PKCS1v15(), h)
        if algo.family == "RSA-PSS":
            return key.key.sign(data, padding.PSS(mgf=padding.MGF1(h), salt_length=h.digest_size), h)
        if algo.family == "ECDSA":
            r, s = decode_dss_signature(key.key.sign(data, ec.ECDSA(h)))
            size = (key.key.curve.key_size + 7) // 8
            return r.to_bytes(size, "big") + s.to_bytes(size, "big")
        if algo.family == "HMAC":
            mac = hmac.HMAC(key.key, h)
            mac.update(data)
            return mac.finalize()
        raise InvalidAccessError(f"{alg} does not support signing")

    async def verify(self, alg: str, key: CryptoKey, signature: bytes, data: bytes) -> bool:
        algo = self._check(alg, key, "verify")
        h = algo.hash()
        try:
            if algo.family == "RSASSA-PKCS1-v1_5":
                key.key.verify(signature, data, padding.PKCS1v15(), h)
            elif algo.family == "RSA-PSS":
                key.key.verify(signature, data, padding.PSS(mgf=padding.MGF1(h), salt_length=h.digest_size), h)
            elif algo.family == "ECDSA":
                size = (key.key.curve.key_size + 7) // 8
                if len(signature) != 2 * size:
                    return False
                r, s = int.from_bytes(signature[:size], "big"), int.from_bytes(signature[size:], "big")
                key.key.verify(encode_dss_signature(r, s), data, ec.ECDSA(h))
            elif algo.family == "HMAC":
                mac = hmac.HMAC(key.key, h)
                mac.update(data)
                mac.verify(signature)
            else:
                raise InvalidAccessError(f"{alg} does not support verification")
        except InvalidSignature:
            return False
        return True

    async def encrypt(self, alg: str, key: CryptoKey, data: bytes, aad: bytes | None = None) -> EncryptionResult:
        algo = self._check(alg, key, "encrypt")
        if algo.family == "AES-GCM":
            iv = os.urandom(_GCM_IV_BYTES)
            sealed = AESGCM(key.key).encrypt(iv, data, aad)
            return EncryptionResult(sealed[:-_GCM_TAG_BYTES], iv, sealed[-_GCM_TAG_BYTES:])
        if algo.family == "RSA-OAEP":
            return EncryptionResult(key.key.encrypt(data, self._oaep(algo)))
        raise InvalidAccessError(f"{alg} does not support encryption")

    async def decrypt(self, alg: str, key: CryptoKey, ciphertext: bytes, iv: bytes | None = None,
                      tag: bytes | None = None, aad: bytes | None = None) -> bytes:
        algo = self._check(alg, key, "decrypt")
        if algo.family == "AES-GCM":
            if iv is None or tag is None:
                raise OperationFailedError("AES-GCM decryption requires iv and tag")
            try:
                return AESGCM(key.key).decrypt(iv, ciphertext + tag, aad)
            except InvalidTag as e:
                raise OperationFailedError("Decryption failed: authentication tag mismatch") from e
        if algo.family == "RSA-OAEP":
            try:
                return key.key.decrypt(ciphertext, self._oaep(algo))
            except ValueError as e:
                raise OperationFailedError(f"Decryption failed: {e}") from e
        raise InvalidAccessError(f"{alg} does not support decryption")

    def _oaep(self, algo: Algorithm) -> padding.OAEP:
        return padding.OAEP(mgf=padding.MGF1(algo.hash()), algorithm=algo.hash(), label=None)

    def _check(self, alg: str, key: CryptoKey, usage: str) -> Algorithm:
        if key.algorithm != alg:
            raise InvalidAccessError(f"Key is bound to {key.algorithm}, not {alg}")
        if not key.allows(usage):
            raise InvalidAccessError(f"Key usages {list(key.usages)} do not permit {usage}")
        return get_algorithm(alg)
