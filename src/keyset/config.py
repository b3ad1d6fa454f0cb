"""Key set configuration."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ._constants import DEFAULT_KEY_OPS
from .types import KidPolicy

logger = logging.getLogger(__name__)

_RECOGNISED_BOOL_VALUES = frozenset(
    ("1", "true", "yes", "0", "false", "no")
)


class ConfigError(Exception):
    """Configuration file error."""

    pass


@dataclass(frozen=True)
class KeySetConfig:
    """Behaviour switches for key records and key sets.

    ``kid_policy``: ``thumbprint`` derives a missing ``kid`` from the RFC 7638
        thumbprint of the key; ``strict`` rejects records without one.
    ``require_key_reference``: when set, protected headers must carry exactly
        one of ``jku`` / ``jwk``.
    ``default_key_ops``: usages requested from the provider when a generation
        request does not name any.
    ``http_timeout`` / ``http_max_retries``: remote key set fetching.
    """

    kid_policy: KidPolicy = KidPolicy.THUMBPRINT
    require_key_reference: bool = False
    default_key_ops: tuple[str, ...] = field(default=DEFAULT_KEY_OPS)
    http_timeout: float = 10.0
    http_max_retries: int = 3

    def __post_init__(self) -> None:
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be positive")
        if self.http_max_retries < 1:
            raise ValueError("http_max_retries must be at least 1")
        if not self.default_key_ops:
            raise ValueError("default_key_ops cannot be empty")


DEFAULT_CONFIG = KeySetConfig()


def _parse_bool(value: str, default: bool) -> bool:
    """Parse a boolean environment variable with explicit default.

    Recognises ``true/1/yes`` and ``false/0/no`` (case-insensitive).
    Returns *default* when the value is empty or unset and logs a warning
    for anything else.
    """
    if not value:
        return default
    normalised = value.lower()
    if normalised not in _RECOGNISED_BOOL_VALUES:
        logger.warning(
            "Unrecognised boolean value %r, using default %s. "
            "Expected one of: true/1/yes or false/0/no.",
            value,
            default,
        )
        return default
    return normalised in ("1", "true", "yes")


def _coerce_bool(value: Any) -> bool:
    """Read a YAML boolean, accepting the quoted forms ``_parse_bool`` knows."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in _RECOGNISED_BOOL_VALUES:
        return _parse_bool(value, default=False)
    raise ValueError(f"expected a boolean, got {value!r}")


def _parse_kid_policy(value: str) -> KidPolicy:
    try:
        return KidPolicy(value.lower())
    except ValueError:
        allowed = ", ".join(p.value for p in KidPolicy)
        raise ValueError(f"Invalid kid policy {value!r}, expected one of: {allowed}") from None


def load_config_from_env() -> KeySetConfig:
    key_ops_raw = os.environ.get("JWKS_DEFAULT_KEY_OPS", "")
    key_ops = tuple(op.strip() for op in key_ops_raw.split(",") if op.strip()) or DEFAULT_KEY_OPS
    return KeySetConfig(
        kid_policy=_parse_kid_policy(os.environ.get("JWKS_KID_POLICY", KidPolicy.THUMBPRINT.value)),
        require_key_reference=_parse_bool(os.environ.get("JWKS_REQUIRE_KEY_REFERENCE", ""), default=False),
        default_key_ops=key_ops,
        http_timeout=float(os.environ.get("JWKS_HTTP_TIMEOUT", "10.0")),
        http_max_retries=int(os.environ.get("JWKS_HTTP_MAX_RETRIES", "3")),
    )


def load_config_from_file(path: Path) -> KeySetConfig:
    """Load configuration from a YAML file. Raises ConfigError if unusable."""
    if not path.exists():
        raise ConfigError(f"Config not found at {path}")
    try:
        with open(path) as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected a mapping")

    kwargs: dict[str, Any] = {}
    try:
        if "kid_policy" in data:
            kwargs["kid_policy"] = _parse_kid_policy(str(data["kid_policy"]))
        if "require_key_reference" in data:
            kwargs["require_key_reference"] = _coerce_bool(data["require_key_reference"])
        if "default_key_ops" in data:
            kwargs["default_key_ops"] = tuple(data["default_key_ops"])
        if "http_timeout" in data:
            kwargs["http_timeout"] = float(data["http_timeout"])
        if "http_max_retries" in data:
            kwargs["http_max_retries"] = int(data["http_max_retries"])
        return KeySetConfig(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
