"""CLI utilities."""

from .config import ConfigError, resolve_config
from .validation import validate_algorithm, validate_modulus_length

__all__ = [
    "ConfigError",
    "resolve_config",
    "validate_algorithm",
    "validate_modulus_length",
]
