"""Configuration resolution for CLI commands."""

from pathlib import Path

from src.keyset.config import ConfigError, KeySetConfig, load_config_from_env, load_config_from_file

__all__ = ["ConfigError", "resolve_config"]


def resolve_config(config_path: str | None) -> KeySetConfig:
    """Load ``--config`` when given, otherwise read ``JWKS_*`` environment variables."""
    if config_path:
        return load_config_from_file(Path(config_path).expanduser())
    try:
        return load_config_from_env()
    except ValueError as e:
        raise ConfigError(f"Invalid environment configuration: {e}") from e
