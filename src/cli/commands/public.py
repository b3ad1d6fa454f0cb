"""Print the public projection of a key set."""

import asyncio

import typer
from rich.console import Console

from src.cli.output import format_error, json_output
from src.cli.utils import ConfigError, resolve_config
from src.keyset import JWKSet, KeySetError
from src.provider import ProviderError

console = Console()


async def load_key_set(source: str, config_path: str | None) -> JWKSet:
    """Import a JWK or JWKS from a file path, URL or JSON text."""
    jwks = JWKSet(config=resolve_config(config_path))
    async with jwks.fetcher:
        await jwks.import_keys(source)
    return jwks


def run_load(source: str, config_path: str | None) -> JWKSet:
    """Load a key set, exiting with code 1 and a message on failure."""
    try:
        return asyncio.run(load_key_set(source, config_path))
    except ConfigError as e:
        format_error(console, str(e), hint="Check --config or JWKS_* environment variables")
    except (KeySetError, ProviderError) as e:
        format_error(console, f"Could not load keys from {source}: {e}")
    raise typer.Exit(code=1)


def public_command(source: str, config_path: str | None) -> None:
    """Print metadata and public keys only."""
    jwks = run_load(source, config_path)
    json_output(console, jwks.public_dict())
