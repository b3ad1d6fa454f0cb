"""Generate keys into a new key set."""

import asyncio
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from src.cli.output import format_error, format_keys, format_success, json_output
from src.cli.utils import ConfigError, resolve_config, validate_algorithm, validate_modulus_length
from src.keyset import JWKSet, KeySetError
from src.provider import ProviderError

console = Console()


def _descriptors(algs: list[str], kid: str | None, modulus_length: int | None) -> list[Any]:
    if kid and len(algs) > 1:
        raise ValueError("--kid can only be used with a single algorithm")
    if not kid and not modulus_length:
        return list(algs)
    descriptors = []
    for alg in algs:
        d: dict[str, Any] = {"alg": alg}
        if kid:
            d["kid"] = kid
        if modulus_length:
            d["modulusLength"] = modulus_length
        descriptors.append(d)
    return descriptors


def generate_command(
    algs: list[str],
    kid: str | None,
    modulus_length: int | None,
    output: str | None,
    config_path: str | None,
    json_flag: bool,
) -> None:
    """Generate keys and print or save the full key set."""
    try:
        algs = [validate_algorithm(a) for a in algs]
        if modulus_length is not None:
            validate_modulus_length(modulus_length)
        descriptors = _descriptors(algs, kid, modulus_length)
        config = resolve_config(config_path)
        jwks = asyncio.run(JWKSet.generate(descriptors, config=config))
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=1)
    except ConfigError as e:
        format_error(console, str(e), hint="Check --config or JWKS_* environment variables")
        raise typer.Exit(code=1)
    except (KeySetError, ProviderError) as e:
        format_error(console, f"Generation failed: {e}")
        raise typer.Exit(code=1)

    if output:
        path = Path(output)
        path.write_text(jwks.export_keys(), encoding="utf-8")
        path.chmod(0o600)

    if json_flag or not output:
        json_output(console, jwks.to_dict())
        return

    format_success(console, f"Generated {len(jwks)} key(s) into {output}")
    format_keys(console, "Keys", jwks.keys)
