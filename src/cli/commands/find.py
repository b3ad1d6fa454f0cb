"""Select keys with a declarative predicate."""

from typing import Any

import typer
from rich.console import Console

from src.cli.output import format_keys, format_warning, json_output

from .public import run_load

console = Console()


def find_command(
    source: str,
    kid: str | None,
    kty: str | None,
    alg: str | None,
    use: str | None,
    op: str | None,
    config_path: str | None,
    json_flag: bool,
) -> None:
    """Print keys whose members match every given option."""
    predicate: dict[str, Any] = {
        name: value for name, value in (("kid", kid), ("kty", kty), ("alg", alg), ("use", use))
        if value is not None
    }
    if op is not None:
        predicate["key_ops"] = {"$contains": op}

    jwks = run_load(source, config_path)
    matches = jwks.filter(predicate)
    if not matches:
        format_warning(console, "No matching keys")
        raise typer.Exit(code=1)
    if json_flag:
        json_output(console, {"keys": [k.to_dict() for k in matches]})
        return
    format_keys(console, f"{len(matches)} matching key(s)", matches)
