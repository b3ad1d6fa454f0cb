"""Show key identifiers and RFC 7638 thumbprints."""

from rich.console import Console

from src.cli.output import format_keys, json_output

from .public import run_load

console = Console()


def thumbprint_command(source: str, config_path: str | None, uri: bool, json_flag: bool) -> None:
    """List kid, kty, alg, role and thumbprint for every key in the source."""
    jwks = run_load(source, config_path)
    if json_flag:
        json_output(console, [
            {"kid": k.kid, "kty": k.kty, "alg": k.alg, "role": k.role,
             "thumbprint": k.thumbprint_uri() if uri else k.thumbprint()}
            for k in jwks
        ])
        return
    if uri:
        for k in jwks:
            console.print(f"[cyan]{k.kid}[/cyan] {k.thumbprint_uri()}")
        return
    format_keys(console, "Thumbprints", jwks.keys, thumbprints=True)
