"""Main CLI entry point for jwkset."""

import logging
from typing import List, Optional

import typer
from rich.console import Console

from src.cli.commands.find import find_command
from src.cli.commands.generate import generate_command
from src.cli.commands.public import public_command
from src.cli.commands.thumbprint import thumbprint_command

app = typer.Typer(
    name="jwks",
    help="JSON Web Key Set tooling - generate, inspect and publish keys",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()

CONFIG_OPTION = typer.Option(None, "-c", "--config", help="YAML config file (defaults to JWKS_* env vars)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """JSON Web Key Set tooling."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command("generate")
def generate(
    algs: List[str] = typer.Argument(..., help="Algorithms, e.g. RS256 ES256 HS256"),
    kid: Optional[str] = typer.Option(None, "-k", "--kid", help="Key ID (single algorithm only)"),
    modulus_length: Optional[int] = typer.Option(None, "-m", "--modulus-length", help="RSA modulus bits"),
    output: Optional[str] = typer.Option(None, "-o", "--out", help="Write the full key set to a file"),
    config: Optional[str] = CONFIG_OPTION,
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Generate keys; keypairs share one kid."""
    generate_command(algs, kid, modulus_length, output, config, json_flag)


@app.command("public")
def public(
    source: str = typer.Argument(..., help="File path, URL or JSON text"),
    config: Optional[str] = CONFIG_OPTION,
) -> None:
    """Print the publishable JWKS (public keys and metadata)."""
    public_command(source, config)


@app.command("thumbprint")
def thumbprint(
    source: str = typer.Argument(..., help="File path, URL or JSON text"),
    uri: bool = typer.Option(False, "--uri", help="Show thumbprint URIs"),
    config: Optional[str] = CONFIG_OPTION,
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the RFC 7638 thumbprint of each key."""
    thumbprint_command(source, config, uri, json_flag)


@app.command("find")
def find(
    source: str = typer.Argument(..., help="File path, URL or JSON text"),
    kid: Optional[str] = typer.Option(None, "--kid"),
    kty: Optional[str] = typer.Option(None, "--kty"),
    alg: Optional[str] = typer.Option(None, "--alg"),
    use: Optional[str] = typer.Option(None, "--use"),
    op: Optional[str] = typer.Option(None, "--op", help="Required entry in key_ops"),
    config: Optional[str] = CONFIG_OPTION,
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Select keys by member values."""
    find_command(source, kid, kty, alg, use, op, config, json_flag)


if __name__ == "__main__":
    app()
