"""Command-line interface for securetoken.

This module provides commands for generating and inspecting tokens.
"""

from typing import NoReturn

import click

from securetoken import __version__
from securetoken.core.config import get_settings
from securetoken.core.logging import configure_logging
from securetoken.domain.exceptions import DecodeError, RandomSourceError
from securetoken.domain.token import MIN_RECOMMENDED_LENGTH, Token


@click.group()
@click.version_option(version=__version__, prog_name="securetoken")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides SECURETOKEN_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """securetoken - cryptographically random tokens.

    Generate tokens for session keys and API tokens and inspect their
    URL-safe text form.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.command()
@click.option(
    "--length",
    "-l",
    type=click.IntRange(min=0),
    default=None,
    help="Token length in bytes (defaults to SECURETOKEN_DEFAULT_LENGTH)",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of tokens to generate",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "hex"]),
    default="text",
    help="Output encoding",
)
def generate(length: int | None, count: int, output_format: str) -> None:
    """Generate random tokens, one per line."""
    for _ in range(count):
        try:
            token = Token.generate(length)
        except RandomSourceError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

        if output_format == "hex":
            click.echo(token.to_binary().hex())
        else:
            click.echo(token.to_text())


@cli.command()
@click.argument("text")
def decode(text: str) -> None:
    """Decode a base64url token and show its bytes."""
    try:
        token = Token.from_text(text)
    except DecodeError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Length: {len(token)} bytes")
    click.echo(f"Hex:    {token.to_binary().hex()}")


@cli.command()
def info() -> None:
    """Display securetoken configuration."""
    settings = get_settings()

    click.echo(f"""
securetoken v{__version__}
{'=' * 40}

Configuration:
  Environment:     {settings.environment}

Tokens:
  Default Length:  {settings.default_length} bytes
  Min Recommended: {MIN_RECOMMENDED_LENGTH} bytes

Logging:
  Level:           {settings.log_level}
  Format:          {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `securetoken` command is run
    or when using `python -m securetoken`.
    """
    cli()


if __name__ == "__main__":
    main()
