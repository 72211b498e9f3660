"""passworks command line entrypoint."""

from __future__ import annotations

import asyncio
import logging

import click

from passworks.application.context import PassworksContext
from passworks.application.password import Password
from passworks.config.settings import PassworksSettings, load_settings
from passworks.domain.errors import PassworksError
from passworks.infrastructure.logging import configure_logging

logger = logging.getLogger(__name__)

# ValueError also covers pydantic ValidationError and hashlib/bcrypt parameter errors.
_USAGE_ERRORS = (PassworksError, ValueError)


def build_context(settings: PassworksSettings) -> PassworksContext:
    """Build an initialized context from environment-driven settings."""

    context = PassworksContext()
    context.init_from_settings(settings)
    return context


def _read_secret(secret: str | None) -> str:
    if secret is not None:
        return secret
    return click.get_text_stream("stdin").read().rstrip("\r\n")


@click.group("passworks")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Hash and verify passwords as `strategy:algorithm:iterations:key_length:salt:hash`."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    ctx.obj = build_context(settings)


@cli.command("hash")
@click.option("--secret", default=None, help="Plaintext secret (default: read stdin).")
@click.option("--strategy", default=None, help="Strategy name override.")
@click.option("--algorithm", default=None, help="Digest algorithm override.")
@click.option(
    "--iterations",
    type=int,
    default=None,
    help="Iteration count override (bcrypt_pbkdf: rounds, at most 1024).",
)
@click.option("--key-length", type=int, default=None, help="Key length override, in bytes.")
@click.pass_obj
def hash_command(
    context: PassworksContext,
    secret: str | None,
    strategy: str | None,
    algorithm: str | None,
    iterations: int | None,
    key_length: int | None,
) -> None:
    """Hash a secret and print the serialized record."""

    overrides = {
        name: value
        for name, value in (
            ("strategy", strategy),
            ("algorithm", algorithm),
            ("iterations", iterations),
            ("key_length", key_length),
        )
        if value is not None
    }
    try:
        password = Password(overrides or None, context=context)
        asyncio.run(password.digest(_read_secret(secret)))
    except _USAGE_ERRORS as error:
        raise click.ClickException(str(error)) from error
    logger.info("cli_hash_completed strategy=%s", password.strategy)
    click.echo(password.to_string())


@cli.command("verify")
@click.argument("record")
@click.option("--secret", default=None, help="Candidate secret (default: read stdin).")
@click.pass_context
def verify_command(ctx: click.Context, record: str, secret: str | None) -> None:
    """Verify a secret against RECORD; exit status 1 on mismatch."""

    context: PassworksContext = ctx.obj
    try:
        password = Password.from_string(record, context=context)
        result = asyncio.run(password.verify(_read_secret(secret)))
    except _USAGE_ERRORS as error:
        raise click.ClickException(str(error)) from error

    click.echo(result.outcome.value)
    if not result.matched:
        ctx.exit(1)


def main() -> None:
    """Run the passworks command line tool."""

    cli()


if __name__ == "__main__":
    main()
