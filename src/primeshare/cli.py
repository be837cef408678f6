"""Command line interface: ``primeshare generate`` and ``primeshare reconstruct``."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from . import __version__
from .audit import AuditTrail
from .config import LOG_LEVELS, load_settings
from .errors import ShareError
from .generator import generate
from .reconstructor import reconstruct
from .shares_io import format_shares, read_shares

def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.captureWarnings(True)


def _audit(ctx: click.Context, event: str, **details: int) -> None:
    trail: AuditTrail | None = ctx.obj.get("audit")
    if trail is not None:
        trail.record_event(event, details=details)


@click.group()
@click.version_option(__version__, prog_name="primeshare")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostics verbosity on stderr (default: PRIMESHARE_LOG_LEVEL or WARNING).",
)
@click.option(
    "--audit-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write signed audit records to this directory (default: PRIMESHARE_AUDIT_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, audit_dir: Path | None) -> None:
    """Split a short secret into threshold shares and put it back together."""
    settings = load_settings()
    _configure_logging((log_level or settings.log_level).upper())
    audit_dir = audit_dir or settings.audit_dir
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["audit"] = AuditTrail(audit_dir) if audit_dir else None


@cli.command("generate")
@click.argument("secret")
@click.argument("n", type=click.IntRange(min=1))
@click.argument("k", type=click.IntRange(min=1))
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject secrets that do not fit in one field element instead of warning.",
)
@click.pass_context
def generate_cmd(ctx: click.Context, secret: str, n: int, k: int, strict: bool | None) -> None:
    """Print N shares of SECRET, any K of which reconstruct it."""
    if strict is None:
        strict = ctx.obj["settings"].strict_capacity
    try:
        shares = generate(
            os.fsencode(secret),
            n,
            k,
            strict=strict,
            max_shares=ctx.obj["settings"].max_shares,
        )
    except ShareError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(format_shares(shares), nl=False)
    _audit(ctx, "shares.generated", n=n, k=k)


@cli.command("reconstruct")
@click.argument("k", type=click.IntRange(min=1))
@click.option(
    "--input",
    "input_file",
    type=click.File("r", errors="replace"),
    default="-",
    help="File with one '<index> <value>' share per line (default: stdin).",
)
@click.pass_context
def reconstruct_cmd(ctx: click.Context, k: int, input_file) -> None:
    """Read K shares and print the secret."""
    try:
        shares = read_shares(input_file, k)
        secret = reconstruct(shares, k)
    except ShareError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(secret.decode("utf-8", errors="replace"))
    _audit(ctx, "secret.reconstructed", k=k)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
