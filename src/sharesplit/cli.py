"""Command line interface for sharesplit."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import click

from . import __version__
from .api import extract_secret_from_share_strings, generate_share_strings
from .errors import ShareError
from .policy import policy


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, policy.log_level, logging.WARNING)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("sharesplit").setLevel(level)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
@click.version_option(__version__, prog_name="sharesplit")
def main(verbose: bool) -> None:
    """Split a secret into threshold shares, or join shares back together."""

    _configure_logging(verbose)


@main.command()
@click.argument("n")
@click.argument("t")
@click.argument("secret", required=False)
def split(n: str, t: str, secret: Optional[str]) -> None:
    """Create N shares of SECRET, any T of which recover it.

    Without SECRET the secret is read from standard input as raw bytes.
    """

    data = secret.encode("utf-8") if secret is not None else sys.stdin.buffer.read()
    try:
        blob = generate_share_strings(data, n, t)
    except ShareError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(blob, nl=False)


@main.command()
@click.argument("shares", type=click.File("r"), default="-")
@click.option("--strict/--lenient", default=None, help="Validate the header marker and thresholds.")
@click.option(
    "--allow-below-threshold",
    is_flag=True,
    help="Join even when fewer shares than the threshold are supplied.",
)
def join(shares: TextIO, strict: Optional[bool], allow_below_threshold: bool) -> None:
    """Recover the secret from the share lines in SHARES (default: stdin)."""

    blob = shares.read()
    enforce_quorum = False if allow_below_threshold else None
    try:
        secret = extract_secret_from_share_strings(blob, strict=strict, enforce_quorum=enforce_quorum)
    except ShareError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(secret + b"\n", nl=False)


if __name__ == "__main__":
    main()
