"""
Native Click implementation of the verify command.

Usage: hashkit verify PATH EXPECTED [-a ALGO] [-m lines|bytes]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.exceptions import FileHashError, InvalidDigestError, UnknownAlgorithmError
from ...hashing import Digest
from ..context import HashkitContext
from ..decorators import algorithm_option, mode_option


@click.command("verify")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("expected")
@algorithm_option
@mode_option
@click.pass_obj
def verify(
    ctx: HashkitContext,
    path: Path,
    expected: str,
    algorithm: str | None,
    mode: str | None,
) -> None:
    """Check PATH against the hex digest EXPECTED.

    Prints "<path>: OK" and exits 0 on a match, or "<path>: FAILED" and
    exits 1 otherwise.

    \b
    Examples:

        hashkit verify data.csv dffd6021bb2bd5b0af676290809ec3a5...
    """
    try:
        algo = ctx.resolve_algorithm(algorithm)
    except UnknownAlgorithmError as e:
        raise click.BadParameter(str(e), param_hint="'--algorithm'") from e

    try:
        wanted = Digest.from_hex(algo, expected)
    except InvalidDigestError as e:
        raise click.BadParameter(e.message, param_hint="'EXPECTED'") from e

    try:
        actual = algo.hash_file(path, ctx.resolve_file_mode(mode))
    except FileHashError as e:
        raise click.ClickException(e.message) from e

    if actual == wanted:
        click.echo(f"{path}: OK")
        return

    click.echo(f"{path}: FAILED")
    raise SystemExit(1)
