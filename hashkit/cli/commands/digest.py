"""
Native Click implementation of the digest command.

Usage: hashkit digest [PATH]... [-a ALGO] [-m lines|bytes] [-t TEXT]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.exceptions import FileHashError, UnknownAlgorithmError
from ..context import HashkitContext
from ..decorators import algorithm_option, mode_option


@click.command("digest")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@algorithm_option
@mode_option
@click.option("--text", "-t", default=None, help="Hash this string (UTF-8) instead of files.")
@click.pass_obj
def digest(
    ctx: HashkitContext,
    paths: tuple[Path, ...],
    algorithm: str | None,
    mode: str | None,
    text: str | None,
) -> None:
    """Print the digest of each file, or of a string.

    Output lines are '<hex>  <path>'. Files that cannot be read are
    reported on stderr and the command exits with status 1 after
    processing the rest.

    \b
    Examples:

        hashkit digest data.csv

        hashkit digest -a sha-512/256 a.txt b.txt

        hashkit digest -m bytes image.png

        hashkit digest -t "Hello, World!"
    """
    if text is None and not paths:
        raise click.UsageError("Give at least one PATH or --text.")

    try:
        algo = ctx.resolve_algorithm(algorithm)
    except UnknownAlgorithmError as e:
        raise click.BadParameter(str(e), param_hint="'--algorithm'") from e
    file_mode = ctx.resolve_file_mode(mode)

    if text is not None:
        click.echo(f"{algo.hash_str(text).to_hex()}  -")

    failed = 0
    for path in paths:
        try:
            result = algo.hash_file(path, file_mode)
        except FileHashError as e:
            click.echo(f"hashkit: {e.message}", err=True)
            failed += 1
            continue
        click.echo(f"{result.to_hex()}  {path}")

    if failed:
        raise SystemExit(1)
