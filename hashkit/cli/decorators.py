"""
Shared Click options for hashkit commands.

- algorithm_option: --algorithm/-a, resolved against the configured default
- mode_option: --mode/-m, how files are fed to the hasher
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

from ..hashing import Algorithm, FileReadMode

F = TypeVar("F", bound=Callable[..., object])


def algorithm_option(f: F) -> F:
    """Add --algorithm/-a. Leaves None when not given so the config default applies."""
    return click.option(
        "--algorithm",
        "-a",
        "algorithm",
        default=None,
        metavar="ALGO",
        help=f"Hash algorithm ({', '.join(Algorithm.names())}).",
    )(f)


def mode_option(f: F) -> F:
    """Add --mode/-m. Leaves None when not given so the config default applies."""
    return click.option(
        "--mode",
        "-m",
        "mode",
        type=click.Choice([m.value for m in FileReadMode]),
        default=None,
        help="Feed files line by line without terminators, or as raw bytes.",
    )(f)
