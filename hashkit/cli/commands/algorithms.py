"""
Native Click implementation of the algorithms command.

Usage: hashkit algorithms
"""

from __future__ import annotations

import click

from ...hashing import Algorithm
from ..context import HashkitContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: HashkitContext) -> None:
    """List supported algorithms and their digest sizes.

    The configured default is marked with '*'.
    """
    default = ctx.default_algorithm
    for algo in Algorithm:
        marker = "*" if algo is default else " "
        click.echo(f"{marker} {algo.value:<12} {algo.digest_size * 8:>4} bits")
