"""
Click-based CLI for hashkit.

This module provides the main Click command group and serves as the
entry point for the hashkit CLI.

Usage:
    from hashkit.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import HashkitContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("hashkit")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: nearest .hashkit.toml or pyproject.toml [tool.hashkit]).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug diagnostics to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """hashkit - SHA-1 and SHA-2 digests of files and text

    \b
    Commands:
        hashkit digest <file>...        Print digests
        hashkit verify <file> <hex>     Check a file against a digest
        hashkit algorithms              List supported algorithms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = HashkitContext.create(config_path=config_path, verbose=verbose)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "HashkitContext",
    "__version__",
    "cli",
    "register_commands",
]
