"""
Click context extension for hashkit CLI.

Provides HashkitContext dataclass that holds hashkit-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click
from pydantic import ValidationError

from ..core.exceptions import HashkitConfigError
from ..core.settings import HashkitSettings, load_settings
from ..hashing import Algorithm, FileReadMode
from ..services.logging import configure_logging, get_logger


@dataclass
class HashkitContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Merged settings (init values, environment, TOML, defaults)
        cwd: Current working directory
    """

    settings: HashkitSettings
    cwd: Path

    @classmethod
    def create(
        cls,
        config_path: Path | None = None,
        verbose: bool = False,
        cwd: Path | None = None,
    ) -> HashkitContext:
        """Load settings and install the configured logger.

        Args:
            config_path: Explicit config file (otherwise discovered from cwd)
            verbose: Force debug logging to stderr
            cwd: Working directory override (defaults to Path.cwd())

        Raises:
            click.ClickException: If the configuration cannot be loaded
        """
        if cwd is None:
            cwd = Path.cwd()

        try:
            settings = load_settings(config_path=config_path, start_dir=str(cwd))
        except HashkitConfigError as e:
            raise click.ClickException(str(e)) from e
        except ValidationError as e:
            raise click.ClickException(f"Invalid configuration:\n{e}") from e

        if verbose:
            settings.logging.level = "debug"
            settings.logging.console = True

        configure_logging(settings.logging)
        if settings.config_file:
            get_logger().debug("Loaded config from %s", settings.config_file)
        if settings.config_error:
            click.echo(f"hashkit: warning: {settings.config_error}", err=True)

        return cls(settings=settings, cwd=cwd)

    @property
    def default_algorithm(self) -> Algorithm:
        return Algorithm(self.settings.hash.algorithm)

    @property
    def default_file_mode(self) -> FileReadMode:
        return FileReadMode(self.settings.hash.file_mode)

    def resolve_algorithm(self, name: str | None) -> Algorithm:
        """Resolve a --algorithm value, falling back to the configured default."""
        if name is None:
            return self.default_algorithm
        return Algorithm.from_name(name)

    def resolve_file_mode(self, mode: str | None) -> FileReadMode:
        """Resolve a --mode value, falling back to the configured default."""
        if mode is None:
            return self.default_file_mode
        return FileReadMode(mode)
