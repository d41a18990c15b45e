"""
Click command implementations for hashkit CLI.

Each module corresponds to a hashkit command. Commands are registered
with the main CLI group via register_commands() in hashkit.cli.
"""

from .algorithms import algorithms
from .digest import digest
from .verify import verify

COMMANDS = [
    algorithms,
    digest,
    verify,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "digest",
    "verify",
]
