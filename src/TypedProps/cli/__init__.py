"""CLI package for TypedProps.

Loads a ``.env`` file from the working directory before parsing options, so
``TYPED_PROPS_CONFIG`` can be set there.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from dotenv import load_dotenv

from TypedProps.cli.runner import CommandRunner
from TypedProps.cli.ui import cli


def main() -> None:
    """Run TypedProps CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    load_dotenv()
    cli()
