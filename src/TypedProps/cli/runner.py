"""Command runner for coordinating CLI execution.

Manages logging configuration, source loading, output writer selection and
error handling for each command.
"""

from __future__ import annotations

from pathlib import Path

import click

from TypedProps.accessors import ACCESSORS
from TypedProps.config import AppConfig, load_schema_file
from TypedProps.errors import PropertyError
from TypedProps.parsing import Kind
from TypedProps.renderers import OutputWriter, create_output_writer
from TypedProps.services import check_properties, load_source
from TypedProps.utils.log import configure_logging, log


class CommandRunner:
    """Runs one CLI command against a loaded configuration.

    Errors from loading or coercion are logged and turned into
    ``click.Abort`` so the process exits non-zero.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _prepare(self, action: str) -> OutputWriter:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        return create_output_writer(self.config.output)

    def _load(self, path: Path, env: bool) -> dict[str, str]:
        try:
            properties = load_source(path, env=env)
        except (OSError, ValueError) as e:
            log.error("Cannot load %s: %s", path, e)
            raise click.Abort from e
        log.debug("Source %s holds %d key(s)", path, len(properties))
        return properties

    def run_show(self, action: str, path: Path, *, env: bool = False) -> None:
        """Print every property of a source."""
        writer = self._prepare(action)
        writer.write_properties(self._load(path, env))

    def run_get(
        self,
        action: str,
        path: Path,
        key: str,
        *,
        type_name: str = "string",
        default: str | None = None,
        env: bool = False,
    ) -> None:
        """Print one property coerced to ``type_name``.

        Args:
            action: The CLI command name.
            path: Source file.
            key: Property key.
            type_name: One of the accessor type names.
            default: Text used when the key is absent; coerced like a value.
            env: Read the source as a dotenv file.

        Raises:
            click.Abort: When the key is absent without a default, or the
                value cannot be coerced.
        """
        writer = self._prepare(action)
        properties = self._load(path, env)
        if default is not None and key not in properties:
            log.debug("Key %s absent, using default %r", key, default)
            properties = {**properties, key: default}
        try:
            value = ACCESSORS[type_name](properties, key)
        except PropertyError as e:
            log.error("%s", e)
            raise click.Abort from e
        writer.write_value(key, value)

    def run_check(self, action: str, path: Path, schema_path: Path, *, env: bool = False) -> None:
        """Validate a source against a YAML schema.

        Raises:
            click.Abort: When the schema cannot be loaded or the check fails.
        """
        writer = self._prepare(action)
        try:
            schema = load_schema_file(schema_path)
        except (OSError, TypeError, ValueError) as e:
            log.error("Invalid schema %s: %s", schema_path, e)
            raise click.Abort from e

        result = check_properties(self._load(path, env), schema)
        writer.write_check(result)
        if result.kind is Kind.FAILURE:
            log.error("Check failed for %s: %d error(s)", path, len(result.errors))
            raise click.Abort
        log.debug("Check passed for %s with %d warning(s)", path, len(result.warnings))
