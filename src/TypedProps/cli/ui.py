"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the command runner.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from TypedProps.accessors import ACCESSORS
from TypedProps.cli.runner import CommandRunner
from TypedProps.config import load_config_with_defaults
from TypedProps.config.output import OUTPUT_FORMATS

_SOURCE = click.argument("source", type=click.Path(path_type=Path, dir_okay=False, exists=True))
_ENV = click.option("--env", "env", is_flag=True, help="Read SOURCE as a dotenv file.")


@click.group(help="TypedProps: inspect and validate properties files.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    envvar="TYPED_PROPS_CONFIG",
    help="Path to YAML config file, merged over built-in defaults.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(OUTPUT_FORMATS)),
    default=None,
    help="Override output.format from the config.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, output_format: str | None) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
        output_format: Optional output format override.
    """
    cfg = load_config_with_defaults(config_path)
    if output_format:
        cfg = replace(cfg, output=replace(cfg.output, format=output_format))
    ctx.obj = CommandRunner(cfg)


@cli.command("show")
@_SOURCE
@_ENV
@click.pass_context
def show_cmd(ctx: click.Context, source: Path, env: bool) -> None:
    """Print every property in SOURCE."""
    ctx.obj.run_show(ctx.command.name, source, env=env)


@cli.command("get")
@_SOURCE
@click.argument("key")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(sorted(ACCESSORS)),
    default="string",
    show_default=True,
    help="Type to coerce the value to.",
)
@click.option("--default", "default", default=None, help="Value text to use when KEY is absent.")
@_ENV
@click.pass_context
def get_cmd(
    ctx: click.Context, source: Path, key: str, type_name: str, default: str | None, env: bool
) -> None:
    """Print KEY from SOURCE coerced to a type."""
    ctx.obj.run_get(ctx.command.name, source, key, type_name=type_name, default=default, env=env)


@cli.command("check")
@_SOURCE
@click.option(
    "--schema",
    "schema_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    required=True,
    help="YAML schema declaring expected keys and types.",
)
@_ENV
@click.pass_context
def check_cmd(ctx: click.Context, source: Path, schema_path: Path, env: bool) -> None:
    """Validate SOURCE against a schema, reporting every problem."""
    ctx.obj.run_check(ctx.command.name, source, schema_path, env=env)
