"""Command-line interface for compound-config.

Provides commands to inspect and validate compound options loaded from
a YAML schema and a flat YAML config file.
"""

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, Tuple

import click
import yaml

from compound_config import __version__
from compound_config.config import OptionSchema, layout_rows
from compound_config.core import CompoundOption
from compound_config.io import PACKAGE_LOGGER, append_report, log_to_file, validation_record


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Setup logging for CLI commands."""
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger(PACKAGE_LOGGER)


def _load(schema_path: str, config_path: str) -> Tuple[OptionSchema, dict]:
    try:
        schema = OptionSchema.from_yaml(Path(schema_path))
        results = schema.apply_config(Path(config_path))
    except (KeyError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))
    return schema, results


def _select(
    schema: OptionSchema,
    section: Optional[str],
    option: Optional[str],
) -> Iterator[Tuple[str, CompoundOption]]:
    if section and option:
        try:
            yield f"{section}/{option}", schema.get_option(section, option)
        except KeyError as e:
            raise click.ClickException(str(e))
        return

    for section_name, options in schema.sections.items():
        if section and section_name != section:
            continue
        for name, opt in options.items():
            if option and name != option:
                continue
            yield f"{section_name}/{name}", opt


@click.group()
@click.version_option(version=__version__, prog_name="compound-config")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option("--log-file", type=click.Path(), help="Also write logs to this file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, log_file: Optional[str]) -> None:
    """compound-config: Typed list options over flat config files.

    Examples:

        # Print the bindings parsed from a config file
        compound-config show -s schema.yaml -c config.yaml --option bindings

        # Check a config file, exit 1 if any option is rejected
        compound-config validate -s schema.yaml -c config.yaml
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["logger"] = setup_logging(verbose, debug)

    if log_file:
        level = logging.DEBUG if debug else logging.INFO
        actual_path = log_to_file(log_file, level=level)
        ctx.obj["logger"].info(f"Logging to {actual_path}")


@cli.command()
@click.option("--schema", "-s", "schema_path", required=True, type=click.Path(exists=True),
              help="Option schema file (YAML)")
@click.option("--config", "-c", "config_path", required=True, type=click.Path(exists=True),
              help="Flat config file (YAML)")
@click.option("--section", help="Only show options of this section")
@click.option("--option", "option_name", help="Only show options with this name")
@click.option("--format", "output_format", type=click.Choice(["table", "yaml", "str"]),
              default="table", help="Output format")
@click.pass_context
def show(
    ctx: click.Context,
    schema_path: str,
    config_path: str,
    section: Optional[str],
    option_name: Optional[str],
    output_format: str,
) -> None:
    """Print compound options after applying a config file.

    Formats:
      table: one row per tuple, one column per entry
      yaml: layout chosen by the option's type hint
      str: the option's own text form
    """
    logger = ctx.obj["logger"]
    schema, results = _load(schema_path, config_path)
    logger.info(f"Loaded {len(results)} options from {schema_path}")

    for key, option in _select(schema, section, option_name):
        if not results.get(key, True):
            click.echo(f"warning: {key} rejected, showing previous value", err=True)

        click.echo(f"[{key}]")
        if output_format == "table":
            frame = option.to_frame()
            click.echo("(empty)" if frame.empty else frame.to_string())
        elif output_format == "yaml":
            click.echo(yaml.safe_dump(layout_rows(option), sort_keys=False).rstrip("\n"))
        else:
            click.echo(option.get_value_str())


@cli.command()
@click.option("--schema", "-s", "schema_path", required=True, type=click.Path(exists=True),
              help="Option schema file (YAML)")
@click.option("--config", "-c", "config_path", required=True, type=click.Path(exists=True),
              help="Flat config file (YAML)")
@click.option("--report", type=click.Path(), help="Append a YAML report to this file")
@click.pass_context
def validate(
    ctx: click.Context,
    schema_path: str,
    config_path: str,
    report: Optional[str],
) -> None:
    """Check that every compound option accepts its config values."""
    logger = ctx.obj["logger"]
    schema, results = _load(schema_path, config_path)

    for key, accepted in results.items():
        click.echo(f"  {key}: {'ok' if accepted else 'rejected'}")

    if report:
        record = validation_record(schema, results, schema_path, config_path)
        append_report(report, record)
        logger.info(f"Report written to {report}")

    rejected = [key for key, accepted in results.items() if not accepted]
    if rejected:
        click.echo(f"{len(rejected)} option(s) rejected", err=True)
        sys.exit(1)
    click.echo("All options valid")


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
