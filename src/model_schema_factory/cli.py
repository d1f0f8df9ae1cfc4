"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from model_schema_factory.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from model_schema_factory.document_assembly import OutputFormat
from model_schema_factory.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_derivation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="model-schema-factory")
def cli() -> None:
    """Derive OpenAPI component schemas from annotated model classes."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="derive")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the components document; printed to stdout when omitted",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([choice.value for choice in OutputFormat]),
    help="Override the configured output format",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log derivation details.")
def derive(
    config_path: str, output_path: str | None, output_format: str | None, verbose: bool
) -> None:
    """Derive component schemas for the configured models and parameters."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        outcome = execute_schema_derivation_run(
            RunRequest(
                config_path=config_path,
                output_path=output_path,
                output_format=OutputFormat(output_format) if output_format else None,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is None:
        click.echo(outcome.rendered, nl=False)
    else:
        click.echo(str(outcome.output_path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
