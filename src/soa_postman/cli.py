"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from soa_postman.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from soa_postman.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_collection_generation,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="soa-postman")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def cli(debug: bool) -> None:
    """Generate Postman collections from Teamcenter SOA structure files."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )


@cli.command(name="generate")
@click.option(
    "--structure",
    "structure_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to structure.js from aws2/stage/out/soa/api",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Postman collection JSON to write",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    default=None,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON generator configuration file",
)
@click.option(
    "--include-internal",
    is_flag=True,
    default=False,
    help="Include internal APIs in the collection.",
)
def generate(
    structure_path: str, output_path: str, config_path: str | None, include_internal: bool
) -> None:
    """Generate a Postman collection from a structure file."""
    try:
        outcome = execute_collection_generation(
            GenerationRequest(
                structure_path=structure_path,
                output_path=output_path,
                config_path=config_path,
                include_internal=include_internal,
            )
        )
    except GenerationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration with the default values."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


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
