# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Doctrine Column Name Validation CLI.

Validates the column names mapped on Doctrine entity classes and exits with
0 when no violation was found, 1 when at least one was found, and 2 when the
run could not be completed.

Usage:
    doctrine-validate-column-names
    doctrine-validate-column-names -c -vv "src/Entity/**/*.php"
    python -m doctrine_validation --config validation.yaml
"""

from __future__ import annotations

import logging
from dataclasses import replace

import click
from rich.console import Console

from doctrine_validation.enums import EnumNamingScheme
from doctrine_validation.models import ModelValidationReport, ModelValidatorConfig
from doctrine_validation.validation import ColumnNameValidator

logger = logging.getLogger(__name__)

# Markup and highlighting are off so "$property" and "[...]" print verbatim.
console = Console(markup=False, highlight=False, soft_wrap=True)
err_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)

MAX_VERBOSITY = 3


@click.command("doctrine-validate-column-names")
@click.argument("files", nargs=-1)
@click.option(
    "-c",
    "--camel-case",
    is_flag=True,
    default=False,
    help="Require camelCase column names instead of underscore_case.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show progress: -v files, -vv classes, -vvv properties.",
)
@click.option("-q", "--quiet", is_flag=True, help="Do not print violations.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with 'camel_case' and 'files' settings.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def validate_column_names(
    files: tuple[str, ...],
    camel_case: bool,
    verbose: int,
    quiet: bool,
    config_path: str | None,
    debug: bool,
) -> None:
    """Validate column names of Doctrine entities.

    FILES are glob patterns selecting entity source files
    (default: src/Entity/*.php).
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = _build_config(files, camel_case, verbose, config_path)
        report = _run(config)
    except Exception as e:
        logger.debug("Validation aborted", exc_info=True)
        err_console.print(f"ERROR: {e}", style="bold red")
        raise SystemExit(2) from e

    _print_report(report, config, quiet)
    raise SystemExit(report.exit_code)


def _build_config(
    files: tuple[str, ...],
    camel_case: bool,
    verbose: int,
    config_path: str | None,
) -> ModelValidatorConfig:
    """Resolve settings: defaults < environment < config file < arguments."""
    config = ModelValidatorConfig.from_env()
    if config_path is not None:
        config = config.with_yaml(config_path)

    config = replace(config, verbosity=min(verbose, MAX_VERBOSITY))
    if camel_case:
        config = replace(config, naming_scheme=EnumNamingScheme.CAMEL)
    if files:
        config = replace(config, file_patterns=tuple(files))
    return config


def _run(config: ModelValidatorConfig) -> ModelValidationReport:
    def on_progress(level: int, message: str) -> None:
        if level <= config.verbosity:
            console.print(message)

    validator = ColumnNameValidator(config.naming_scheme, on_progress=on_progress)
    return validator.validate_patterns(config.file_patterns)


def _print_report(
    report: ModelValidationReport, config: ModelValidatorConfig, quiet: bool
) -> None:
    if not quiet:
        for diagnostic in report.diagnostics:
            console.print(diagnostic.format_message(), style="red")
        for failure in report.failures:
            console.print(failure.format_message(), style="yellow")

    if config.verbosity > 0:
        style = "bold green" if report.is_valid else "bold red"
        console.print(report.format_summary(), style=style)


def main() -> None:
    """Console script entry point."""
    validate_column_names()


__all__: list[str] = ["main", "validate_column_names"]
