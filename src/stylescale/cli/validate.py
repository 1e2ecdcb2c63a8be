"""CLI command: stylescale validate -- lint a theme configuration."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylescale.model.diagnostic import Severity
from stylescale.model.theme import ConfigError, ThemeConfiguration
from stylescale.validation import severity_counts
from stylescale.validation import validate as run_validate


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
def validate(config_file: str) -> None:
    """Load and lint a JSON theme configuration.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    config_path = Path(config_file)

    try:
        config = ThemeConfiguration.from_json(config_path.read_text(encoding="utf-8"))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(config)

    if not diagnostics:
        click.echo(f"OK: {config_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    counts = severity_counts(diagnostics)

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), {counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )

    if counts[Severity.ERROR]:
        sys.exit(1)
    sys.exit(0)
