"""CLI command: stylescale resolve -- show the classes an element would get."""

from __future__ import annotations

import sys

import click

from stylescale.config import StyleScaleConfig, load_config
from stylescale.engine import ComponentScope, LiteralClass, ResolutionEngine
from stylescale.model.theme import ConfigError
from stylescale.validation import ValidationError, validate_or_raise


@click.command()
@click.argument("config_file", type=click.Path(dir_okay=False))
@click.argument("tag")
@click.option("--component", "component", default=None, help="Enclosing component name.")
@click.option(
    "--file", "source_file", default=None,
    help="Source file to derive the component name from.",
)
@click.option("--class", "class_name", default=None, help="Existing class attribute.")
@click.option("--id", "element_id", default=None, help="Element id attribute.")
@click.option(
    "--strict", is_flag=True,
    help="Refuse to resolve when the configuration has lint errors.",
)
def resolve(
    config_file: str,
    tag: str,
    component: str | None,
    source_file: str | None,
    class_name: str | None,
    element_id: str | None,
    strict: bool,
) -> None:
    """Resolve the class attribute for one TAG under CONFIG_FILE.

    A missing configuration file behaves like an empty configuration.
    """
    try:
        config = load_config(config_file)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    if strict and config is not None:
        try:
            validate_or_raise(config)
        except ValidationError as exc:
            for diag in exc.diagnostics:
                click.echo(str(diag), err=True)
            click.echo(f"Refusing to resolve: {len(exc.diagnostics)} error(s)", err=True)
            sys.exit(1)

    scope = ComponentScope(source_file)
    scope.enter_declaration(component)
    query = scope.query(tag, class_name=class_name, element_id=element_id)

    engine = ResolutionEngine(config, settings=StyleScaleConfig(strict_rules=strict))
    for diag in engine.diagnostics:
        click.echo(str(diag), err=True)

    patch = engine.apply(query, class_name)
    if isinstance(patch, LiteralClass):
        click.echo(patch.value)
    else:
        click.echo("(no change)")
