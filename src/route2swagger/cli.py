"""CLI entry point for route2swagger."""

from pathlib import Path

import click

from route2swagger.config import ConverterOptions, load_config
from route2swagger.converter.analysis import RoutingAnalysis
from route2swagger.converter.converter import Converter
from route2swagger.errors import ConfigError
from route2swagger.log import configure_logging
from route2swagger.scanner import scan
from route2swagger.swagger.serializer import FORMATS, serialize


def _load_config(ctx: click.Context, param: click.Parameter, value: Path | None) -> None:
    """Use the config file as defaults for the remaining options."""
    if value is None:
        return
    try:
        config = load_config(value)
    except ConfigError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    ctx.default_map = {**(ctx.default_map or {}), **config.model_dump(exclude_unset=True)}


@click.group()
def main():
    """route2swagger: build Swagger documents from routing annotations."""
    pass


@main.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False, path_type=Path), callback=_load_config, is_eager=True, expose_value=False, help="YAML file with defaults for these options.")
@click.option("-o", "--file", "file", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file; if empty stdout will be used.")
@click.option("--path", "path", default="./src", type=click.Path(exists=True, path_type=Path), help="Source path.")
@click.option("--namespace", "namespaces", multiple=True, help="Additional annotation namespaces to process.")
@click.option("--auto-response/--no-auto-response", default=False, help="Add a default response to operations without one.")
@click.option("--auto-description/--no-auto-description", default=False, help="Derive missing descriptions from method and path.")
@click.option("--auto-summary/--no-auto-summary", default=True, help="Derive missing summaries from the description.")
@click.option("--format", "output_format", default="json", type=click.Choice(FORMATS), help="Output format.")
@click.option("-v", "--verbose", is_flag=True, help="Show scanner notices and warnings.")
def build(
    file: Path | None,
    path: Path,
    namespaces: tuple[str, ...],
    auto_response: bool,
    auto_description: bool,
    auto_summary: bool,
    output_format: str,
    verbose: bool,
):
    """Build swagger.json from annotated sources."""
    configure_logging(verbose)

    options = ConverterOptions(
        auto_response=auto_response,
        auto_description=auto_description,
        auto_summary=auto_summary,
    )
    analysis = RoutingAnalysis(converter=Converter(options=options), namespaces=namespaces)
    try:
        swagger = scan(path, analysis)
    except OSError as e:
        raise click.ClickException(f"Cannot read sources in {path}: {e}") from e

    document = serialize(swagger, output_format)

    if file is None:
        click.echo(document)
        return

    try:
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(document + "\n", encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Cannot write {file}: {e}") from e
    click.echo(f"Swagger document saved to {file}", err=True)
