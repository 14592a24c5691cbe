from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from src.config import Config, load_config
from src.conversion import BaseConversionService, get_service
from src.ui.tui.app import ConverterTUI
from src.ui.tui.controller import ConversionController, parse_amount
from src.ui.tui.display import create_error_panel
from src.ui.tui.renderer import format_error, format_result_line
from src.utils.errors import ConfigurationError, ConversionError, ValidationError


app = typer.Typer(add_completion=False, help="Currency Converter CLI")
console = Console()


def _build_service(config_path: str, offline: bool) -> tuple[Config, BaseConversionService]:
    try:
        cfg = load_config(config_path)
        service = get_service("static" if offline else cfg.default_service, config=cfg)
    except (ConfigurationError, ValueError) as e:
        console.print(create_error_panel(str(e)))
        raise typer.Exit(code=1)
    return cfg, service


@app.command("run")
def run(
    config_path: str = typer.Option("config.yaml", "--config", "-c", help="Path to the YAML configuration"),
    offline: bool = typer.Option(False, "--offline", help="Use the configured static rate table"),
):
    """Start the interactive converter."""
    cfg, service = _build_service(config_path, offline)
    controller = ConversionController(service, cfg.currencies)
    ConverterTUI(controller, app_name=cfg.app_name).run()


@app.command("convert")
def convert(
    amount: str = typer.Argument(..., help="Amount to convert, e.g. 100"),
    from_code: str = typer.Argument(..., metavar="FROM", help="Source currency code"),
    to_code: str = typer.Argument(..., metavar="TO", help="Target currency code"),
    config_path: str = typer.Option("config.yaml", "--config", "-c", help="Path to the YAML configuration"),
    offline: bool = typer.Option(False, "--offline", help="Use the configured static rate table"),
):
    """Convert once without the interactive flow."""
    _, service = _build_service(config_path, offline)
    source: str = from_code.upper()
    target: str = to_code.upper()

    try:
        value = parse_amount(amount)
        result: Optional[float] = service.convert(value, source, target)
    except (ValidationError, ConversionError) as e:
        console.print(create_error_panel(format_error(e)))
        raise typer.Exit(code=1)

    typer.echo(format_result_line(value, source, result, target))


if __name__ == "__main__":  # pragma: no cover
    app()
