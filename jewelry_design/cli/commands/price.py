# jewelry_design/cli/commands/price.py

from pathlib import Path
from typing import Optional

import typer

from jewelry_design.cli.options import build_selection, echo_json, load_cli_settings
from jewelry_design.language_engine.engine import format_price
from jewelry_design.pricing.calculator import calculate_price


def price(
    jewelry_type: Optional[str] = typer.Option(None, "--type"),
    metal: Optional[str] = typer.Option(None, "--metal"),
    gem: Optional[str] = typer.Option(None, "--gem", help="Gemstone, or 'none' to clear it"),
    gem_size: Optional[float] = typer.Option(None, "--gem-size"),
    gem_count: Optional[int] = typer.Option(None, "--gem-count"),
    from_json: Optional[Path] = typer.Option(None, "--from-json", help="Selection as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Computes the estimated price of a selection.
    """
    settings = load_cli_settings(config)
    selection = build_selection(
        settings.default_selection,
        from_json,
        {
            "jewelry_type": jewelry_type,
            "metal_type": metal,
            "gem_type": gem,
            "gem_size": gem_size,
            "gem_count": gem_count,
        },
    )
    echo_json(
        {"selection": selection.to_payload(), "price": format_price(calculate_price(selection))},
        pretty,
    )
