# jewelry_design/cli/commands/describe.py

from pathlib import Path
from typing import Optional

import typer

from jewelry_design.cli.options import build_selection, load_cli_settings
from jewelry_design.language_engine.engine import describe as describe_selection
from jewelry_design.pricing.calculator import calculate_price


def describe(
    jewelry_type: Optional[str] = typer.Option(None, "--type", help="ring, necklace, earrings, bracelet"),
    metal: Optional[str] = typer.Option(None, "--metal", help="gold, silver, platinum, rose-gold, white-gold, titanium"),
    gem: Optional[str] = typer.Option(None, "--gem", help="Gemstone, or 'none' to clear it"),
    gem_size: Optional[float] = typer.Option(None, "--gem-size", help="Carats, 0.5 to 3.0"),
    gem_count: Optional[int] = typer.Option(None, "--gem-count", help="1 to 7"),
    ring_size: Optional[float] = typer.Option(None, "--ring-size", help="4 to 13"),
    shape: Optional[str] = typer.Option(None, "--shape", help="round, square, triangle, heart, hexagon or custom-N"),
    engraving: Optional[str] = typer.Option(None, "--engraving", help="Up to 20 characters"),
    from_json: Optional[Path] = typer.Option(None, "--from-json", help="Selection as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
):
    """
    Prints the written description of a selection, priced from the selection itself.
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
            "ring_size": ring_size,
            "shape": shape,
            "engraving_text": engraving,
        },
    )
    typer.echo(describe_selection(selection, calculate_price(selection)))
