# jewelry_design/cli/commands/extract.py

from pathlib import Path
from typing import Optional

import typer

from jewelry_design.cli.options import build_selection, echo_json, load_cli_settings
from jewelry_design.extraction.extractor import DescriptionExtractor


def extract(
    text: str,
    from_json: Optional[Path] = typer.Option(None, "--from-json", help="Current selection as JSON; used as fallback"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for confidence jitter"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Parses a free-text description into selection parameters with per-field confidence.
    """
    settings = load_cli_settings(config)
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})

    fallback = build_selection(settings.default_selection, from_json, {})
    extractor = DescriptionExtractor(settings.build_scorer())
    result = extractor.extract(text, fallback)
    echo_json(result.to_payload(), pretty)
