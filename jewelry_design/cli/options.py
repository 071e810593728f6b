# jewelry_design/cli/options.py

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from jewelry_design.config import ConfigError, DesignSettings, configure_logging, load_settings
from jewelry_design.selection.normalize import coerce_selection
from jewelry_design.selection.types import DesignSelection

NO_GEM = "none"


def load_cli_settings(config: Optional[Path]) -> DesignSettings:
    try:
        settings = load_settings(config)
    except (FileNotFoundError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    configure_logging(settings)
    return settings


def echo_json(data: Any, pretty: bool) -> None:
    if pretty:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        typer.echo(json.dumps(data, ensure_ascii=False))


def build_selection(
    base: DesignSelection,
    from_json: Optional[Path],
    overrides: Dict[str, Any],
) -> DesignSelection:
    """Start from base, layer a JSON selection file, then explicit options."""
    data: Dict[str, Any] = base.model_dump()
    if from_json is not None:
        try:
            loaded = json.loads(from_json.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            typer.echo(f"Error: cannot read selection from {from_json}: {e}", err=True)
            raise typer.Exit(code=2)
        data = coerce_selection(loaded).model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("gem_type"), str) and data["gem_type"].strip().lower() == NO_GEM:
        data["gem_type"] = None
    return coerce_selection(data)
