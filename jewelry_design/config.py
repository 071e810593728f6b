"""Settings for the jewelry design core, optionally loaded from YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .extraction.confidence import ConfidenceScorer, DEFAULT_JITTER, MAX_JITTER
from .selection.types import DesignSelection

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(Exception):
    pass


class DesignSettings(BaseModel):
    default_selection: DesignSelection = Field(default_factory=DesignSelection)
    confidence_jitter: float = Field(default=DEFAULT_JITTER, ge=0.0, le=MAX_JITTER)
    seed: Optional[int] = None
    log_level: str = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def build_scorer(self) -> ConfidenceScorer:
        return ConfidenceScorer(seed=self.seed, jitter=self.confidence_jitter)


def load_settings(path: Union[str, Path, None] = None) -> DesignSettings:
    if path is None:
        return DesignSettings()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    try:
        return DesignSettings(**data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def configure_logging(settings: DesignSettings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
