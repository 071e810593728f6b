from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class JewelryType(str, Enum):
    RING = "ring"
    NECKLACE = "necklace"
    EARRINGS = "earrings"
    BRACELET = "bracelet"


class MetalType(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    PLATINUM = "platinum"
    ROSE_GOLD = "rose-gold"
    WHITE_GOLD = "white-gold"
    TITANIUM = "titanium"


class GemType(str, Enum):
    DIAMOND = "diamond"
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    EMERALD = "emerald"
    AMETHYST = "amethyst"
    TOPAZ = "topaz"


class Shape(str, Enum):
    ROUND = "round"
    SQUARE = "square"
    TRIANGLE = "triangle"
    HEART = "heart"
    HEXAGON = "hexagon"


CUSTOM_SHAPE_PREFIX = "custom-"

GEM_SIZE_RANGE = (0.5, 3.0)
GEM_COUNT_RANGE = (1, 7)
RING_SIZE_RANGE = (4.0, 13.0)
ENGRAVING_MAX_LENGTH = 20

SELECTION_FIELDS: List[str] = [
    "jewelry_type",
    "metal_type",
    "gem_type",
    "gem_size",
    "gem_count",
    "ring_size",
    "shape",
    "engraving_text",
]


def is_custom_shape(shape: str) -> bool:
    return shape.startswith(CUSTOM_SHAPE_PREFIX)


class DesignSelection(BaseModel):
    """
    The structured jewelry configuration shared by extraction, description
    and pricing. Fields tied to an absent gem (or a non-ring piece) still
    hold values; consumers ignore them when irrelevant.
    """
    jewelry_type: JewelryType = JewelryType.RING
    metal_type: MetalType = MetalType.GOLD
    gem_type: Optional[GemType] = None
    gem_size: float = Field(default=1.0, ge=GEM_SIZE_RANGE[0], le=GEM_SIZE_RANGE[1])
    gem_count: int = Field(default=1, ge=GEM_COUNT_RANGE[0], le=GEM_COUNT_RANGE[1])
    ring_size: float = Field(default=7.0, ge=RING_SIZE_RANGE[0], le=RING_SIZE_RANGE[1])
    shape: str = Shape.ROUND.value
    engraving_text: str = Field(default="", max_length=ENGRAVING_MAX_LENGTH)

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("shape", mode="before")
    @classmethod
    def _check_shape(cls, value):
        if isinstance(value, Shape):
            return value.value
        if not isinstance(value, str):
            raise ValueError("shape must be a string")
        if is_custom_shape(value) or value in {s.value for s in Shape}:
            return value
        raise ValueError(f"unknown shape: {value!r}")

    @property
    def has_gem(self) -> bool:
        return self.gem_type is not None

    @property
    def has_custom_shape(self) -> bool:
        return is_custom_shape(self.shape)

    def to_payload(self) -> Dict[str, object]:
        """JSON-ready dict using the camelCase names the UI exchanges."""
        return self.model_dump(mode="json", by_alias=True)


class ExtractionResult(BaseModel):
    selection: DesignSelection
    confidence: Dict[str, float] = Field(default_factory=dict)
    detected_fields: Set[str] = Field(default_factory=set)

    model_config = ConfigDict(frozen=True)

    @field_validator("confidence")
    @classmethod
    def _check_confidence(cls, value: Dict[str, float]) -> Dict[str, float]:
        for name, score in value.items():
            if name not in SELECTION_FIELDS:
                raise ValueError(f"confidence for unknown field: {name}")
            if not 0.0 <= score <= 1.0:
                raise ValueError(f"confidence out of range for {name}: {score}")
        return value

    def to_payload(self) -> Dict[str, object]:
        return {
            "selection": self.selection.to_payload(),
            "confidence": {to_camel(k): v for k, v in self.confidence.items()},
            "detectedFields": sorted(to_camel(f) for f in self.detected_fields),
        }
