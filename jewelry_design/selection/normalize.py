from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic.alias_generators import to_camel

from .types import (
    DesignSelection,
    ENGRAVING_MAX_LENGTH,
    GEM_COUNT_RANGE,
    GEM_SIZE_RANGE,
    GemType,
    JewelryType,
    MetalType,
    RING_SIZE_RANGE,
    SELECTION_FIELDS,
    Shape,
    is_custom_shape,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

DEFAULT_SELECTION = DesignSelection()


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    if name in raw:
        return raw[name]
    return raw.get(to_camel(name))


def _coerce_enum(enum_cls: Type[E], value: Any, default: Optional[E]) -> Optional[E]:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    return default


def _coerce_number(value: Any, default: float, low: float, high: float) -> float:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number:  # NaN
        return default
    return clamp(number, low, high)


def _coerce_shape(value: Any) -> str:
    if isinstance(value, Shape):
        return value.value
    if isinstance(value, str):
        if is_custom_shape(value):
            return value
        try:
            return Shape(value.strip().lower()).value
        except ValueError:
            pass
    return DEFAULT_SELECTION.shape


def coerce_selection(raw: Union[DesignSelection, Mapping[str, Any], None]) -> DesignSelection:
    """
    Build a valid DesignSelection from loosely typed input.

    Out-of-range numbers are clamped, engraving text is truncated and
    missing or unknown enum values fall back to the same defaults the
    extractor uses. Never raises for mapping input.
    """
    if isinstance(raw, DesignSelection):
        return raw
    if raw is None:
        return DEFAULT_SELECTION

    gem_raw = _lookup(raw, "gem_type")
    gem_type = _coerce_enum(GemType, gem_raw, None)
    engraving = _lookup(raw, "engraving_text")
    engraving = engraving if isinstance(engraving, str) else ""

    count = _coerce_number(
        _lookup(raw, "gem_count"), DEFAULT_SELECTION.gem_count, *GEM_COUNT_RANGE
    )

    selection = DesignSelection(
        jewelry_type=_coerce_enum(
            JewelryType, _lookup(raw, "jewelry_type"), DEFAULT_SELECTION.jewelry_type
        ),
        metal_type=_coerce_enum(
            MetalType, _lookup(raw, "metal_type"), DEFAULT_SELECTION.metal_type
        ),
        gem_type=gem_type,
        gem_size=_coerce_number(
            _lookup(raw, "gem_size"), DEFAULT_SELECTION.gem_size, *GEM_SIZE_RANGE
        ),
        gem_count=int(round(count)),
        ring_size=_coerce_number(
            _lookup(raw, "ring_size"), DEFAULT_SELECTION.ring_size, *RING_SIZE_RANGE
        ),
        shape=_coerce_shape(_lookup(raw, "shape")),
        engraving_text=engraving[:ENGRAVING_MAX_LENGTH],
    )

    unknown = set(raw) - set(SELECTION_FIELDS) - {to_camel(f) for f in SELECTION_FIELDS}
    if unknown:
        logger.debug("Ignoring unknown selection keys: %s", sorted(unknown))
    return selection
