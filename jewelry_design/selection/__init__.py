from .types import (
    CUSTOM_SHAPE_PREFIX,
    DesignSelection,
    ExtractionResult,
    GemType,
    JewelryType,
    MetalType,
    SELECTION_FIELDS,
    Shape,
    is_custom_shape,
)
from .normalize import DEFAULT_SELECTION, clamp, coerce_selection

__all__ = [
    "CUSTOM_SHAPE_PREFIX",
    "DEFAULT_SELECTION",
    "DesignSelection",
    "ExtractionResult",
    "GemType",
    "JewelryType",
    "MetalType",
    "SELECTION_FIELDS",
    "Shape",
    "clamp",
    "coerce_selection",
    "is_custom_shape",
]
