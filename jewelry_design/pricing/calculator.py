from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from ..selection.normalize import coerce_selection
from ..selection.types import DesignSelection, GemType, JewelryType, MetalType

BASE_PRICES: Dict[JewelryType, float] = {
    JewelryType.RING: 200.0,
    JewelryType.NECKLACE: 300.0,
    JewelryType.EARRINGS: 250.0,
    JewelryType.BRACELET: 350.0,
}

METAL_MULTIPLIERS: Dict[MetalType, float] = {
    MetalType.GOLD: 1.5,
    MetalType.SILVER: 1.0,
    MetalType.PLATINUM: 2.0,
    MetalType.ROSE_GOLD: 1.7,
    MetalType.WHITE_GOLD: 1.6,
    MetalType.TITANIUM: 1.3,
}

GEM_MULTIPLIERS: Dict[GemType, float] = {
    GemType.DIAMOND: 3.0,
    GemType.RUBY: 2.5,
    GemType.SAPPHIRE: 2.2,
    GemType.EMERALD: 2.7,
    GemType.AMETHYST: 1.5,
    GemType.TOPAZ: 1.3,
}

GEM_SIZE_FACTOR = 0.5
GEM_COUNT_FACTOR = 0.2


def calculate_price(selection: Union[DesignSelection, Mapping[str, Any]]) -> float:
    """
    base[type] * metal multiplier, scaled by the gem adjustment when a gem
    is set. Rounded to cents.
    """
    selection = coerce_selection(selection)
    price = BASE_PRICES[selection.jewelry_type] * METAL_MULTIPLIERS[selection.metal_type]

    if selection.gem_type is not None:
        gem_factor = 1 + GEM_MULTIPLIERS[selection.gem_type] * selection.gem_size * GEM_SIZE_FACTOR
        count_factor = 1 + selection.gem_count * GEM_COUNT_FACTOR
        price = price * gem_factor * count_factor

    return round(price, 2)
