from typing import Dict

from ..selection.types import GemType, MetalType, Shape

METAL_PHRASES: Dict[MetalType, str] = {
    MetalType.GOLD: "lustrous 18k gold",
    MetalType.SILVER: "polished sterling silver",
    MetalType.PLATINUM: "premium platinum",
    MetalType.ROSE_GOLD: "romantic rose gold",
    MetalType.WHITE_GOLD: "elegant white gold",
    MetalType.TITANIUM: "durable titanium",
}
UNKNOWN_METAL_PHRASE = "high-quality metal"

SHAPE_PHRASES: Dict[str, str] = {
    Shape.ROUND.value: "perfectly round",
    Shape.SQUARE.value: "contemporary square",
    Shape.HEART.value: "romantic heart-shaped",
    Shape.TRIANGLE.value: "geometric triangular",
    Shape.HEXAGON.value: "distinctive hexagonal",
}
CUSTOM_SHAPE_PHRASE = "custom-designed"
UNKNOWN_SHAPE_PHRASE = "beautifully shaped"

GEM_COLOR_PHRASES: Dict[GemType, str] = {
    GemType.DIAMOND: "brilliant and clear",
    GemType.RUBY: "rich red",
    GemType.SAPPHIRE: "deep blue",
    GemType.EMERALD: "vivid green",
    GemType.AMETHYST: "purple",
    GemType.TOPAZ: "golden",
}
UNKNOWN_GEM_COLOR_PHRASE = "beautiful"

GEM_QUALITY_PHRASES: Dict[GemType, str] = {
    GemType.DIAMOND: "exceptional clarity",
    GemType.RUBY: "profound depth of color",
    GemType.SAPPHIRE: "remarkable intensity",
    GemType.EMERALD: "lush saturation",
    GemType.AMETHYST: "royal hue",
    GemType.TOPAZ: "warm brilliance",
}
UNKNOWN_GEM_QUALITY_PHRASE = "exceptional quality"
