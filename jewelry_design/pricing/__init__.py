from .calculator import (
    BASE_PRICES,
    GEM_MULTIPLIERS,
    METAL_MULTIPLIERS,
    calculate_price,
)

__all__ = [
    "BASE_PRICES",
    "GEM_MULTIPLIERS",
    "METAL_MULTIPLIERS",
    "calculate_price",
]
