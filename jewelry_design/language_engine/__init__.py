from .engine import (
    DescriptionInput,
    DescriptionOutput,
    DesignDescriber,
    describe,
    format_price,
)

__all__ = [
    "DescriptionInput",
    "DescriptionOutput",
    "DesignDescriber",
    "describe",
    "format_price",
]
