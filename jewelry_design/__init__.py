"""
Jewelry design core: free-text descriptions to structured selections and
back to prose, plus pricing of a selection.
"""

from .extraction import extract
from .language_engine import describe
from .pricing import calculate_price
from .selection import DesignSelection, ExtractionResult
from .session import DesignSession

price = calculate_price

__all__ = [
    "DesignSelection",
    "DesignSession",
    "ExtractionResult",
    "calculate_price",
    "describe",
    "extract",
    "price",
]
