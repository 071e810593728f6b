from .confidence import BASE_CONFIDENCE, ConfidenceScorer
from .extractor import DescriptionExtractor, apply_extraction, extract
from .rules import CUSTOM_SHAPE_SENTINEL, EXAMPLE_PROMPTS

__all__ = [
    "BASE_CONFIDENCE",
    "CUSTOM_SHAPE_SENTINEL",
    "ConfidenceScorer",
    "DescriptionExtractor",
    "EXAMPLE_PROMPTS",
    "apply_extraction",
    "extract",
]
