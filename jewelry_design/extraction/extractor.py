from __future__ import annotations

import logging
from typing import Optional, Set, Tuple

from ..selection.normalize import DEFAULT_SELECTION, clamp
from ..selection.types import (
    DesignSelection,
    ENGRAVING_MAX_LENGTH,
    ExtractionResult,
    GEM_COUNT_RANGE,
    GEM_SIZE_RANGE,
    GemType,
    JewelryType,
    MetalType,
    RING_SIZE_RANGE,
)
from . import rules
from .confidence import ConfidenceScorer

logger = logging.getLogger(__name__)


class DescriptionExtractor:
    """
    Turns a free-text jewelry description into a DesignSelection.

    Every field resolves through the same chain: a value detected in the
    text, else the caller's current selection, else the hardcoded default.
    The extractor never raises; empty text yields the fallback selection.
    """

    def __init__(self, scorer: Optional[ConfidenceScorer] = None):
        self.scorer = scorer or ConfidenceScorer()

    def extract(
        self, text: str, fallback: Optional[DesignSelection] = None
    ) -> ExtractionResult:
        current = fallback if fallback is not None else DEFAULT_SELECTION
        raw = text or ""
        lowered = raw.lower()
        detected: Set[str] = set()

        def resolve(name, found):
            hit, value = found
            if hit:
                detected.add(name)
                return value
            return getattr(current, name)

        selection = DesignSelection(
            jewelry_type=resolve("jewelry_type", self._jewelry_type(lowered)),
            metal_type=resolve("metal_type", self._metal_type(lowered)),
            gem_type=resolve("gem_type", self._gem_type(lowered)),
            gem_size=resolve("gem_size", self._gem_size(lowered)),
            gem_count=resolve("gem_count", self._gem_count(lowered, current.gem_count)),
            ring_size=resolve("ring_size", self._ring_size(lowered)),
            shape=resolve("shape", self._shape(lowered)),
            engraving_text=resolve("engraving_text", self._engraving(raw)),
        )
        confidence = self.scorer.score_selection(selection)

        logger.debug(
            "Extracted %s from %d chars (fallback for %s)",
            sorted(detected),
            len(raw),
            sorted(set(confidence) - detected),
        )
        return ExtractionResult(
            selection=selection, confidence=confidence, detected_fields=detected
        )

    # Each helper returns (hit, value); value is ignored when hit is False.

    def _jewelry_type(self, text: str) -> Tuple[bool, Optional[JewelryType]]:
        value = rules.first_match(rules.JEWELRY_TYPE_RULES, text)
        return value is not None, value

    def _metal_type(self, text: str) -> Tuple[bool, Optional[MetalType]]:
        for metal, terms in rules.METAL_RULES:
            if all(term in text for term in terms):
                return True, metal
        return False, None

    def _gem_type(self, text: str) -> Tuple[bool, Optional[GemType]]:
        gem = rules.first_match(rules.GEM_RULES, text)
        if gem is not None:
            return True, gem
        if rules.NO_GEM_PATTERN.search(text):
            return True, None
        return False, None

    def _gem_size(self, text: str) -> Tuple[bool, Optional[float]]:
        match = rules.CARAT_PATTERN.search(text)
        if match:
            return True, clamp(float(match.group(1)), *GEM_SIZE_RANGE)
        size = rules.first_match(rules.GEM_SIZE_WORD_RULES, text)
        return size is not None, size

    def _gem_count(self, text: str, count: int) -> Tuple[bool, int]:
        match = rules.EXPLICIT_COUNT_PATTERN.search(text)
        if match:
            return True, int(clamp(int(match.group(1)), *GEM_COUNT_RANGE))

        hit = False
        word_count = rules.first_match(rules.NUMBER_WORD_RULES, text)
        if word_count is not None:
            count, hit = word_count, True
        # plural and cluster cues raise the running count, they never lower it
        if rules.PLURAL_GEM_PATTERN.search(text):
            count, hit = max(rules.PLURAL_MIN_COUNT, count), True
        if rules.CLUSTER_PATTERN.search(text):
            count, hit = max(rules.CLUSTER_MIN_COUNT, count), True
        return hit, count

    def _shape(self, text: str) -> Tuple[bool, Optional[str]]:
        shape = rules.first_match(rules.SHAPE_RULES, text)
        return shape is not None, shape

    def _ring_size(self, text: str) -> Tuple[bool, Optional[float]]:
        match = rules.RING_SIZE_PATTERN.search(text)
        if match:
            return True, clamp(float(match.group(1)), *RING_SIZE_RANGE)
        return False, None

    def _engraving(self, text: str) -> Tuple[bool, Optional[str]]:
        quoted = rules.QUOTED_TEXT_PATTERN.search(text)
        if quoted:
            inner = quoted.group(1) if quoted.group(1) is not None else quoted.group(2)
            return True, inner[:ENGRAVING_MAX_LENGTH]
        for pattern in rules.ENGRAVING_LEAD_INS:
            match = pattern.search(text)
            if match:
                # first lead-in wins; a blank capture means no engraving found
                engraving = match.group(1).strip()[:ENGRAVING_MAX_LENGTH]
                return bool(engraving), engraving or None
        return False, None


def extract(
    text: str,
    fallback: Optional[DesignSelection] = None,
    scorer: Optional[ConfidenceScorer] = None,
) -> ExtractionResult:
    return DescriptionExtractor(scorer).extract(text, fallback)


def apply_extraction(result: ExtractionResult) -> DesignSelection:
    """The selection a caller should adopt after accepting an extraction."""
    return result.selection
