from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from ..selection.normalize import clamp
from ..selection.types import DesignSelection, SELECTION_FIELDS

# Engraving is quoted or introduced by an explicit lead-in, ring size is
# the loosest pattern.
BASE_CONFIDENCE: Dict[str, float] = {
    "jewelry_type": 0.8,
    "metal_type": 0.7,
    "gem_type": 0.6,
    "gem_size": 0.5,
    "gem_count": 0.5,
    "shape": 0.5,
    "ring_size": 0.4,
    "engraving_text": 0.9,
}

DEFAULT_JITTER = 0.15
MAX_JITTER = 0.3


def is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


class ConfidenceScorer:
    """
    Simulated extraction certainty: a fixed per-field base value plus a
    bounded uniform jitter, clamped to [0, 1]. Absent values score 0.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        jitter: float = DEFAULT_JITTER,
    ):
        if not 0.0 <= jitter <= MAX_JITTER:
            raise ValueError(f"jitter must be within [0, {MAX_JITTER}], got {jitter}")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.jitter = jitter

    def score(self, field: str, value: Any) -> float:
        if is_absent(value):
            return 0.0
        base = BASE_CONFIDENCE[field]
        if self.jitter == 0.0:
            return base
        variation = float(self.rng.uniform(-self.jitter, self.jitter))
        return clamp(base + variation, 0.0, 1.0)

    def score_selection(self, selection: DesignSelection) -> Dict[str, float]:
        return {name: self.score(name, getattr(selection, name)) for name in SELECTION_FIELDS}
