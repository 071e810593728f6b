from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..selection.types import CUSTOM_SHAPE_PREFIX

logger = logging.getLogger(__name__)


class CustomShapeRegistry:
    """
    Holds freehand shape data (e.g. an image data URL) under opaque
    `custom-<n>` ids. The data itself is never inspected.
    """

    def __init__(self):
        self._shapes: Dict[str, str] = {}
        self._next_index = 0

    def register(self, data: str) -> str:
        shape_id = f"{CUSTOM_SHAPE_PREFIX}{self._next_index}"
        self._next_index += 1
        self._shapes[shape_id] = data
        logger.debug("Registered custom shape %s", shape_id)
        return shape_id

    def put(self, shape_id: str, data: str) -> None:
        """Store data under an existing id (used when restoring saved designs)."""
        if not shape_id.startswith(CUSTOM_SHAPE_PREFIX):
            raise ValueError(f"not a custom shape id: {shape_id}")
        self._shapes[shape_id] = data
        # later registrations must not reuse a restored id
        suffix = shape_id[len(CUSTOM_SHAPE_PREFIX):]
        if suffix.isdigit():
            self._next_index = max(self._next_index, int(suffix) + 1)

    def get(self, shape_id: str) -> Optional[str]:
        return self._shapes.get(shape_id)

    def ids(self) -> List[str]:
        return list(self._shapes)

    def __contains__(self, shape_id: str) -> bool:
        return shape_id in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)
