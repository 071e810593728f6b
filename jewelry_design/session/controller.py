from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic.alias_generators import to_snake

from ..extraction.extractor import DescriptionExtractor, apply_extraction
from ..language_engine.engine import DesignDescriber, format_price
from ..library.shapes import CustomShapeRegistry
from ..library.store import DesignLibrary, SavedDesign
from ..pricing.calculator import calculate_price
from ..selection.normalize import coerce_selection
from ..selection.types import DesignSelection, ExtractionResult, is_custom_shape

logger = logging.getLogger(__name__)


class DesignSession:
    """
    Control point for one customization session: owns the current
    selection, the custom shapes drawn so far and the saved designs.
    Selections are frozen, so every change swaps in a new one.
    """

    def __init__(
        self,
        initial: Optional[DesignSelection] = None,
        extractor: Optional[DescriptionExtractor] = None,
        describer: Optional[DesignDescriber] = None,
        library: Optional[DesignLibrary] = None,
        shapes: Optional[CustomShapeRegistry] = None,
    ):
        self._initial = initial if initial is not None else DesignSelection()
        self._selection = self._initial
        self.extractor = extractor if extractor is not None else DescriptionExtractor()
        self.describer = describer if describer is not None else DesignDescriber()
        self.library = library if library is not None else DesignLibrary()
        self.shapes = shapes if shapes is not None else CustomShapeRegistry()

    @property
    def selection(self) -> DesignSelection:
        return self._selection

    def update(self, **changes: Any) -> DesignSelection:
        """Apply field changes by snake_case or camelCase name; out-of-range values are clamped."""
        merged = self._selection.model_dump()
        merged.update({to_snake(key): value for key, value in changes.items()})
        self._selection = coerce_selection(merged)
        return self._selection

    def select_shape(self, shape_id: str, shape_data: Optional[str] = None) -> DesignSelection:
        if is_custom_shape(shape_id) and shape_data is not None and shape_id not in self.shapes:
            self.shapes.put(shape_id, shape_data)
        return self.update(shape=shape_id)

    def draw_custom_shape(self, shape_data: str) -> DesignSelection:
        shape_id = self.shapes.register(shape_data)
        return self.update(shape=shape_id)

    def extract(self, text: str) -> ExtractionResult:
        return self.extractor.extract(text, self._selection)

    def apply(self, result: ExtractionResult) -> DesignSelection:
        self._selection = apply_extraction(result)
        logger.debug("Applied extracted fields %s", sorted(result.detected_fields))
        return self._selection

    def reset(self) -> DesignSelection:
        self._selection = self._initial
        return self._selection

    def price(self) -> float:
        return calculate_price(self._selection)

    def describe(self) -> str:
        return self.describer.describe(self._selection, self.price())

    # --- saved designs ---

    def save(self, name: str) -> SavedDesign:
        shape_data = self.shapes.get(self._selection.shape)
        return self.library.save(
            name, self._selection, format_price(self.price()), custom_shape_data=shape_data
        )

    def load(self, design_id: str) -> DesignSelection:
        design = self.library.get(design_id)
        if design.custom_shape_data and is_custom_shape(design.shape):
            self.shapes.put(design.shape, design.custom_shape_data)
        self._selection = design.to_selection()
        return self._selection

    def delete(self, design_id: str) -> None:
        self.library.delete(design_id)

    def saved_designs(self) -> List[SavedDesign]:
        return self.library.list()
