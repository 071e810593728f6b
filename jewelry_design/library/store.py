from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..selection.types import DesignSelection

logger = logging.getLogger(__name__)


class DesignNotFoundError(Exception):
    pass


class DesignNameError(ValueError):
    pass


class SavedDesign(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    jewelry_type: str
    metal_type: str
    gem_type: Optional[str] = None
    gem_size: float = 0.0
    gem_count: int = 0
    ring_size: float
    shape: str
    engraving_text: str = ""
    price: str
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    custom_shape_data: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_selection(
        cls,
        name: str,
        selection: DesignSelection,
        price: str,
        custom_shape_data: Optional[str] = None,
    ) -> "SavedDesign":
        # gem size/count are meaningless without a gem and are recorded as 0
        has_gem = selection.gem_type is not None
        return cls(
            name=name,
            jewelry_type=selection.jewelry_type.value,
            metal_type=selection.metal_type.value,
            gem_type=selection.gem_type.value if has_gem else None,
            gem_size=selection.gem_size if has_gem else 0.0,
            gem_count=selection.gem_count if has_gem else 0,
            ring_size=selection.ring_size,
            shape=selection.shape,
            engraving_text=selection.engraving_text,
            price=price,
            custom_shape_data=custom_shape_data if selection.has_custom_shape else None,
        )

    def to_selection(self) -> DesignSelection:
        defaults = DesignSelection()
        return DesignSelection(
            jewelry_type=self.jewelry_type,
            metal_type=self.metal_type,
            gem_type=self.gem_type,
            gem_size=self.gem_size or defaults.gem_size,
            gem_count=self.gem_count or defaults.gem_count,
            ring_size=self.ring_size,
            shape=self.shape or defaults.shape,
            engraving_text=self.engraving_text,
        )


class DesignLibrary:
    """
    In-memory collection of named designs, kept in save order.
    Nothing is written to disk.
    """

    def __init__(self):
        self._designs: Dict[str, SavedDesign] = {}

    def save(
        self,
        name: str,
        selection: DesignSelection,
        price: str,
        custom_shape_data: Optional[str] = None,
    ) -> SavedDesign:
        clean_name = (name or "").strip()
        if not clean_name:
            raise DesignNameError("Design name must not be blank")

        design = SavedDesign.from_selection(clean_name, selection, price, custom_shape_data)
        self._designs[design.id] = design
        logger.info("Saved design %s (%s)", design.id, clean_name)
        return design

    def get(self, design_id: str) -> SavedDesign:
        design = self._designs.get(design_id)
        if design is None:
            raise DesignNotFoundError(f"Design with ID {design_id} not found.")
        return design

    def delete(self, design_id: str) -> None:
        if design_id not in self._designs:
            raise DesignNotFoundError(f"Design with ID {design_id} not found.")
        del self._designs[design_id]
        logger.info("Deleted design %s", design_id)

    def list(self) -> List[SavedDesign]:
        return list(self._designs.values())

    def __len__(self) -> int:
        return len(self._designs)
