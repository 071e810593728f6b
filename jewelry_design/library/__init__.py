from .shapes import CustomShapeRegistry
from .store import DesignLibrary, DesignNameError, DesignNotFoundError, SavedDesign

__all__ = [
    "CustomShapeRegistry",
    "DesignLibrary",
    "DesignNameError",
    "DesignNotFoundError",
    "SavedDesign",
]
