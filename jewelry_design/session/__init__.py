from .controller import DesignSession

__all__ = ["DesignSession"]
