"""Russian declension engine."""
from .maps import MorphClass, RussianCase
from .module import RussianEngine

__all__ = ["RussianEngine", "RussianCase", "MorphClass"]
