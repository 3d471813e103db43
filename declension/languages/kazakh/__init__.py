"""Kazakh declension engine."""
from .maps import HarmonyClass, KazakhCase, SoundClass
from .module import KazakhEngine

__all__ = ["KazakhEngine", "KazakhCase", "HarmonyClass", "SoundClass"]
