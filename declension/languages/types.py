"""Shared type definitions for language engines."""
from enum import Enum


class NameGroupPolicy(str, Enum):
    """Which words of a multi-word input get inflected."""
    PHRASE = "phrase"  # title or role: only the head word
    NAME = "name"      # personal name: language-specific selection
    AUTO = "auto"      # decide from capitalization and word count


class Gender(str, Enum):
    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"
