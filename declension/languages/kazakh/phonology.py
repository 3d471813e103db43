"""Kazakh sound classification: vowel harmony and final-sound classes.

All predicates look at the lowercased word and never modify it.
"""
from .maps import (
    BACK_VOWELS,
    BORROWED_SURNAME_SUFFIXES,
    FRONT_VOWELS,
    POSSESSIVE_VOWELS,
    SONORANTS,
    VOICED,
    VOWELS,
    AffixPair,
    HarmonyClass,
    SoundClass,
)


def _last(word: str) -> str:
    return word[-1:].lower()


def harmony(word: str) -> HarmonyClass:
    """Harmony class of the last vowel in the word; back if it has none."""
    for ch in reversed(word.lower()):
        if ch in FRONT_VOWELS:
            return HarmonyClass.FRONT
        if ch in BACK_VOWELS:
            return HarmonyClass.BACK
    return HarmonyClass.BACK


def ends_with_vowel(word: str) -> bool:
    return _last(word) in VOWELS


def ends_with_sonorant(word: str) -> bool:
    return _last(word) in SONORANTS


def ends_with_voiced(word: str) -> bool:
    return _last(word) in VOICED


def ends_with_possessive(word: str) -> bool:
    return _last(word) in POSSESSIVE_VOWELS


def is_borrowed_surname(word: str) -> bool:
    return word.lower().endswith(BORROWED_SURNAME_SUFFIXES)


def sound_class(word: str) -> SoundClass:
    if ends_with_vowel(word):
        return SoundClass.VOWEL
    if ends_with_sonorant(word):
        return SoundClass.SONORANT
    if ends_with_voiced(word):
        return SoundClass.VOICED
    return SoundClass.VOICELESS


def choose(word: str, pair: AffixPair) -> str:
    """Pick the affix variant that harmonizes with `word`."""
    return pair.front if harmony(word) is HarmonyClass.FRONT else pair.back
