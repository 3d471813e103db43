"""Kazakh case identifiers, sound classes and affix pairs.

Vowel and consonant inventories include the Russian letters that occur in
borrowed words and names written in Kazakh Cyrillic.
"""
from enum import Enum
from typing import NamedTuple


class KazakhCase(str, Enum):
    ATAW = "ataw"            # атау, nominative
    ILIK = "ilik"            # ілік, genitive
    BARYS = "barys"          # барыс, dative
    TABYS = "tabys"          # табыс, accusative
    JATYS = "jatys"          # жатыс, locative
    SHYGYS = "shygys"        # шығыс, ablative
    KOMEKTES = "komektes"    # көмектес, instrumental


class HarmonyClass(str, Enum):
    FRONT = "front"
    BACK = "back"


class SoundClass(str, Enum):
    VOWEL = "vowel"
    SONORANT = "sonorant"
    VOICED = "voiced"
    VOICELESS = "voiceless"


class AffixPair(NamedTuple):
    front: str
    back: str


FRONT_VOWELS = frozenset("еәіөүэиюё")
BACK_VOWELS = frozenset("аоұыуя")
VOWELS = FRONT_VOWELS | BACK_VOWELS

# Nasals take -н- affixes in the genitive and ablative.
SONORANTS = frozenset("нңм")
VOICED = frozenset("бвгғджзйлмнңрүуыі")
# Instrumental groups the liquids and й with the nasals.
INSTRUMENTAL_SONORANTS = SONORANTS | frozenset("йлр")

# Final ы/і of a third-person possessive (баласы, әкесі).
POSSESSIVE_VOWELS = frozenset("ыі")

# Russian surnames keep the voiceless register whatever their last sound.
BORROWED_SURNAME_SUFFIXES = ("ов", "ев", "ова", "ева")

# ілік
ILIK_POSSESSIVE = AffixPair("інің", "ының")
ILIK_AFTER_VOWEL = AffixPair("нің", "ның")
ILIK_AFTER_SONORANT = AffixPair("нің", "ның")
ILIK_AFTER_VOICED = AffixPair("дің", "дың")
ILIK_AFTER_VOICELESS = AffixPair("тің", "тың")

# барыс
BARYS_POSSESSIVE = AffixPair("іне", "ына")
BARYS_AFTER_VOWEL = AffixPair("ге", "ға")
BARYS_AFTER_VOICED = AffixPair("ге", "ға")
BARYS_AFTER_VOICELESS = AffixPair("ке", "қа")

# табыс
TABYS_POSSESSIVE = AffixPair("ін", "ын")
TABYS_AFTER_VOWEL = AffixPair("ні", "ны")
TABYS_AFTER_VOICED = AffixPair("ді", "ды")
TABYS_AFTER_VOICELESS = AffixPair("ті", "ты")

# жатыс
JATYS_POSSESSIVE = AffixPair("інде", "ында")
JATYS_AFTER_VOWEL = AffixPair("де", "да")
JATYS_AFTER_VOICED = AffixPair("де", "да")
JATYS_AFTER_VOICELESS = AffixPair("те", "та")

# шығыс
SHYGYS_POSSESSIVE = AffixPair("інен", "ынан")
SHYGYS_AFTER_VOWEL = AffixPair("ден", "дан")
SHYGYS_AFTER_SONORANT = AffixPair("нен", "нан")
SHYGYS_AFTER_VOICED = AffixPair("ден", "дан")
SHYGYS_AFTER_VOICELESS = AffixPair("тен", "тан")

# көмектес has no front/back variants
KOMEKTES_AFTER_SONORANT = "мен"
KOMEKTES_AFTER_VOICED = "бен"
KOMEKTES_AFTER_VOICELESS = "пен"
