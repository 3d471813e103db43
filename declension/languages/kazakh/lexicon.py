"""Kazakh words whose case forms the affix rules get wrong."""
from types import MappingProxyType

from .maps import KazakhCase

_C = KazakhCase

EXCEPTIONS = MappingProxyType({
    # final у is a vowel letter, but the word declines like a consonant stem
    "су": MappingProxyType({
        _C.ILIK: "судың",
        _C.BARYS: "суға",
        _C.TABYS: "суды",
        _C.JATYS: "суда",
        _C.SHYGYS: "судан",
        _C.KOMEKTES: "сумен",
    }),
})
