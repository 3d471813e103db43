"""Russian words whose case forms the ending tables cannot produce."""
from types import MappingProxyType

from .maps import RussianCase

_C = RussianCase

EXCEPTIONS = MappingProxyType({
    "путь": MappingProxyType({
        _C.GENITIVE: "пути",
        _C.DATIVE: "пути",
        _C.ACCUSATIVE: "путь",
        _C.INSTRUMENTAL: "путём",
        _C.PREPOSITIONAL: "пути",
    }),
    "мать": MappingProxyType({
        _C.GENITIVE: "матери",
        _C.DATIVE: "матери",
        _C.ACCUSATIVE: "мать",
        _C.INSTRUMENTAL: "матерью",
        _C.PREPOSITIONAL: "матери",
    }),
    "дочь": MappingProxyType({
        _C.GENITIVE: "дочери",
        _C.DATIVE: "дочери",
        _C.ACCUSATIVE: "дочь",
        _C.INSTRUMENTAL: "дочерью",
        _C.PREPOSITIONAL: "дочери",
    }),
})
