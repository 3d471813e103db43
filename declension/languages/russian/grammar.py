"""Russian grammar configuration for clients."""
from declension.languages.base import CaseConfig, GrammarConfig
from .maps import RussianCase

CASE_CONFIGS = [
    CaseConfig(
        id=RussianCase.NOMINATIVE.value,
        label="Nominative",
        native_label="Именительный",
        hint="кто? что?",
    ),
    CaseConfig(
        id=RussianCase.GENITIVE.value,
        label="Genitive",
        native_label="Родительный",
        hint="кого? чего?",
    ),
    CaseConfig(
        id=RussianCase.DATIVE.value,
        label="Dative",
        native_label="Дательный",
        hint="кому? чему?",
    ),
    CaseConfig(
        id=RussianCase.ACCUSATIVE.value,
        label="Accusative",
        native_label="Винительный",
        hint="кого? что?",
    ),
    CaseConfig(
        id=RussianCase.INSTRUMENTAL.value,
        label="Instrumental",
        native_label="Творительный",
        hint="кем? чем?",
    ),
    CaseConfig(
        id=RussianCase.PREPOSITIONAL.value,
        label="Prepositional",
        native_label="Предложный",
        hint="о ком? о чём?",
    ),
]

RUSSIAN_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    base_case=RussianCase.NOMINATIVE.value,
)
