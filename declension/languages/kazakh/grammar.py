"""Kazakh grammar configuration for clients."""
from declension.languages.base import CaseConfig, GrammarConfig
from .maps import KazakhCase

CASE_CONFIGS = [
    CaseConfig(id=KazakhCase.ATAW.value, label="Nominative", native_label="Атау септік", hint="кім? не?"),
    CaseConfig(id=KazakhCase.ILIK.value, label="Genitive", native_label="Ілік септік", hint="кімнің? ненің?"),
    CaseConfig(id=KazakhCase.BARYS.value, label="Dative", native_label="Барыс септік", hint="кімге? неге? қайда?"),
    CaseConfig(id=KazakhCase.TABYS.value, label="Accusative", native_label="Табыс септік", hint="кімді? нені?"),
    CaseConfig(id=KazakhCase.JATYS.value, label="Locative", native_label="Жатыс септік", hint="кімде? неде? қайда?"),
    CaseConfig(id=KazakhCase.SHYGYS.value, label="Ablative", native_label="Шығыс септік", hint="кімнен? неден? қайдан?"),
    CaseConfig(id=KazakhCase.KOMEKTES.value, label="Instrumental", native_label="Көмектес септік", hint="кіммен? немен?"),
]

KAZAKH_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    base_case=KazakhCase.ATAW.value,
)
