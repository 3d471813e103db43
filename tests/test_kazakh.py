"""Tests for the Kazakh engine: harmony, sound classes, affixes, names."""

import pytest
from structlog.testing import CapturingLogger

from declension.core.errors import ErrorCode, InvalidInputError, UnknownCaseError
from declension.languages.kazakh import HarmonyClass, KazakhCase, SoundClass
from declension.languages.kazakh.declension import CASE_RULES
from declension.languages.kazakh.phonology import (
    ends_with_possessive,
    harmony,
    is_borrowed_surname,
    sound_class,
)
from declension.languages.types import NameGroupPolicy

C = KazakhCase


class TestPhonology:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("дос", HarmonyClass.BACK),
            ("бала", HarmonyClass.BACK),
            ("мектеп", HarmonyClass.FRONT),
            ("әке", HarmonyClass.FRONT),
            ("Әуезов", HarmonyClass.BACK),  # last vowel decides
            ("брр", HarmonyClass.BACK),     # no vowel
        ],
    )
    def test_harmony(self, word, expected):
        assert harmony(word) is expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("бала", SoundClass.VOWEL),
            ("Нұрлан", SoundClass.SONORANT),
            ("қыз", SoundClass.VOICED),
            ("дос", SoundClass.VOICELESS),
            ("ҚЫЗ", SoundClass.VOICED),
        ],
    )
    def test_sound_class(self, word, expected):
        assert sound_class(word) is expected

    def test_possessive_and_surname_predicates(self):
        assert ends_with_possessive("баласы")
        assert ends_with_possessive("әкесі")
        assert not ends_with_possessive("бала")
        assert is_borrowed_surname("Иванов")
        assert is_borrowed_surname("Иванова")
        assert not is_borrowed_surname("Нұрлан")

    def test_every_oblique_case_has_a_rule(self):
        assert set(CASE_RULES) == set(C) - {C.ATAW}


class TestConsonantStems:
    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "достың"),
            (C.BARYS, "досқа"),
            (C.TABYS, "досты"),
            (C.JATYS, "доста"),
            (C.SHYGYS, "достан"),
            (C.KOMEKTES, "доспен"),
        ],
    )
    def test_back_voiceless(self, kz, case, expected):
        assert kz.inflect_word("дос", case) == expected

    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "мектептің"),
            (C.BARYS, "мектепке"),
            (C.TABYS, "мектепті"),
            (C.JATYS, "мектепте"),
            (C.SHYGYS, "мектептен"),
            (C.KOMEKTES, "мектеппен"),
        ],
    )
    def test_front_voiceless(self, kz, case, expected):
        assert kz.inflect_word("мектеп", case) == expected

    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "Нұрланның"),
            (C.BARYS, "Нұрланға"),
            (C.TABYS, "Нұрланды"),
            (C.JATYS, "Нұрланда"),
            (C.SHYGYS, "Нұрланнан"),
            (C.KOMEKTES, "Нұрланмен"),
        ],
    )
    def test_nasal(self, kz, case, expected):
        assert kz.inflect_word("Нұрлан", case) == expected

    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "қыздың"),
            (C.BARYS, "қызға"),
            (C.SHYGYS, "қыздан"),
            (C.KOMEKTES, "қызбен"),
        ],
    )
    def test_voiced(self, kz, case, expected):
        assert kz.inflect_word("қыз", case) == expected

    def test_liquid_instrumental(self, kz):
        assert kz.inflect_word("Асқар", C.KOMEKTES) == "Асқармен"
        assert kz.inflect_word("Асқар", C.ILIK) == "Асқардың"


class TestVowelStems:
    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "баланың"),
            (C.BARYS, "балаға"),
            (C.TABYS, "баланы"),
            (C.JATYS, "балада"),
            (C.SHYGYS, "баладан"),
            (C.KOMEKTES, "баламен"),
        ],
    )
    def test_back(self, kz, case, expected):
        assert kz.inflect_word("бала", case) == expected

    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "әкенің"),
            (C.BARYS, "әкеге"),
            (C.TABYS, "әкені"),
            (C.JATYS, "әкеде"),
            (C.SHYGYS, "әкеден"),
            (C.KOMEKTES, "әкемен"),
        ],
    )
    def test_front(self, kz, case, expected):
        assert kz.inflect_word("әке", case) == expected


class TestPossessive:
    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "баласының"),
            (C.BARYS, "баласына"),
            (C.TABYS, "баласын"),
            (C.JATYS, "баласында"),
            (C.SHYGYS, "баласынан"),
            (C.KOMEKTES, "баласымен"),
        ],
    )
    def test_back(self, kz, case, expected):
        assert kz.inflect_word("баласы", case) == expected

    def test_front(self, kz):
        assert kz.inflect_word("әкесі", C.ILIK) == "әкесінің"
        assert kz.inflect_word("әкесі", C.BARYS) == "әкесіне"
        assert kz.inflect_word("әкесі", C.SHYGYS) == "әкесінен"


class TestBorrowedSurnames:
    @pytest.mark.parametrize(
        "case, expected",
        [
            (C.ILIK, "Ивановтың"),
            (C.BARYS, "Ивановқа"),
            (C.TABYS, "Ивановты"),
            (C.JATYS, "Ивановта"),
            (C.SHYGYS, "Ивановтан"),
            (C.KOMEKTES, "Ивановпен"),
        ],
    )
    def test_voiceless_register(self, kz, case, expected):
        assert kz.inflect_word("Иванов", case) == expected

    def test_front_harmony_surname(self):
        assert harmony("Сергеев") is HarmonyClass.FRONT

    def test_front_surname_forms(self, kz):
        assert kz.inflect_word("Сергеев", C.ILIK) == "Сергеевтің"
        assert kz.inflect_word("Сергеев", C.BARYS) == "Сергеевке"


class TestExceptions:
    def test_su(self, kz):
        assert kz.inflect_word("су", C.ILIK) == "судың"
        assert kz.inflect_word("су", C.BARYS) == "суға"
        assert kz.inflect_word("су", C.KOMEKTES) == "сумен"

    def test_capitalized(self, kz):
        assert kz.inflect_word("Су", C.ILIK) == "Судың"


class TestCaseHandling:
    def test_nominative_is_identity(self, kz):
        for word in ("дос", "Иванов", "баласы", "су"):
            assert kz.inflect_word(word, C.ATAW) == word

    def test_accepts_string_case(self, kz):
        assert kz.inflect_word("дос", "ilik") == "достың"

    def test_unknown_case_raises(self, kz):
        with pytest.raises(UnknownCaseError) as exc_info:
            kz.inflect_word("дос", "bogus")
        assert exc_info.value.code is ErrorCode.E2003_UNKNOWN_CASE
        assert exc_info.value.error.metadata["case"] == "bogus"
        assert "komektes" in exc_info.value.error.metadata["allowed"]

    def test_russian_case_is_unknown(self, kz):
        with pytest.raises(UnknownCaseError):
            kz.inflect_word("дос", "genitive")

    @pytest.mark.parametrize("word", ["", "  ", None])
    def test_invalid_input(self, kz, word):
        with pytest.raises(InvalidInputError):
            kz.inflect(word, C.ILIK)


class TestInflectGroup:
    def test_name_inflects_surname_only(self, kz):
        assert kz.inflect_group("Мұхтар Әуезов", C.ILIK) == "Мұхтар Әуезовтың"

    def test_patronymic_surname(self, kz):
        assert kz.inflect_group("Абай Құнанбайұлы", C.BARYS) == "Абай Құнанбайұлына"

    def test_phrase_inflects_last_word(self, kz):
        assert kz.inflect_group("жаңа мектеп", C.JATYS) == "жаңа мектепте"

    def test_possessive_head(self, kz):
        assert kz.inflect_group("Қазақстан Республикасы", C.ILIK) == "Қазақстан Республикасының"

    def test_policy_does_not_change_selection(self, kz):
        for policy in NameGroupPolicy:
            assert kz.inflect_group("Мұхтар Әуезов", C.SHYGYS, policy) == "Мұхтар Әуезовтан"

    def test_base_case_is_identity(self, kz):
        assert kz.inflect_group("Мұхтар Әуезов", C.ATAW) == "Мұхтар Әуезов"

    def test_unknown_case_in_group(self, kz):
        with pytest.raises(UnknownCaseError):
            kz.inflect_group("Мұхтар Әуезов", "bogus")

    def test_dispatch(self, kz):
        assert kz.inflect(" Мұхтар Әуезов ", C.ILIK) == "Мұхтар Әуезовтың"
        assert kz.inflect("дос", C.ILIK) == "достың"


class TestLogging:
    def test_affix_rule_event_logs_only_the_input(self, kz, monkeypatch):
        recorder = CapturingLogger()
        monkeypatch.setattr("declension.languages.kazakh.module.log", recorder)
        kz.inflect_word("дос", C.ILIK)
        assert [(c.method_name, c.args, c.kwargs) for c in recorder.calls] == [
            ("debug", ("affix_rule",), {"word": "дос", "case": C.ILIK}),
        ]
