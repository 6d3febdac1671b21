"""Adjective and nationality-adjective paradigms (morphology/adjectives.py)."""

import pytest

from morphology.adjectives import country_name, feminine_shapes, mark_chirik_male
from morphology.options import parse_flags


@pytest.mark.parametrize(
    "word, marked",
    [
        ("נקי", "נקiי"),
        ("ישראלי", "ישראלiי"),
        ("רצוי", "רצוי"),
        ("שווי", "שווiי"),
        ("גדול", "גדול"),
    ],
)
def test_mark_chirik_male(word, marked):
    assert mark_chirik_male(word) == marked


def test_feminine_shapes():
    assert feminine_shapes("גדול", parse_flags("adjective")) == (False, True, False)
    assert feminine_shapes("נקiי", parse_flags("adjective")) == (True, False, False)
    assert feminine_shapes("נקiי", parse_flags("adjective,feminine-h")) == (
        False,
        True,
        False,
    )
    assert feminine_shapes("חדש", parse_flags("adjective,feminine=חדשה")) == (
        False,
        False,
        False,
    )
    assert feminine_shapes("X", parse_flags("adjective,country-adjective"))[0]


def test_country_name():
    options = parse_flags("adjective,country-adjective")
    assert country_name("אמריקאiי", options) == "אמריקה"
    assert country_name("ישראלiי", options) == "ישראל"
    assert country_name("סינiי", options) == "סינ"
    assert country_name("X", parse_flags("adjective,country-adjective,country=")) is None
    assert country_name("X", parse_flags("adjective,country=צרפת")) == "צרפת"


def test_gadol(forms_of):
    assert forms_of("גדול", "adjective") == [
        "גדול", "גדול-", "גדולים", "גדולי-",
        "גדולה", "גדולת-", "גדולות", "גדולות-",
    ]


def test_naki_with_feminine_h(forms_of):
    assert forms_of("נקי", "adjective,feminine-h") == [
        "נקי", "נקי-", "נקיים", "נקיי-",
        "נקייה", "נקיית-", "נקיות", "נקיות-",
    ]


def test_israeli(forms_of):
    assert forms_of("ישראלי", "adjective,country-adjective") == [
        "ישראל", "ישראלים",
        "ישראלי", "ישראלי-", "ישראליים", "ישראליי-",
        "ישראלית", "ישראלית-", "ישראליות", "ישראליות-",
    ]


def test_american_country_name(forms_of):
    forms = forms_of("אמריקאי", "adjective,country-adjective")
    assert forms[:2] == ["אמריקה", "אמריקאים"]


def test_chinese_country_gets_final_letter(forms_of):
    forms = forms_of("סיני", "adjective,country-adjective")
    assert forms[:2] == ["סין", "סינים"]


def test_empty_country_suppresses_the_name(forms_of):
    forms = forms_of("ישראלי", "adjective,country-adjective,country=")
    assert forms[0] == "ישראלים"


def test_feminine_override(forms_of):
    assert forms_of("חדש", "adjective,feminine=חדשה") == [
        "חדש", "חדש-", "חדשים", "חדשי-",
        "חדשה", "חדשת-", "חדשות", "חדשות-",
    ]


def test_feminine_t_after_he(forms_of):
    forms = forms_of("יפה", "adjective,feminine-t")
    assert forms[2:4] == ["יפים", "יפי-"]
    assert forms[4:6] == ["יפית", "יפית-"]


def test_feminine_it(forms_of):
    assert forms_of("ראשון", "adjective,feminine-it") == [
        "ראשון", "ראשון-", "ראשונים", "ראשוני-",
        "ראשונית", "ראשונית-", "ראשוניות", "ראשוניות-",
    ]


def test_m_plural(forms_of):
    forms = forms_of("גדול", "adjective,m-plural")
    assert forms[2:4] == ["גדולם", "גדול-"]


def test_singular_override(forms_of):
    forms = forms_of("גדול", "adjective,singular=גדל")
    assert forms[:2] == ["גדל", "גדל-"]


def test_detailed_annotations(tagged_forms_of):
    forms = tagged_forms_of("ישראלי", "adjective,country-adjective")
    assert forms[0] == ("ישראל", "ע,יחיד,נ")
    assert forms[1] == ("ישראלים", "ע,רבים,ז")
    assert forms[2] == ("ישראלי", "ת,יחיד,ז")
    assert forms[3] == ("ישראלי", "ת,יחיד,ז,סמיכות")
    assert forms[6] == ("ישראלית", "ת,יחיד,נ")
