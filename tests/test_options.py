"""Tests for flag-string parsing (morphology/options.py)."""

import pytest

from morphology.errors import (
    LexiconError,
    MalformedFlagToken,
    MissingPartOfSpeech,
    UnknownFlag,
)
from morphology.options import OPTION_CATALOG, OptionSet, parse_flags, parse_record


def test_bare_part_of_speech():
    options = parse_flags("noun")
    assert options.noun
    assert not options.adjective
    assert options.part_of_speech == "noun"


def test_hebrew_aliases_resolve_to_canonical_names():
    options = parse_flags("ע,ים,נקבה")
    assert options.noun
    assert options.im
    assert options.feminine_gender
    assert parse_flags("ת").part_of_speech == "adjective"


def test_value_options_keep_the_literal_string():
    options = parse_flags("noun,plural=אנשים,plural-construct=אנשי")
    assert options.plural == "אנשים"
    assert options.plural_construct == "אנשי"


def test_empty_value_is_kept():
    options = parse_flags("adjective,country-adjective,country=")
    assert options.country == ""


def test_later_duplicate_wins():
    assert parse_flags("noun,plural=א,plural=ב").plural == "ב"


def test_no_inflections_implies_no_plurals():
    options = parse_flags("noun,no-inflections")
    assert options.none
    assert options.no_singular_inflections


def test_no_possessives_implies_both_numbers():
    options = parse_flags("noun,no-possessives")
    assert options.no_singular_possessives
    assert options.no_plural_possessives


def test_noun_wins_over_adjective():
    assert parse_flags("noun,adjective").part_of_speech == "noun"


def test_unknown_flag_carries_context():
    with pytest.raises(UnknownFlag) as excinfo:
        parse_flags("noun,bogus", head_word="ספר", line_number=3)
    assert excinfo.value.head_word == "ספר"
    assert excinfo.value.line_number == 3
    assert str(excinfo.value).startswith("line 3: ")


@pytest.mark.parametrize(
    "flags",
    ["noun,,im", "noun,", "noun,im=x", "noun,plural", "noun,plural=a=b", "=x,noun"],
)
def test_malformed_tokens(flags):
    with pytest.raises(MalformedFlagToken):
        parse_flags(flags)


def test_missing_part_of_speech():
    with pytest.raises(MissingPartOfSpeech):
        parse_flags("im,keep-he")


def test_record_without_flags_is_missing_part_of_speech():
    with pytest.raises(MissingPartOfSpeech) as excinfo:
        parse_record("ספר", None, line_number=7)
    assert isinstance(excinfo.value, LexiconError)
    assert excinfo.value.line_number == 7


def test_parse_record():
    entry = parse_record("ספר", "noun,im", line_number=1)
    assert entry.head_word == "ספר"
    assert entry.options == OptionSet(noun=True, im=True)
    assert entry.line_number == 1


def test_catalog_implications_name_known_options():
    for canonical, kind, implies in OPTION_CATALOG.values():
        assert kind in ("flag", "value", "value-or-empty")
        for implied in implies:
            assert implied in OPTION_CATALOG


@pytest.mark.parametrize(
    "flags",
    ["noun,singular=", "noun,plural=", "noun,construct=", "adjective,feminine="],
)
def test_empty_values_are_rejected(flags):
    with pytest.raises(MalformedFlagToken, match="empty value"):
        parse_flags(flags, head_word="ספר")
