"""Shared helpers: expand a single lexicon record to its spelled forms."""

import pytest

from morphology.inflection import RunConfig
from morphology.options import parse_record
from wordlist import expand_entry


def _expand(head_word, flags, detailed=False):
    entry = parse_record(head_word, flags)
    return expand_entry(entry, RunConfig(detailed=detailed))


@pytest.fixture
def forms_of():
    """``forms_of(word, flags)`` -> list of spelled forms, in paradigm order."""

    def run(head_word, flags):
        return [form.text for form in _expand(head_word, flags)]

    return run


@pytest.fixture
def tagged_forms_of():
    """``tagged_forms_of(word, flags)`` -> list of ``(form, annotation)`` pairs."""

    def run(head_word, flags):
        return [(form.text, form.annotation) for form in _expand(head_word, flags, True)]

    return run
