"""Adjective paradigms, including nationality adjectives.

An adjective has four base forms (masculine/feminine, singular/plural),
each with a construct form.  The feminine singular takes one or more of
three shapes (``-t``, ``-ah``, ``-it``); when the lexicon names none, it is
guessed from the ending.  Nationality adjectives (``ישראלי``) also produce
the country name and the plural for the people.
"""

import logging
import re

from morphology.inflection import (
    ADJECTIVE_SUFFIXES,
    COUNTRY_ENDINGS,
    PEOPLE_SUFFIX,
    RawForm,
    Tag,
)
from orthography.markers import prepare

logger = logging.getLogger(__name__)

HE = "ה"
TAV = "ת"
CHIRIK_MALE = ADJECTIVE_SUFFIXES["chirik_male"]

# A final yod is a chirik male, unless it follows a single vav (a shuruk
# and a consonant yod, as in רצוי).
_FINAL_CHIRIK_RE = re.compile(r"(?:[^aeiו]|וו)י$")


def mark_chirik_male(word):
    if _FINAL_CHIRIK_RE.search(word):
        return word[:-1] + CHIRIK_MALE
    return word


def _pair(stem, name, tag):
    """Base form and construct form for one entry of ADJECTIVE_SUFFIXES."""
    suffixes = ADJECTIVE_SUFFIXES[name]
    return [
        RawForm(stem + suffixes["suffix"], tag),
        RawForm(stem + suffixes["construct"], tag.construct()),
    ]


def country_name(word, options):
    """Country name for a nationality adjective, or ``None`` if suppressed.

    ``country=`` with an empty value means the country has no name of its
    own in the word list.
    """
    if options.country is not None:
        return options.country or None
    for ending, becomes in COUNTRY_ENDINGS:
        if word.endswith(ending):
            return word[: -len(ending)] + becomes
    return word


def _nationality_forms(word, options):
    forms = []
    country = country_name(word, options)
    if country is not None:
        forms.append(RawForm(country, Tag("noun", "singular", "f")))
    forms.append(RawForm(word + PEOPLE_SUFFIX, Tag("noun", "plural", "m")))
    return forms


def feminine_shapes(stem, options):
    """Return ``(t, h, it)``: which feminine singular shapes the adjective has."""
    feminine_t = options.feminine_t or options.country_adjective
    implicit = not (
        feminine_t
        or options.feminine_h
        or options.feminine_it
        or options.feminine is not None
    )
    t = feminine_t or (implicit and stem.endswith(CHIRIK_MALE))
    h = options.feminine_h or (implicit and not t)
    return t, h, options.feminine_it


def inflect_adjective(entry):
    """Generate every raw form of an adjective entry, in paradigm order."""
    options = entry.options
    prepared = prepare(entry.head_word)
    word = mark_chirik_male(prepared.stem)
    stem = word
    if stem.endswith(HE) and not options.keep_he:
        stem = stem[:-1]

    forms = []
    if options.country_adjective:
        forms.extend(_nationality_forms(word, options))

    masculine = Tag("adjective", "singular", "m")
    base = options.singular if options.singular is not None else prepared.original
    forms.append(RawForm(base, masculine))
    forms.append(RawForm(base + "-", masculine.construct()))

    masculine_plural = Tag("adjective", "plural", "m")
    plural_kind = "masculine_plural_m" if options.m_plural else "masculine_plural"
    forms.extend(_pair(stem, plural_kind, masculine_plural))

    feminine = Tag("adjective", "singular", "f")
    t, h, it = feminine_shapes(stem, options)
    if options.feminine is not None:
        forms.append(RawForm(options.feminine, feminine))
        construct = options.feminine
        if construct.endswith(HE) and not options.keep_he:
            construct = construct[:-1] + TAV
        forms.append(RawForm(construct + "-", feminine.construct()))
    if t:
        if word.endswith(HE) and not options.keep_he:
            # a he-final adjective with a -t feminine takes ית
            forms.extend(_pair(stem, "feminine_t_after_he", feminine))
        else:
            forms.extend(_pair(stem, "feminine_t", feminine))
    if h:
        forms.extend(_pair(stem, "feminine_h", feminine))
    if it:
        forms.extend(_pair(stem, "feminine_it", feminine))

    feminine_plural = Tag("adjective", "plural", "f")
    if t or h or options.feminine is not None:
        forms.extend(_pair(stem, "feminine_plural", feminine_plural))
    if it:
        forms.extend(_pair(stem, "feminine_it_plural", feminine_plural))
    logger.debug("%s: %d raw forms", entry.head_word, len(forms))
    return forms
