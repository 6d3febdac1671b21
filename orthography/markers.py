"""Consonant and vowel markers for Hebrew full spelling (ktiv male).

In full spelling ו and י serve both as vowel letters and as consonants, and
a consonantal ו/י in the middle of a word is written doubled.  While a word
is inflected its consonants are carried as ASCII markers, so suffix rules
never have to guess which letter is which:

    y   consonant yod, doubled between plain letters and at the word end
    Y   consonant yod that stays single at the end of the word
    w   consonant vav, doubled between plain letters
    i   chirik; the following yod is a vowel letter
    a   patach, e  tsere; both turn a preceding yod into a consonant
    h   consonant he, so that a neighbouring y may double

``prepare()`` marks the edge letters of a head word.  ``finalize()`` turns a
generated form back into spelling.  Both are chains of small pure steps
that can be tested one by one.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from morphology.inflection import SurfaceForm

logger = logging.getLogger(__name__)

GLIDE_Y = "y"
GLIDE_Y_SOFT = "Y"
GLIDE_W = "w"
CHIRIK = "i"
PATACH = "a"
TSERE = "e"
CONSONANT_HE = "h"

MARKERS = frozenset(GLIDE_Y + GLIDE_Y_SOFT + GLIDE_W + CHIRIK + PATACH + TSERE + CONSONANT_HE)

# ── Load orthography tables from YAML ───────────────────────────────────────

_RULES_PATH = Path(__file__).with_name("orthography_rules.yaml")


def _load_rules(path=_RULES_PATH):
    """Read the final-letter table and the ranked prepare rules.

    Returns ``(final_letters, leading_rules, trailing_rules)``; the rule
    lists hold ``(name, match, becomes)`` tuples in rank order.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    leading = tuple(
        (r["name"], r["prefix"], r["becomes"]) for r in raw["prepare"]["leading"]
    )
    trailing = tuple(
        (r["name"], r["ending"], r["becomes"]) for r in raw["prepare"]["trailing"]
    )
    return dict(raw["final_letters"]), leading, trailing


FINAL_LETTERS, LEADING_RULES, TRAILING_RULES = _load_rules()
ORDINARY_LETTERS = {final: plain for plain, final in FINAL_LETTERS.items()}

# ── Preprocessing ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PreparedWord:
    """A head word and its marked stem.

    ``original`` is kept for the forms that are emitted as the author wrote
    them (the base singular); everything else is built on ``stem``.
    """

    original: str
    stem: str


def mark_leading(word, rules=LEADING_RULES):
    for _, prefix, becomes in rules:
        if word.startswith(prefix):
            return becomes + word[len(prefix):]
    return word


def mark_trailing(word, rules=TRAILING_RULES):
    """Apply the first trailing rule whose ending matches; at most one fires."""
    for name, ending, becomes in rules:
        if word.endswith(ending):
            logger.debug("prepare rule %s matched %s", name, word)
            return word[: -len(ending)] + becomes
    return word


def prepare(word):
    """Mark the consonantal ו/י at the edges of a head word."""
    return PreparedWord(word, mark_trailing(mark_leading(word)))


# ── Postprocessing ───────────────────────────────────────────────────────────

_FINALS = "".join(FINAL_LETTERS.values())
_MEDIAL_FINAL_RE = re.compile(rf"([{_FINALS}])('?)(?=[א-תa-z])")

_VOWEL_STEPS = (
    (re.compile(f"י[{TSERE}{PATACH}]"), GLIDE_Y),
    (re.compile(f"[{TSERE}{PATACH}]"), ""),
    (re.compile(f"{CHIRIK}{GLIDE_Y}"), "יי"),
    (re.compile(CHIRIK), ""),
)

_GLIDE_STEPS = (
    (re.compile(r"Y(?=-|$)"), "י"),
    (re.compile("Y"), "y"),
    # a chirik yod before a consonant yod is not written when י or ו follows
    (re.compile("יyי"), "יי"),
    (re.compile("יyו"), "יו"),
    (re.compile(r"(?<=[^ויy])y(?=[^ויyה]|$)"), "יי"),
    (re.compile("y"), "י"),
    # kubuts followed by a consonant vav is a shuruk
    (re.compile("וw"), "ו"),
    (re.compile(r"(?<=[^וw])w(?=[^וw-])"), "וו"),
    (re.compile("w"), "ו"),
    (re.compile("h"), "ה"),
)


def unfinal_medial(word):
    """Turn final letters that are not at the end of the word into ordinary ones."""
    return _MEDIAL_FINAL_RE.sub(
        lambda m: ORDINARY_LETTERS[m.group(1)] + m.group(2), word
    )


def resolve_vowel_markers(word):
    for pattern, replacement in _VOWEL_STEPS:
        word = pattern.sub(replacement, word)
    return word


def resolve_glides(word):
    """Spell out y/Y/w/h, doubling medial consonant yods and vavs."""
    for pattern, replacement in _GLIDE_STEPS:
        word = pattern.sub(replacement, word)
    return word


def _split_hyphen(word):
    if word.endswith("-"):
        return word[:-1], "-"
    return word, ""


def finalize_last_letter(word):
    """Give the last letter its final form; a construct hyphen is skipped."""
    body, hyphen = _split_hyphen(word)
    if body and body[-1] in FINAL_LETTERS:
        body = body[:-1] + FINAL_LETTERS[body[-1]]
    return body + hyphen


def quote_abbreviation(word):
    """Mark an abbreviation: ``א'`` for one letter, ``צה"ל`` otherwise.

    The quote goes before the last letter, skipping a construct hyphen.
    Words that already carry a geresh or gershayim are left alone.
    """
    if "'" in word or '"' in word:
        return word
    body, hyphen = _split_hyphen(word)
    if len(body) == 1:
        return body + "'" + hyphen
    if len(body) > 1:
        return body[:-1] + '"' + body[-1] + hyphen
    return word


def spell(text, quote=False):
    """Run the full postprocessing chain over a marked string."""
    text = unfinal_medial(text)
    text = resolve_vowel_markers(text)
    text = resolve_glides(text)
    text = finalize_last_letter(text)
    if quote:
        text = quote_abbreviation(text)
    return text


def finalize(form, config=None, quote=False):
    """Turn a RawForm into a SurfaceForm, or ``None`` if it is dropped.

    In detailed mode the construct hyphen is removed (the annotation already
    says "construct") and the rendered tag is attached.
    """
    if form.dropped:
        return None
    text = spell(form.text, quote=quote)
    if config is not None and config.detailed:
        return SurfaceForm(_split_hyphen(text)[0], form.tag.render())
    return SurfaceForm(text)
