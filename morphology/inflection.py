"""Shared suffix tables and form types for the noun and adjective paradigms."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

# ── Load inflection rules from YAML ─────────────────────────────────────────

_RULES_PATH = Path(__file__).with_name("inflection_rules.yaml")


def _load_rules(path=_RULES_PATH):
    """Read the suffix tables from a YAML file."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def _possessive_table(rows):
    """Return ``(person, suffix, stem_kind)`` tuples in paradigm order."""
    return tuple((r["person"], r["suffix"], r.get("stem", "reduced")) for r in rows)


_RULES = _load_rules()

PLURAL_SUFFIXES = _RULES["plural_suffixes"]
IMPLICIT_PLURAL_RULES = tuple(
    (r["ending"], r["plural"]) for r in _RULES["implicit_plural"]
)
SINGULAR_ONLY_ENDINGS = tuple(_RULES["singular_only_endings"])
EXPLICIT_PLURAL_KEEP = tuple(_RULES["explicit_plural"]["keep_whole"])
EXPLICIT_PLURAL_STRIP = tuple(_RULES["explicit_plural"]["strip_two"])

SINGULAR_POSSESSIVES = _possessive_table(_RULES["possessives"]["singular"])
PLURAL_POSSESSIVES = _possessive_table(_RULES["possessives"]["plural"])
EXTRA_YOD_POSSESSIVES = _possessive_table(_RULES["possessives"]["extra_yod"])
EXTRA_YOD_CONSTRUCT = _RULES["extra_yod_construct"]
EXTRA_YOD_HIS = _RULES["extra_yod_his"]
SEGOL_HE_HIS = _RULES["segol_he_his"]

ADJECTIVE_SUFFIXES = _RULES["adjective"]
COUNTRY_ENDINGS = tuple(
    (r["ending"], r["becomes"]) for r in _RULES["nationality"]["country_endings"]
)
PEOPLE_SUFFIX = _RULES["nationality"]["people_suffix"]

LABELS = _RULES["labels"]

# ── Form types ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RunConfig:
    """Settings fixed for a whole run."""

    detailed: bool = False


@dataclass(frozen=True)
class Tag:
    """Grammatical description of one generated form.

    ``gender_first`` selects the noun annotation layout (gender before the
    part of speech, ``ז,ע,יחיד``) over the adjective one (``ת,יחיד,ז``).
    """

    pos: str
    number: str
    gender: str
    role: str = "base"
    possessor: Optional[str] = None
    gender_first: bool = False

    def construct(self):
        return replace(self, role="construct", possessor=None)

    def possessive(self, person):
        return replace(self, role="possessive", possessor=person)

    def render(self):
        """Detailed-output annotation, e.g. ``ז,ע,רבים,של/אני``."""
        parts = [LABELS["pos"][self.pos], LABELS["number"][self.number]]
        gender = LABELS["gender"][self.gender]
        if self.gender_first:
            parts.insert(0, gender)
        else:
            parts.append(gender)
        if self.role == "construct":
            parts.append(LABELS["construct"])
        elif self.role == "possessive":
            parts.append(f"{LABELS['possessive']}/{LABELS['possessors'][self.possessor]}")
        return ",".join(parts)


@dataclass(frozen=True)
class RawForm:
    """A generated form still carrying markers.

    ``dropped`` forms are computed along with their paradigm but are never
    emitted.
    """

    text: str
    tag: Tag
    dropped: bool = False


@dataclass(frozen=True)
class SurfaceForm:
    text: str
    annotation: Optional[str] = None

    def __str__(self):
        if self.annotation is None:
            return self.text
        return f"{self.text} {self.annotation}"


# ── Helpers ──────────────────────────────────────────────────────────────────


def possessive_forms(stem, tag, table, full_stem=None, dropped=False):
    """Attach every suffix of a possessive *table* to a construct stem.

    Suffixes marked ``stem: full`` attach to *full_stem* (defaults to
    *stem*).  Returns a list of RawForms in paradigm order.
    """
    if full_stem is None:
        full_stem = stem
    forms = []
    for person, suffix, stem_kind in table:
        base = full_stem if stem_kind == "full" else stem
        forms.append(RawForm(base + suffix, tag.possessive(person), dropped))
    return forms


def first_match(word, rules):
    """Return the result of the first ``(ending, result)`` rule *word* ends with."""
    for ending, result in rules:
        if word.endswith(ending):
            return result
    return None
