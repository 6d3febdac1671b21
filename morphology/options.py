"""Flag-string parsing into a closed, typed option set.

A lexicon record is a head word followed by a comma-separated flag string::

    ספר       noun
    חנות      ע,iot
    ישראלי    adjective,country-adjective

Each token is ``name`` or ``name=value``; a bare name means "true".  Names
are resolved against the option catalog (``option_catalog.yaml``), which also
accepts the Hebrew option names of traditional hspell lexicon files.  Unknown
names and malformed tokens are fatal.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from morphology.errors import MalformedFlagToken, MissingPartOfSpeech, UnknownFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionSet:
    """Every option a lexicon record can carry.

    Flags are booleans; value options hold the author's literal string or
    ``None`` when absent.  An empty string is a real value (``country=``
    suppresses the country name).
    """

    # part of speech
    noun: bool = False
    adjective: bool = False
    # noun plural classes
    im: bool = False
    iim: bool = False
    ot: bool = False
    iot: bool = False
    xot: bool = False
    none: bool = False
    dual: bool = False
    plural: Optional[str] = None
    plural_construct: Optional[str] = None
    # spelling exceptions
    keep_he: bool = False
    segol_he: bool = False
    drop_yod: bool = False
    drop_vav: bool = False
    extra_yod_smichut: bool = False
    yod_before_final: bool = False
    m_plural: bool = False
    abbreviation: bool = False
    # suppression
    no_singular: bool = False
    no_inflections: bool = False
    no_singular_inflections: bool = False
    no_plural_inflections: bool = False
    no_possessives: bool = False
    no_singular_possessives: bool = False
    no_plural_possessives: bool = False
    # gender annotation
    masculine: bool = False
    feminine_gender: bool = False
    # adjective feminine forms
    feminine: Optional[str] = None
    feminine_t: bool = False
    feminine_h: bool = False
    feminine_it: bool = False
    # nationality adjectives
    country_adjective: bool = False
    country: Optional[str] = None
    # overrides
    singular: Optional[str] = None
    construct: Optional[str] = None

    @property
    def part_of_speech(self):
        """``"noun"`` or ``"adjective"``; a record with both is a noun."""
        return "noun" if self.noun else "adjective"


@dataclass(frozen=True)
class LexiconEntry:
    head_word: str
    options: OptionSet
    line_number: Optional[int] = None


# ── Load the option catalog from YAML ───────────────────────────────────────

_CATALOG_PATH = Path(__file__).with_name("option_catalog.yaml")


def _field_name(option_name):
    return option_name.replace("-", "_")


def _load_catalog(path=_CATALOG_PATH):
    """Read the option catalog from a YAML file.

    Returns a dict mapping every accepted spelling (canonical name or alias)
    to a ``(canonical_name, kind, implies)`` tuple.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    known = {f.name for f in fields(OptionSet)}
    catalog = {}
    for entry in raw:
        name = entry["name"]
        if _field_name(name) not in known:
            raise RuntimeError(
                f"Option {name!r} in {path.name} has no OptionSet field"
            )
        resolved = (name, entry["kind"], tuple(entry.get("implies") or ()))
        for spelling in [name, *(entry.get("aliases") or ())]:
            catalog[spelling] = resolved
    return catalog


OPTION_CATALOG = _load_catalog()

# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_flags(flag_string, head_word=None, line_number=None):
    """Turn a comma-separated flag string into an :class:`OptionSet`.

    Later duplicates overwrite earlier ones.  Implied options are switched on
    after all tokens are read.

    Raises:
        UnknownFlag: a name outside the catalog.
        MalformedFlagToken: an empty token, a token with more than one
            ``=``, a value given to a flag, or a value option without one
            (an empty value is accepted only where the catalog allows it).
        MissingPartOfSpeech: neither ``noun`` nor ``adjective`` was given.
    """
    context = dict(head_word=head_word, line_number=line_number)
    values = {}
    for token in flag_string.split(","):
        name, sep, value = token.partition("=")
        if not name or "=" in value:
            raise MalformedFlagToken(
                f"Malformed flag {token!r} for word {head_word!r}", **context
            )
        if name not in OPTION_CATALOG:
            raise UnknownFlag(
                f"Unknown flag {name!r} for word {head_word!r}", **context
            )
        canonical, kind, _ = OPTION_CATALOG[name]
        if kind == "flag":
            if sep:
                raise MalformedFlagToken(
                    f"Flag {name!r} of word {head_word!r} does not take a value",
                    **context,
                )
            values[canonical] = True
        else:
            if not sep:
                raise MalformedFlagToken(
                    f"Option {name!r} of word {head_word!r} needs a value",
                    **context,
                )
            if not value and kind != "value-or-empty":
                raise MalformedFlagToken(
                    f"Option {name!r} of word {head_word!r} has an empty value",
                    **context,
                )
            values[canonical] = value

    for canonical in list(values):
        for implied in OPTION_CATALOG[canonical][2]:
            values[implied] = True

    options = OptionSet(**{_field_name(k): v for k, v in values.items()})
    if not (options.noun or options.adjective):
        raise MissingPartOfSpeech(
            f"Word {head_word!r} was not specified as noun or adjective",
            **context,
        )
    if options.noun and options.adjective:
        logger.debug("%s is flagged both noun and adjective; using noun", head_word)
    return options


def parse_record(head_word, flag_string, line_number=None):
    """Build a :class:`LexiconEntry` from one record's two fields."""
    if flag_string is None:
        raise MissingPartOfSpeech(
            f"Type of word {head_word!r} was not specified",
            head_word=head_word,
            line_number=line_number,
        )
    options = parse_flags(flag_string, head_word=head_word, line_number=line_number)
    return LexiconEntry(head_word, options, line_number)
