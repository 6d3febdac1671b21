"""Expand a Hebrew noun/adjective lexicon into the full list of word forms.

Reads a lexicon file, one record per line (a head word and its flags, see
``morphology/options.py``), generates each record's paradigm and prints one
form per line, with a ``-------`` line after every record.  With ``-d`` every
form is followed by its grammatical annotation.

Usage:
    python wordlist.py [-d] [lexicon-file]

The log level is taken from the ``WORDLIST_LOG_LEVEL`` environment variable
(default ``WARNING``).
"""

import argparse
import logging
import os
import sys

from morphology.adjectives import inflect_adjective
from morphology.errors import LexiconError, LexiconFileError
from morphology.inflection import RunConfig
from morphology.nouns import inflect_noun
from morphology.options import parse_record
from orthography.markers import finalize

logger = logging.getLogger(__name__)

DEFAULT_LEXICON = "wolig.dat"
RECORD_SEPARATOR = "-------"
COMMENT_MARKER = "#"
PASSTHROUGH_MARKER = "#*"

_GENERATORS = {
    "noun": inflect_noun,
    "adjective": inflect_adjective,
}

# ── Reading records ──────────────────────────────────────────────────────────


def read_records(lines):
    """Yield ``("echo", text)`` and ``("entry", LexiconEntry)`` items in order.

    Lines starting with ``#*`` are echoed verbatim; ``#`` starts a comment
    anywhere else.  Blank lines are skipped.
    """
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if line.startswith(PASSTHROUGH_MARKER):
            yield "echo", line
            continue
        fields = line.split(COMMENT_MARKER, 1)[0].split()
        if not fields:
            continue
        if len(fields) > 2:
            logger.warning(
                "line %d: ignoring extra fields after the flags of %r: %s",
                line_number,
                fields[0],
                " ".join(fields[2:]),
            )
        flags = fields[1] if len(fields) > 1 else None
        yield "entry", parse_record(fields[0], flags, line_number)


# ── Expansion ────────────────────────────────────────────────────────────────


def expand_entry(entry, config=None):
    """Return the SurfaceForms of one entry, dropped forms left out."""
    raw_forms = _GENERATORS[entry.options.part_of_speech](entry)
    surface = []
    for form in raw_forms:
        spelled = finalize(form, config, quote=entry.options.abbreviation)
        if spelled is not None:
            surface.append(spelled)
    return surface


def expand(lines, config=None):
    """Yield output lines for a whole lexicon, in record order.

    Raises LexiconError on the first fatal record; lines already yielded
    stay valid.
    """
    for kind, item in read_records(lines):
        if kind == "echo":
            yield item
            continue
        for form in expand_entry(item, config):
            yield str(form)
        yield RECORD_SEPARATOR


# ── CLI ──────────────────────────────────────────────────────────────────────


def open_lexicon(path, encoding="utf-8"):
    try:
        return open(path, encoding=encoding)
    except OSError as exc:
        raise LexiconFileError(f"Cannot open lexicon {path}: {exc}") from exc


def _build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="wordlist",
        description="Expand a Hebrew noun/adjective lexicon into word forms.",
    )
    parser.add_argument(
        "-d",
        "--detailed",
        action="store_true",
        help="annotate every form with its grammatical description",
    )
    parser.add_argument(
        "lexicon",
        nargs="?",
        default=DEFAULT_LEXICON,
        help=f"lexicon file (default: {DEFAULT_LEXICON})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="character encoding of the lexicon file (default: utf-8)",
    )
    return parser


def main(argv=None):
    args = _build_arg_parser().parse_args(argv)
    level_name = os.environ.get("WORDLIST_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = RunConfig(detailed=args.detailed)
    try:
        with open_lexicon(args.lexicon, args.encoding) as f:
            for line in expand(f, config):
                print(line)
    except LexiconError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
