"""Export every form of a lexicon, with its annotation, to a CSV file.

Reads sample_lexicon.dat (or the file named on the command line), expands
each record in detailed mode, and writes one row per generated form to
word_forms.csv in this directory.
"""

import csv
import os
import sys

# Allow imports from the parent directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from morphology.errors import LexiconError
from morphology.inflection import RunConfig
from wordlist import expand_entry, open_lexicon, read_records

LEXICON_PATH = os.path.join(os.path.dirname(__file__), "sample_lexicon.dat")
OUTPUT_PATH = os.path.join(os.path.dirname(__file__), "word_forms.csv")

CSV_FIELDS = [
    "record",
    "line_num",
    "head_word",
    "part_of_speech",
    "form",
    "annotation",
]


def main():
    lexicon_path = sys.argv[1] if len(sys.argv) > 1 else LEXICON_PATH
    config = RunConfig(detailed=True)

    print(f"Reading {lexicon_path}")
    print(f"Writing results to {OUTPUT_PATH}")

    n_records = n_forms = 0
    with open_lexicon(lexicon_path) as fin, open(
        OUTPUT_PATH, "w", newline="", encoding="utf-8"
    ) as fout:
        writer = csv.DictWriter(fout, fieldnames=CSV_FIELDS)
        writer.writeheader()

        try:
            for kind, entry in read_records(fin):
                if kind != "entry":
                    continue
                n_records += 1
                for form in expand_entry(entry, config):
                    n_forms += 1
                    writer.writerow({
                        "record": n_records,
                        "line_num": entry.line_number,
                        "head_word": entry.head_word,
                        "part_of_speech": entry.options.part_of_speech,
                        "form": form.text,
                        "annotation": form.annotation,
                    })
        except LexiconError as exc:
            print(f"  ⚠ stopped at a bad record: {exc}")
            return 1

    print(f"Done: {n_records} records, {n_forms} forms.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
