"""Noun paradigms: singular, the plural classes, construct state and possessives.

A noun may belong to several plural classes at once (e.g. both ``-im`` and
``-ot``); each class contributes its own base plural, construct form and
possessive paradigm.  When the lexicon names no class, one is guessed from
the ending of the head word (``IMPLICIT_PLURAL_RULES``), which covers most
nouns.
"""

import logging

from morphology.inflection import (
    EXPLICIT_PLURAL_KEEP,
    EXPLICIT_PLURAL_STRIP,
    EXTRA_YOD_CONSTRUCT,
    EXTRA_YOD_HIS,
    EXTRA_YOD_POSSESSIVES,
    IMPLICIT_PLURAL_RULES,
    PLURAL_POSSESSIVES,
    PLURAL_SUFFIXES,
    SEGOL_HE_HIS,
    SINGULAR_ONLY_ENDINGS,
    SINGULAR_POSSESSIVES,
    RawForm,
    Tag,
    first_match,
    possessive_forms,
)
from orthography.markers import prepare

logger = logging.getLogger(__name__)

HE = "ה"
TAV = "ת"
YOD = "י"
VAV = "ו"
AI_ENDING = "אי"

# ── Plural class and gender selection ───────────────────────────────────────

_FLAG_CLASSES = ("im", "iim", "ot", "iot", "xot")
_CLASS_ORDER = _FLAG_CLASSES + ("explicit",)


def implicit_plural_class(head_word, rules=IMPLICIT_PLURAL_RULES):
    return first_match(head_word, rules)


def plural_classes(head_word, options):
    """Plural classes of a noun, in generation order.

    ``"explicit"`` stands for the author-supplied ``plural=`` form.  A
    ``none`` noun, or one that already looks plural, has no classes.  A
    ``dual`` flag adds the ``iim`` base plural without switching off the
    guessed class.
    """
    if options.none or head_word.endswith(SINGULAR_ONLY_ENDINGS):
        return []
    selected = {name for name in _FLAG_CLASSES if getattr(options, name)}
    if not selected and options.plural is None:
        selected.add(implicit_plural_class(head_word))
    if options.dual:
        selected.add("iim")
    if options.plural is not None:
        selected.add("explicit")
    return [name for name in _CLASS_ORDER if name in selected]


_GENDER_RULES = (
    (lambda w, o: o.masculine and o.feminine_gender, "mf"),
    (lambda w, o: o.masculine, "m"),
    (lambda w, o: o.feminine_gender, "f"),
    (lambda w, o: o.segol_he, "m"),
    (lambda w, o: w.endswith(HE) and not o.keep_he, "f"),
    (lambda w, o: w.endswith(TAV) and not o.im, "f"),
)


def noun_gender(head_word, options):
    """Gender annotation of a noun; it does not change which forms exist."""
    for test, gender in _GENDER_RULES:
        if test(head_word, options):
            return gender
    return "m"


# ── Singular ────────────────────────────────────────────────────────────────


def _inflection_stem(word, options):
    """Stem changes that hold in every form except the base and the construct."""
    if options.yod_before_final:
        word = word[:-1] + YOD + word[-1:]
    if word.endswith(AI_ENDING) and len(word) > 2:
        # patach + aleph-yod: the yod is silent once a suffix follows
        word = word[:-1]
    return word


def _extra_yod_forms(word, tag, dropped):
    forms = []
    if word.endswith(HE):
        word = word[:-1]
        forms.append(RawForm(word + EXTRA_YOD_HIS, tag.possessive("his"), dropped))
    forms.append(RawForm(word + EXTRA_YOD_CONSTRUCT, tag.construct(), dropped))
    forms.extend(possessive_forms(word, tag, EXTRA_YOD_POSSESSIVES, dropped=dropped))
    return forms


def singular_inflections(word, options, tag, dropped=False):
    """Singular construct and possessive forms of a prepared noun stem."""
    if options.extra_yod_smichut:
        return _extra_yod_forms(word, tag, dropped)

    smichut = word
    if smichut.endswith(HE) and not (options.keep_he or options.segol_he):
        smichut = smichut[:-1] + TAV
    forms = []
    if options.construct is not None:
        forms.append(RawForm(options.construct + "-", tag.construct()))
    else:
        forms.append(RawForm(smichut + "-", tag.construct(), dropped))

    smichut = _inflection_stem(smichut, options)
    if options.segol_he:
        if smichut.endswith(HE):
            smichut = smichut[:-1]
        if not options.no_singular_possessives:
            forms.append(
                RawForm(smichut + SEGOL_HE_HIS, tag.possessive("his"), dropped)
            )
    if not options.no_singular_possessives:
        forms.extend(
            possessive_forms(smichut, tag, SINGULAR_POSSESSIVES, dropped=dropped)
        )
    return forms


# ── Plurals ─────────────────────────────────────────────────────────────────


def _plural_inflections(stem, full_stem, construct, options, tag):
    if options.no_plural_inflections:
        return []
    forms = [RawForm(construct, tag.construct())]
    if not options.no_plural_possessives:
        forms.extend(
            possessive_forms(stem, tag, PLURAL_POSSESSIVES, full_stem=full_stem)
        )
    return forms


def _im_forms(word, options, tag):
    full = word
    if full.endswith(HE) and not options.keep_he:
        full = full[:-1]
    stem = full.replace(VAV, "", 1) if options.drop_vav else full
    forms = [RawForm(stem + PLURAL_SUFFIXES["im"], tag)]
    forms.extend(_plural_inflections(stem, full, full + YOD + "-", options, tag))
    return forms


def _iim_forms(word, options, tag):
    stem = word[:-1] + TAV if word.endswith(HE) else word
    forms = [RawForm(stem + PLURAL_SUFFIXES["iim"], tag)]
    if options.iim:
        # a bare dual (שנתיים) has no construct or possessives
        forms.extend(_plural_inflections(stem, stem, stem + YOD + "-", options, tag))
    return forms


def _feminine_plural_builder(name):
    suffix = PLURAL_SUFFIXES[name]

    def build(word, options, tag):
        stem = word
        if stem.endswith((HE, TAV)) and not options.keep_he:
            stem = stem[:-1]
        plural = stem + suffix
        if name == "ot" and options.drop_vav:
            # the cholam is lost only in the base plural
            base = stem.replace(VAV, "", 1) + suffix
        else:
            base = plural
        forms = [RawForm(base, tag)]
        forms.extend(_plural_inflections(plural, plural, plural + "-", options, tag))
        return forms

    return build


def _explicit_forms(head_word, options, tag):
    plural = options.plural
    forms = [RawForm(plural, tag)]
    if options.no_plural_inflections:
        return forms
    override = options.plural_construct
    if plural.endswith(EXPLICIT_PLURAL_KEEP):
        full = override if override is not None else plural
        stem = full
        construct = full + "-"
    elif plural.endswith(EXPLICIT_PLURAL_STRIP):
        stem = plural[:-2]
        full = override[:-1] if override is not None else stem
        construct = full + YOD + "-"
    else:
        logger.warning(
            "Plural %r of %r has an unrecognized ending; "
            "skipping its construct and possessive forms",
            plural,
            head_word,
        )
        return forms
    forms.extend(_plural_inflections(stem, full, construct, options, tag))
    return forms


_PLURAL_BUILDERS = {
    "im": _im_forms,
    "iim": _iim_forms,
    "ot": _feminine_plural_builder("ot"),
    "iot": _feminine_plural_builder("iot"),
    "xot": _feminine_plural_builder("xot"),
}

# ── Noun paradigm ───────────────────────────────────────────────────────────


def inflect_noun(entry):
    """Generate every raw form of a noun entry, in paradigm order.

    Order: base singular, singular construct, singular possessives, then for
    each plural class its base plural, construct and possessives.
    """
    options = entry.options
    head_word = entry.head_word
    classes = plural_classes(head_word, options)
    tag = Tag("noun", "singular", noun_gender(head_word, options), gender_first=True)
    prepared = prepare(head_word)

    forms = []
    if options.singular is not None:
        forms.append(RawForm(options.singular, tag))
    elif not options.no_singular:
        forms.append(RawForm(prepared.original, tag))

    word = prepared.stem
    if options.drop_yod:
        # the chirik/tsere yod survives only in the base word
        word = word.replace(YOD, "", 1)
    dropped = options.no_singular or options.no_singular_inflections
    forms.extend(singular_inflections(word, options, tag, dropped))
    if not options.extra_yod_smichut:
        word = _inflection_stem(word, options)

    plural_tag = Tag("noun", "plural", tag.gender, gender_first=True)
    for name in classes:
        if name == "explicit":
            forms.extend(_explicit_forms(head_word, options, plural_tag))
        else:
            forms.extend(_PLURAL_BUILDERS[name](word, options, plural_tag))
    logger.debug("%s: %d raw forms (%s)", head_word, len(forms), ", ".join(classes))
    return forms
