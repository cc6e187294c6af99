#!/usr/bin/env python3
"""
Arabic Verb Conjugator

Builds past and present tense tables for a three-letter sound root by
attaching the affixes of each person in PRONOUN_TABLE to a fixed stem.

Past tense:
    - default stem      فَعْـ + ل + suffix     (e.g. كَتْبْتُ)
    - third person stem فَعَـ + ل + suffix     (e.g. كَتَبَ)
Present tense:
    - prefix + فْعَلـ + suffix for every person (e.g. يَكْتَبُ)

Every result pairs each PronounEntry with its form, so callers choose
whether to key the table by the display label or by the Arabic pronoun.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .paradigms import (
    FATHA, SUKUN, PRONOUN_TABLE, PronounEntry, Tense, get_pronoun
)
from .root_types import Root, RootLike, parse_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConjugatedForm:
    """A single conjugated verb form."""
    pronoun: PronounEntry
    form: str


@dataclass(frozen=True)
class ConjugationResult:
    """A full 14-person table for one root and tense."""
    root: Root
    tense: Tense
    forms: Tuple[ConjugatedForm, ...]

    def __iter__(self) -> Iterator[ConjugatedForm]:
        return iter(self.forms)

    def __len__(self) -> int:
        return len(self.forms)

    def __getitem__(self, index: int) -> ConjugatedForm:
        return self.forms[index]

    def by_label(self) -> List[Tuple[str, str]]:
        """(display label, form) pairs for the learner view."""
        return [(c.pronoun.label, c.form) for c in self.forms]

    def by_native_label(self) -> List[Tuple[str, str]]:
        """(Arabic pronoun, form) pairs for the API view."""
        return [(c.pronoun.native_label, c.form) for c in self.forms]

    def form_for(self, key: str) -> str:
        """Form for a pronoun given by code ("1s") or display label ("I")."""
        pronoun = get_pronoun(key)
        for c in self.forms:
            if c.pronoun == pronoun:
                return c.form
        raise KeyError(key)


def takes_open_stem(pronoun: PronounEntry) -> bool:
    """
    True for the third-person entries whose past stem is فَعَلـ.

    He, She, both duals and the masculine plural. The feminine plural
    (هنّ) keeps the sukun stem like the first and second person.
    """
    label = pronoun.label
    return (
        label == 'He'
        or label == 'She'
        or label.startswith('They (dual')
        or label == 'They (m. pl)'
    )


def past_form(root: Root, pronoun: PronounEntry) -> str:
    """Past tense form of root for a single person."""
    r1, r2, r3 = root
    if takes_open_stem(pronoun):
        return r1 + FATHA + r2 + FATHA + r3 + pronoun.past_suffix
    base = r1 + FATHA + r2 + SUKUN
    return base + r3 + pronoun.past_suffix


def present_form(root: Root, pronoun: PronounEntry) -> str:
    """Present tense form of root for a single person."""
    r1, r2, r3 = root
    return pronoun.present_prefix + r1 + SUKUN + r2 + FATHA + r3 + pronoun.present_suffix


_FORMULAS = {
    Tense.PAST: past_form,
    Tense.PRESENT: present_form,
}


def conjugate(root: RootLike, tense=Tense.PAST) -> ConjugationResult:
    """
    Conjugate a root in all 14 persons.

    Args:
        root: Three letters, a Root, or a string like "كتب"
        tense: Tense.PAST / Tense.PRESENT or 'past' / 'present'

    Returns:
        ConjugationResult in PRONOUN_TABLE order

    Raises:
        InvalidRootError: if any root position is empty
        ValueError: if the tense is unknown
    """
    tense = Tense.parse(tense)
    root = parse_root(root)
    formula = _FORMULAS[tense]

    forms = tuple(ConjugatedForm(pronoun, formula(root, pronoun)) for pronoun in PRONOUN_TABLE)
    logger.debug("Conjugated %s (%s): %d forms", root, tense.value, len(forms))

    return ConjugationResult(root=root, tense=tense, forms=forms)


def conjugate_past(root: RootLike) -> ConjugationResult:
    """Past tense (الماضي) table."""
    return conjugate(root, Tense.PAST)


def conjugate_present(root: RootLike) -> ConjugationResult:
    """Present tense (المضارع) table."""
    return conjugate(root, Tense.PRESENT)


def conjugate_form(root: RootLike, tense, pronoun: str) -> str:
    """Single form, e.g. conjugate_form('كتب', 'past', '3fs')."""
    entry = get_pronoun(pronoun)
    return _FORMULAS[Tense.parse(tense)](parse_root(root), entry)
