#!/usr/bin/env python3
"""
Irregular Verb Catalogue

Four fixed past-tense paradigms for roots containing a weak (و/ي) or a
doubled letter. The forms are transcribed, not derived: the sound-verb
formula in conjugator.py does not apply to them.

Categories:
- hollow (أجوف)        middle radical is weak, e.g. قال
- weak-final (ناقص)    last radical is weak, e.g. دعا
- weak-initial (مثال)  first radical is weak, e.g. وقف
- doubled (مضعّف)       second and third radicals identical, e.g. مدّ
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .conjugator import ConjugatedForm, ConjugationResult
from .paradigms import PRONOUN_TABLE, Tense
from .root_types import Root


class UnknownVerbTypeError(KeyError):
    """Raised for a category outside the catalogue."""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Unknown irregular verb type: {self.category!r} (expected one of {', '.join(IRREGULAR_VERBS)})"


@dataclass(frozen=True)
class IrregularVerb:
    """A pre-conjugated irregular verb with its grammar note."""
    category: str
    type_name_ar: str
    root: Root
    rule: str
    forms: Tuple[str, ...]   # Past tense, PRONOUN_TABLE order

    def __post_init__(self):
        if len(self.forms) != len(PRONOUN_TABLE):
            raise ValueError(
                f"{self.category}: expected {len(PRONOUN_TABLE)} forms, got {len(self.forms)}"
            )

    def conjugation(self) -> ConjugationResult:
        """The forms as a past tense ConjugationResult."""
        return ConjugationResult(
            root=self.root,
            tense=Tense.PAST,
            forms=tuple(ConjugatedForm(p, f) for p, f in zip(PRONOUN_TABLE, self.forms)),
        )


# ============================================
# CATALOGUE
# ============================================

_CATALOGUE = (
    IrregularVerb(
        category='hollow',
        type_name_ar='أجوف',
        root=Root('ق', 'و', 'ل'),
        rule=(
            "Hollow Verb (e.g. قال): The middle weak letter (و) is dropped when it "
            "connects to a pronoun with a vowel (like the تاء of the subject) to "
            "prevent two silent letters from meeting."
        ),
        forms=(
            'قَالَ', 'قَالَا', 'قَالُوا',
            'قَالَتْ', 'قَالَتَا', 'قُلْنَ',
            'قُلْتَ', 'قُلْتُمَا', 'قُلْتُمْ',
            'قُلْتِ', 'قُلْتُمَا', 'قُلْتُنَّ',
            'قُلْتُ', 'قُلْنَا',
        ),
    ),
    IrregularVerb(
        category='weak-final',
        type_name_ar='ناقص',
        root=Root('د', 'ع', 'و'),
        rule=(
            "Weak-Final Verb (e.g. دعا): The weak letter (و) returns to its origin "
            "when attached to the plural 'waw' and is then dropped, with a fatha "
            "placed on the preceding letter."
        ),
        forms=(
            'دَعَا', 'دَعَوَا', 'دَعَوْا',
            'دَعَتْ', 'دَعَتَا', 'دَعَوْنَ',
            'دَعَوْتَ', 'دَعَوْتُمَا', 'دَعَوْتُمْ',
            'دَعَوْتِ', 'دَعَوْتُمَا', 'دَعَوْتُنَّ',
            'دَعَوْتُ', 'دَعَوْنَا',
        ),
    ),
    IrregularVerb(
        category='weak-initial',
        type_name_ar='مثال',
        root=Root('و', 'ق', 'ف'),
        rule=(
            "Weak-Initial Verb (e.g. وقف): There is no significant change in the past "
            "tense conjugation; it behaves like a regular, sound verb."
        ),
        forms=(
            'وَقَفَ', 'وَقَفَا', 'وَقَفُوا',
            'وَقَفَتْ', 'وَقَفَتَا', 'وَقَفْنَ',
            'وَقَفْتَ', 'وَقَفْتُمَا', 'وَقَفْتُمْ',
            'وَقَفْتِ', 'وَقَفْتُمَا', 'وَقَفْتُنَّ',
            'وَقَفْتُ', 'وَقَفْنَا',
        ),
    ),
    IrregularVerb(
        category='doubled',
        type_name_ar='مضعّف',
        root=Root('م', 'د', 'د'),
        rule=(
            "Doubled Verb (e.g. مدّ): The doubled letter is separated when the verb "
            "is attached to pronouns of a moving subject (like تاء الفاعل, نا "
            "الفاعلين, نون النسوة)."
        ),
        forms=(
            'مَدَّ', 'مَدَّا', 'مَدُّوا',
            'مَدَّتْ', 'مَدَّتَا', 'مَدَدْنَ',
            'مَدَدْتَ', 'مَدَدْتُمَا', 'مَدَدْتُمْ',
            'مَدَدْتِ', 'مَدَدْتُمَا', 'مَدَدْتُنَّ',
            'مَدَدْتُ', 'مَدَدْنَا',
        ),
    ),
)

IRREGULAR_VERBS: Mapping[str, IrregularVerb] = MappingProxyType(
    {verb.category: verb for verb in _CATALOGUE}
)


def get_irregular(category: str) -> IrregularVerb:
    """
    Look up one irregular verb by category.

    Raises:
        UnknownVerbTypeError: if the category is not in the catalogue
    """
    try:
        return IRREGULAR_VERBS[category]
    except KeyError:
        raise UnknownVerbTypeError(category) from None


def list_irregular() -> List[IrregularVerb]:
    """All irregular verbs in catalogue order."""
    return list(_CATALOGUE)
