#!/usr/bin/env python3
"""
Arabic Pronoun Paradigm

The fixed table of the 14 grammatical persons used by every conjugation
table, with the affixes each person takes in the past and present tense.

Paradigm structure:
- Person: 3rd (غائب), 2nd (مخاطب), 1st (متكلم)
- Number: singular (مفرد), dual (مثنى), plural (جمع)
- Gender: masculine (مذكر), feminine (مؤنث)
- Tense: past (ماضي), present (مضارع)

The order of PRONOUN_TABLE is the display order of every table and must
never be re-sorted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


# Diacritics used by the stem formulas
FATHA = "\u064e"   # فتحة
DAMMA = "\u064f"   # ضمة
KASRA = "\u0650"   # كسرة
SUKUN = "\u0652"   # سكون
SHADDA = "\u0651"  # شدة


class Person(Enum):
    FIRST = 1   # متكلم
    SECOND = 2  # مخاطب
    THIRD = 3   # غائب


class Number(Enum):
    SINGULAR = 1  # مفرد
    DUAL = 2      # مثنى
    PLURAL = 3    # جمع


class Gender(Enum):
    MASCULINE = 1  # مذكر
    FEMININE = 2   # مؤنث
    COMMON = 3     # مشترك (for 1st person)


class Tense(Enum):
    PAST = 'past'        # ماضي
    PRESENT = 'present'  # مضارع

    @classmethod
    def parse(cls, value) -> 'Tense':
        """Accept a Tense member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown tense: {value!r} (expected 'past' or 'present')")


@dataclass(frozen=True)
class PronounEntry:
    """A single grammatical person in the paradigm."""
    label: str           # Display name, e.g. "They (dual, m)"
    native_label: str    # Arabic pronoun, e.g. "هما (م)"
    past_suffix: str
    present_prefix: str
    present_suffix: str
    person: Person
    number: Number
    gender: Gender
    code: str            # e.g. "3md"


# ============================================
# PRONOUN TABLE (الضمائر)
# ============================================

PRONOUN_TABLE: Tuple[PronounEntry, ...] = (
    # Third person (الغائب)
    PronounEntry('He', 'هو', 'َ', 'يَ', 'ُ',
                 Person.THIRD, Number.SINGULAR, Gender.MASCULINE, '3ms'),      # فَعَلَ / يَفْعَلُ
    PronounEntry('They (dual, m)', 'هما (م)', 'َا', 'يَ', 'َانِ',
                 Person.THIRD, Number.DUAL, Gender.MASCULINE, '3md'),          # فَعَلَا
    PronounEntry('They (m. pl)', 'هم', 'ُوا', 'يَ', 'ُونَ',
                 Person.THIRD, Number.PLURAL, Gender.MASCULINE, '3mp'),        # فَعَلُوا
    PronounEntry('She', 'هي', 'َتْ', 'تَ', 'ُ',
                 Person.THIRD, Number.SINGULAR, Gender.FEMININE, '3fs'),       # فَعَلَتْ
    PronounEntry('They (dual, f)', 'هما (مؤ)', 'َتَا', 'تَ', 'َانِ',
                 Person.THIRD, Number.DUAL, Gender.FEMININE, '3fd'),           # فَعَلَتَا
    PronounEntry('They (f. pl)', 'هنّ', 'ْنَ', 'يَ', 'ْنَ',
                 Person.THIRD, Number.PLURAL, Gender.FEMININE, '3fp'),         # فَعَلْنَ

    # Second person (المخاطب)
    PronounEntry('You (m)', 'أنتَ', 'ْتَ', 'تَ', 'ُ',
                 Person.SECOND, Number.SINGULAR, Gender.MASCULINE, '2ms'),     # فَعَلْتَ
    PronounEntry('You (dual, m)', 'أنتما', 'ْتُمَا', 'تَ', 'َانِ',
                 Person.SECOND, Number.DUAL, Gender.MASCULINE, '2md'),         # فَعَلْتُمَا
    PronounEntry('You (m. pl)', 'أنتم', 'ْتُمْ', 'تَ', 'ُونَ',
                 Person.SECOND, Number.PLURAL, Gender.MASCULINE, '2mp'),       # فَعَلْتُمْ
    PronounEntry('You (f)', 'أنتِ', 'ْتِ', 'تَ', 'ِينَ',
                 Person.SECOND, Number.SINGULAR, Gender.FEMININE, '2fs'),      # فَعَلْتِ
    PronounEntry('You (dual, f)', 'أنتما', 'ْتُمَا', 'تَ', 'َانِ',
                 Person.SECOND, Number.DUAL, Gender.FEMININE, '2fd'),          # فَعَلْتُمَا
    PronounEntry('You (f. pl)', 'أنتنّ', 'ْتُنَّ', 'تَ', 'ْنَ',
                 Person.SECOND, Number.PLURAL, Gender.FEMININE, '2fp'),        # فَعَلْتُنَّ

    # First person (المتكلم)
    PronounEntry('I', 'أنا', 'ْتُ', 'أَ', 'ُ',
                 Person.FIRST, Number.SINGULAR, Gender.COMMON, '1s'),          # فَعَلْتُ / أَفْعَلُ
    PronounEntry('We', 'نحن', 'ْنَا', 'نَ', 'ُ',
                 Person.FIRST, Number.PLURAL, Gender.COMMON, '1p'),            # فَعَلْنَا
)

_BY_CODE: Dict[str, PronounEntry] = {p.code: p for p in PRONOUN_TABLE}
_BY_LABEL: Dict[str, PronounEntry] = {p.label: p for p in PRONOUN_TABLE}


def get_pronoun(key: str) -> PronounEntry:
    """
    Look up a pronoun by its code ("3fs") or display label ("She").

    Raises:
        KeyError: if no entry matches
    """
    if key in _BY_CODE:
        return _BY_CODE[key]
    if key in _BY_LABEL:
        return _BY_LABEL[key]
    raise KeyError(f"Unknown pronoun: {key!r}")


def pronoun_labels() -> Tuple[str, ...]:
    """Display labels in table order."""
    return tuple(p.label for p in PRONOUN_TABLE)
