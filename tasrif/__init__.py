# Tasrif - Arabic verb conjugation tables
# Past and present tense of sound roots, plus a fixed irregular verb catalogue

__version__ = "0.1.0"

from .paradigms import PronounEntry, PRONOUN_TABLE, Tense, FATHA, SUKUN, get_pronoun
from .root_types import Root, InvalidRootError, make_root, parse_root
from .conjugator import (
    ConjugatedForm,
    ConjugationResult,
    conjugate,
    conjugate_past,
    conjugate_present,
    conjugate_form,
)
from .irregular import IrregularVerb, IRREGULAR_VERBS, UnknownVerbTypeError, get_irregular, list_irregular

__all__ = [
    'PronounEntry',
    'PRONOUN_TABLE',
    'Tense',
    'FATHA',
    'SUKUN',
    'get_pronoun',
    'Root',
    'InvalidRootError',
    'make_root',
    'parse_root',
    'ConjugatedForm',
    'ConjugationResult',
    'conjugate',
    'conjugate_past',
    'conjugate_present',
    'conjugate_form',
    'IrregularVerb',
    'IRREGULAR_VERBS',
    'UnknownVerbTypeError',
    'get_irregular',
    'list_irregular',
]
