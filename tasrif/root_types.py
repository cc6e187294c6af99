#!/usr/bin/env python3
"""
Arabic Root Input

A root (جذر) here is an ordered triple of three letters supplied by the
learner, e.g. ك-ت-ب. The only validation is that all three positions are
filled; the letters themselves are not checked for linguistic correctness.
"""

import logging
from typing import Iterable, NamedTuple, Optional, Sequence, Union

logger = logging.getLogger(__name__)

ROOT_LENGTH = 3
INVALID_ROOT_MESSAGE = "Please enter all three root letters."

# Separators accepted between letters in free-form input
SEPARATORS = ('-', ' ', 'ـ', ',', '،', '_')

# Harakat stripped from free-form input
DIACRITICS = 'ًٌٍَُِّْٰ'


class InvalidRootError(ValueError):
    """Raised when a root does not have three non-empty positions."""

    def __init__(self, letters: Optional[Sequence] = None, message: str = INVALID_ROOT_MESSAGE):
        super().__init__(message)
        self.letters = list(letters) if letters is not None else []
        self.message = message


class Root(NamedTuple):
    """Three root letters: فاء، عين، لام الفعل."""
    first: str
    second: str
    third: str

    def __str__(self) -> str:
        return ''.join(self)

    def display(self) -> str:
        """Bracketed form used by the irregular-verb viewer, e.g. [ ق, و, ل ]."""
        return f"[ {', '.join(self)} ]"


RootLike = Union[Root, str, Sequence[Optional[str]]]


def make_root(letters: Iterable[Optional[str]]) -> Root:
    """
    Build a Root from exactly three letters.

    Args:
        letters: Three strings, e.g. ['ك', 'ت', 'ب']

    Returns:
        The validated Root

    Raises:
        InvalidRootError: if there are not three positions or any is empty
    """
    positions = list(letters)

    if len(positions) != ROOT_LENGTH or any(not p for p in positions):
        logger.info("Rejected root %r", positions)
        raise InvalidRootError(positions)

    return Root(*positions)


def normalize_root(root: str) -> str:
    """
    Normalize a free-form root string:
    - Remove separators (dashes, spaces, tatweel, commas)
    - Remove diacritics (tashkeel)
    """
    for sep in SEPARATORS:
        root = root.replace(sep, '')

    for d in DIACRITICS:
        root = root.replace(d, '')

    return root


def parse_root(value: RootLike) -> Root:
    """
    Coerce user input into a Root.

    Accepts a Root, a sequence of three letters, or a string such as
    "كتب" or "ك-ت-ب".
    """
    if isinstance(value, Root):
        return make_root(value)

    if isinstance(value, str):
        return make_root(list(normalize_root(value)))

    return make_root(value)
