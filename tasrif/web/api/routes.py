"""
API routes for the Tasrif conjugation tables.

HTML pages:
- /phase/1, /phase/2: past/present tense of a typed root
- /phase/3: irregular verb catalogue

JSON endpoints (mounted under /api):
- POST /conjugate/{tense}: conjugation table for a root
- POST /preview: request structure for the letters typed so far
- GET /pronouns, /irregular, /irregular/{category}, /health
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from ... import __version__
from ...config import get_settings
from ...conjugator import conjugate
from ...irregular import UnknownVerbTypeError, get_irregular, list_irregular
from ...paradigms import PRONOUN_TABLE, Tense
from ...root_types import InvalidRootError, normalize_root
from ...view import PHASES, render_irregular_page, render_regular_page
from ..models.schemas import (
    ConjugationResponse,
    IrregularVerbInfo,
    IrregularVerbsResponse,
    KeyMode,
    PronounInfo,
    PronounsResponse,
    RootRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()
pages = APIRouter()


def _parse_tense(tense: str) -> Tense:
    try:
        return Tense.parse(tense)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ============================================
# JSON API
# ============================================

@router.post("/conjugate/{tense}", response_model=ConjugationResponse)
async def conjugate_root(
    tense: str,
    request: RootRequest,
    keys: KeyMode = Query("native", description="Key rows by 'native' (Arabic) or 'label' (English)"),
):
    """Conjugate a three-letter root in the past or present tense."""
    parsed = _parse_tense(tense)
    logger.debug("Conjugate request: %s %r", parsed.value, request.root)

    try:
        result = conjugate(request.root, parsed)
    except InvalidRootError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return ConjugationResponse.from_result(result, keys=keys)


@router.post("/preview", response_model=RootRequest)
async def preview(request: RootRequest):
    """Echo the request structure while letters are still being typed."""
    return RootRequest(root=list(request.root))


@router.get("/pronouns", response_model=PronounsResponse)
async def get_pronouns():
    """The 14-person pronoun table in display order."""
    return PronounsResponse(pronouns=[PronounInfo.from_entry(p) for p in PRONOUN_TABLE])


@router.get("/irregular", response_model=IrregularVerbsResponse)
async def get_irregular_verbs(keys: KeyMode = Query("label")):
    """All four irregular verb paradigms."""
    return IrregularVerbsResponse(verbs=[IrregularVerbInfo.from_verb(v, keys) for v in list_irregular()])


@router.get("/irregular/{category}", response_model=IrregularVerbInfo)
async def get_irregular_verb(category: str, keys: KeyMode = Query("label")):
    """One irregular verb paradigm with its grammar note."""
    try:
        verb = get_irregular(category)
    except UnknownVerbTypeError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return IrregularVerbInfo.from_verb(verb, keys)


@router.get("/health")
async def health_check():
    """Health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "pronouns": len(PRONOUN_TABLE),
        "irregular_verbs": len(list_irregular()),
    }


# ============================================
# HTML PAGES
# ============================================

@pages.get("/", response_class=HTMLResponse)
async def index():
    """Phase 1 with the default root."""
    return render_regular_page(1, list(normalize_root(get_settings().default_root)))


@pages.get("/phase/{number}", response_class=HTMLResponse)
async def phase_page(
    number: int,
    r1: Optional[str] = None,
    r2: Optional[str] = None,
    r3: Optional[str] = None,
    verb_type: Optional[str] = Query(None, alias="type"),
):
    """One of the three tabs."""
    if number not in PHASES:
        raise HTTPException(status_code=404, detail=f"Unknown phase: {number}")

    settings = get_settings()

    if number == 3:
        try:
            return render_irregular_page(verb_type or settings.default_irregular)
        except UnknownVerbTypeError as e:
            raise HTTPException(status_code=404, detail=str(e))

    letters = [r1, r2, r3]
    if all(letter is None for letter in letters):
        letters = list(normalize_root(settings.default_root))

    return render_regular_page(number, letters)
