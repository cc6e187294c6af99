#!/usr/bin/env python3
"""
HTML View

Server-side rendering of the three learning phases:
1. Past tense of a user-entered root
2. Present tense of a user-entered root
3. Irregular verb catalogue

Each regular phase also shows the request/response JSON that the
conjugation endpoint would exchange for the same root.
"""

import json
import logging
from dataclasses import dataclass
from html import escape
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from .conjugator import conjugate
from .irregular import IRREGULAR_VERBS, get_irregular
from .paradigms import Tense
from .root_types import InvalidRootError
from .web.models.schemas import ConjugationResponse, RootRequest

logger = logging.getLogger(__name__)

PHASES: Dict[int, str] = {
    1: "Phase 1: Past Tense",
    2: "Phase 2: Present Tense",
    3: "Phase 3: Irregular Verbs",
}

PHASE_TENSES: Dict[int, Tense] = {
    1: Tense.PAST,
    2: Tense.PRESENT,
}


def format_json(obj) -> str:
    """Pretty-print with 2-space indent, Arabic left unescaped."""
    if isinstance(obj, BaseModel):
        obj = obj.model_dump()
    return json.dumps(obj, indent=2, ensure_ascii=False)


def create_table_html(rows: Sequence[Tuple[str, str]]) -> str:
    """Two-column Pronoun/Verb table."""
    html = (
        '<table class="w-full text-center border-collapse"><thead>'
        '<tr class="border-b-2 border-gray-200">'
        '<th class="p-2 font-semibold">Pronoun</th><th class="p-2 font-semibold">Verb</th>'
        '</tr></thead><tbody>'
    )
    for pronoun, verb in rows:
        html += (
            f'<tr class="border-b border-gray-100"><td class="p-2">{escape(pronoun)}</td>'
            f'<td class="p-2 font-semibold text-lg arabic-text" dir="rtl">{escape(verb)}</td></tr>'
        )
    html += '</tbody></table>'
    return html


@dataclass
class RegularPhase:
    """Rendered state of phase 1 or 2."""
    tense: Tense
    letters: List[str]
    table_html: str = ''
    request_json: str = ''
    response_json: str = ''
    notice: Optional[str] = None


@dataclass
class IrregularPhase:
    """Rendered state of phase 3."""
    category: str
    root_display: str
    rule: str
    table_html: str


def preview_request(letters: Sequence[Optional[str]]) -> str:
    """Request JSON for whatever is currently typed, filled or not."""
    return format_json({"root": [letter or '' for letter in letters]})


def build_regular_phase(tense, letters: Sequence[Optional[str]]) -> RegularPhase:
    """
    Conjugate the typed letters for a regular phase.

    An incomplete root yields a notice and no table or response.
    """
    tense = Tense.parse(tense)
    typed = [letter or '' for letter in letters]
    phase = RegularPhase(tense=tense, letters=typed, request_json=preview_request(typed))

    try:
        result = conjugate(typed, tense)
    except InvalidRootError as e:
        logger.debug("No %s table for %r: %s", tense.value, typed, e.message)
        phase.notice = e.message
        return phase

    phase.table_html = create_table_html(result.by_label())
    phase.request_json = format_json(RootRequest.from_root(result.root))
    phase.response_json = format_json(ConjugationResponse.from_result(result, keys="native"))
    return phase


def build_irregular_phase(category: str) -> IrregularPhase:
    """Static view of one catalogue entry. Unknown categories raise UnknownVerbTypeError."""
    verb = get_irregular(category)
    return IrregularPhase(
        category=verb.category,
        root_display=verb.root.display(),
        rule=verb.rule,
        table_html=create_table_html(verb.conjugation().by_label()),
    )


# ============================================
# PAGE LAYOUT
# ============================================

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; max-width: 48rem; margin: 2rem auto; }}
.tab-btn {{ padding: .5rem 1rem; text-decoration: none; }}
.tab-active {{ border-bottom: 2px solid #A0522D; color: #A0522D; }}
.tab-inactive {{ color: #6b7280; }}
.arabic-text {{ color: #A0522D; font-size: 1.25rem; }}
.notice {{ background: #fef3c7; padding: .5rem 1rem; }}
pre {{ background: #f3f4f6; padding: .5rem; direction: ltr; }}
</style>
</head>
<body>
<h1>Arabic Verb Conjugation</h1>
<nav>{tabs}</nav>
<section id="phase{active}" class="tab-content">
<h2>{title}</h2>
{content}
</section>
</body>
</html>
"""


def render_tabs(active: int) -> str:
    tabs = []
    for number, title in PHASES.items():
        state = 'tab-active' if number == active else 'tab-inactive'
        tabs.append(
            f'<a class="tab-btn {state}" data-tab="phase{number}" href="/phase/{number}">{escape(title)}</a>'
        )
    return ''.join(tabs)


def render_regular_content(number: int, phase: RegularPhase) -> str:
    inputs = ''.join(
        f'<input id="p{number}-r{i}" name="r{i}" maxlength="1" dir="rtl" value="{escape(letter)}">'
        for i, letter in enumerate(phase.letters, start=1)
    )
    notice = f'<p class="notice" role="alert">{escape(phase.notice)}</p>' if phase.notice else ''
    return (
        f'<form method="get" action="/phase/{number}">{inputs}'
        f'<button id="p{number}-conjugate-btn" type="submit">Conjugate</button></form>'
        f'{notice}'
        f'<div id="p{number}-output-table">{phase.table_html}</div>'
        f'<h3>Request</h3><pre id="p{number}-request-json">{escape(phase.request_json)}</pre>'
        f'<h3>Response</h3><pre id="p{number}-response-json">{escape(phase.response_json)}</pre>'
    )


def render_irregular_content(phase: IrregularPhase) -> str:
    options = ''.join(
        f'<option value="{escape(cat)}"{" selected" if cat == phase.category else ""}>'
        f'{escape(cat)} ({escape(verb.type_name_ar)})</option>'
        for cat, verb in IRREGULAR_VERBS.items()
    )
    return (
        f'<form method="get" action="/phase/3">'
        f'<select id="p3-verb-type" name="type" onchange="this.form.submit()">{options}</select>'
        f'<noscript><button type="submit">Show</button></noscript></form>'
        f'<p>Root: <span id="p3-root-display" dir="rtl">{escape(phase.root_display)}</span></p>'
        f'<p id="p3-rule-display">{escape(phase.rule)}</p>'
        f'<div id="p3-output-table">{phase.table_html}</div>'
    )


def render_page(active: int, content: str) -> str:
    """Full HTML document with the tab bar and the active phase."""
    return _PAGE.format(
        title=escape(PHASES[active]),
        tabs=render_tabs(active),
        active=active,
        content=content,
    )


def render_regular_page(number: int, letters: Sequence[Optional[str]]) -> str:
    phase = build_regular_phase(PHASE_TENSES[number], letters)
    return render_page(number, render_regular_content(number, phase))


def render_irregular_page(category: str) -> str:
    phase = build_irregular_phase(category)
    return render_page(3, render_irregular_content(phase))