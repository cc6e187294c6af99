#!/usr/bin/env python3
"""Tests for the FastAPI app: JSON endpoints and the three HTML tabs."""

import json

import pytest

from tasrif.paradigms import PRONOUN_TABLE
from tasrif.root_types import InvalidRootError
from tasrif.web.main import create_app

KTB = {"root": ["ك", "ت", "ب"]}


# ============================================
# JSON API
# ============================================

def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["pronouns"] == 14
    assert data["irregular_verbs"] == 4


def test_conjugate_past_response_structure(client):
    response = client.post("/api/conjugate/past", json=KTB)
    assert response.status_code == 200
    data = response.json()
    assert data["root"] == ["ك", "ت", "ب"]
    assert data["tense"] == "past"
    assert len(data["conjugations"]) == 14
    assert data["conjugations"][0] == {"pronoun": "هو", "verb": "كَتَبَ"}
    assert [c["pronoun"] for c in data["conjugations"]] == [p.native_label for p in PRONOUN_TABLE]


def test_conjugate_present_keyed_by_label(client):
    response = client.post("/api/conjugate/present?keys=label", json=KTB)
    assert response.status_code == 200
    rows = response.json()["conjugations"]
    assert rows[0] == {"pronoun": "He", "verb": "يَكْتَبُ"}
    assert rows[12] == {"pronoun": "I", "verb": "أَكْتَبُ"}


@pytest.mark.parametrize("tense", ["past", "present"])
def test_conjugate_rejects_incomplete_root(client, tense):
    response = client.post(f"/api/conjugate/{tense}", json={"root": ["ك", "", "ب"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter all three root letters."


def test_invalid_root_is_mapped_by_the_route(settings):
    assert InvalidRootError not in create_app(settings).exception_handlers


def test_conjugate_requires_three_positions(client):
    response = client.post("/api/conjugate/past", json={"root": ["ك", "ت"]})
    assert response.status_code == 422


def test_conjugate_unknown_tense(client):
    response = client.post("/api/conjugate/future", json=KTB)
    assert response.status_code == 404


def test_preview_echoes_partial_root(client):
    response = client.post("/api/preview", json={"root": ["ك", "", ""]})
    assert response.status_code == 200
    assert response.json() == {"root": ["ك", "", ""]}


def test_preview_echoes_whitespace_unchanged(client):
    response = client.post("/api/preview", json={"root": [" ك", " ", "ب "]})
    assert response.json() == {"root": [" ك", " ", "ب "]}


def test_pronouns(client):
    data = client.get("/api/pronouns").json()
    assert len(data["pronouns"]) == 14
    assert data["pronouns"][12]["label"] == "I"
    assert data["pronouns"][12]["present_prefix"] == "أَ"


def test_irregular_catalogue(client):
    data = client.get("/api/irregular").json()
    assert [v["category"] for v in data["verbs"]] == ["hollow", "weak-final", "weak-initial", "doubled"]
    for verb in data["verbs"]:
        assert len(verb["conjugations"]) == 14
        assert verb["rule"]


def test_irregular_single(client):
    data = client.get("/api/irregular/hollow").json()
    assert data["root"] == ["ق", "و", "ل"]
    assert data["conjugations"][0] == {"pronoun": "He", "verb": "قَالَ"}


def test_irregular_native_keys(client):
    data = client.get("/api/irregular/weak-initial?keys=native").json()
    assert data["conjugations"][0]["pronoun"] == "هو"


def test_irregular_unknown(client):
    assert client.get("/api/irregular/quadriliteral").status_code == 404


# ============================================
# HTML PAGES
# ============================================

def test_index_shows_default_root_in_past_tense(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "Phase 1: Past Tense" in html
    assert "كَتَبَ" in html
    assert 'id="p1-output-table"' in html


def test_phase_two_with_typed_root(client):
    html = client.get("/phase/2", params={"r1": "د", "r2": "ر", "r3": "س"}).text
    assert "يَدْرَسُ" in html
    assert '"tense": "present"' in html.replace("&quot;", '"')


def test_phase_with_missing_letter_shows_notice(client):
    html = client.get("/phase/1", params={"r1": "ك", "r2": "", "r3": "ب"}).text
    assert "Please enter all three root letters." in html
    assert "<table" not in html
    # request preview still reflects what was typed
    assert '"ك"' in html.replace("&quot;", '"')


def test_phase_three_default_and_selected(client):
    html = client.get("/phase/3").text
    assert "[ ق, و, ل ]" in html
    assert "Hollow Verb" in html

    html = client.get("/phase/3", params={"type": "doubled"}).text
    assert "[ م, د, د ]" in html
    assert "Doubled Verb" in html


def test_phase_three_unknown_type(client):
    assert client.get("/phase/3", params={"type": "nope"}).status_code == 404


def test_unknown_phase(client):
    assert client.get("/phase/4").status_code == 404


def test_response_json_in_page_is_keyed_by_native_label(client):
    html = client.get("/phase/1").text.replace("&quot;", '"')
    start = html.index('id="p1-response-json">') + len('id="p1-response-json">')
    payload = json.loads(html[start:html.index("</pre>", start)])
    assert payload["tense"] == "past"
    assert payload["conjugations"][0]["pronoun"] == "هو"
