#!/usr/bin/env python3
"""Tests for the tasrif command-line interface."""

import json

from tasrif.cli import EXIT_INVALID_INPUT, format_table, main


def test_past_table_with_three_letters(capsys):
    assert main(['past', 'ك', 'ت', 'ب']) == 0
    out = capsys.readouterr().out
    assert 'كَتَبَ' in out
    assert 'They (dual, m)' in out
    assert '[ ك, ت, ب ]' in out


def test_present_native_keys(capsys):
    assert main(['present', 'كتب', '--native']) == 0
    out = capsys.readouterr().out
    assert 'أنا' in out
    assert 'أَكْتَبُ' in out


def test_json_output(capsys):
    assert main(['past', 'ك-ت-ب', '--json']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['tense'] == 'past'
    assert len(data['conjugations']) == 14
    assert data['conjugations'][0] == {'pronoun': 'هو', 'verb': 'كَتَبَ'}


def test_invalid_root_exit_status(capsys):
    assert main(['past', 'ك', 'ت']) == EXIT_INVALID_INPUT
    assert 'Please enter all three root letters.' in capsys.readouterr().err


def test_irregular_listing(capsys):
    assert main(['irregular']) == 0
    out = capsys.readouterr().out
    for category in ('hollow', 'weak-final', 'weak-initial', 'doubled'):
        assert category in out


def test_irregular_single(capsys):
    assert main(['irregular', 'hollow']) == 0
    out = capsys.readouterr().out
    assert 'Hollow Verb' in out
    assert 'قُلْتُ' in out


def test_irregular_unknown(capsys):
    assert main(['irregular', 'nope']) == EXIT_INVALID_INPUT
    assert 'nope' in capsys.readouterr().err


def test_pronouns(capsys):
    assert main(['pronouns']) == 0
    out = capsys.readouterr().out
    assert len(out.strip().splitlines()) == 14


def test_format_table_aligns_columns():
    text = format_table([('He', 'X'), ('They (m. pl)', 'Z')])
    first, second = text.splitlines()
    assert first.index('X') == second.index('Z')
