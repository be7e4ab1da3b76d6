"""
Tests for JSON extraction from free-text model output.

Usage: pytest scripts/test_extraction.py
"""

import json

import pytest

from backend.utils.parser import extract_json, find_json_span


def test_clean_json():
    assert extract_json('{"a": 1}') == {"a": 1}


def test_fenced_json_block():
    text = 'Here is the guide:\n```json\n{"tips": []}\n```\nGood luck!'
    assert find_json_span(text) == '{"tips": []}'


def test_fenced_block_without_language():
    text = "Result:\n```\n[1, 2, 3]\n```"
    assert extract_json(text) == [1, 2, 3]


def test_json_embedded_in_prose():
    text = 'Sure! {"name": "Acme", "tags": ["a", "b"]} Let me know.'
    assert extract_json(text) == {"name": "Acme", "tags": ["a", "b"]}


def test_braces_inside_strings_do_not_end_the_span():
    text = 'Answer: {"answer": "use {curly} braces and a \\"quote\\" }", "n": 1} trailing }'
    assert extract_json(text) == {"answer": 'use {curly} braces and a "quote" }', "n": 1}


def test_first_parsable_candidate_wins():
    text = 'See note [1]. ```json\n{"ok": true}\n```'
    assert extract_json(text) == {"ok": True}


def test_no_json_returns_none():
    assert find_json_span("I cannot help with that request.") is None
    assert find_json_span("") is None


def test_truncated_object_is_returned_as_span():
    span = find_json_span('Here you go: {"tips": [{"title": "Prepare"')
    assert span is not None
    assert span.startswith('{"tips"')
    with pytest.raises(json.JSONDecodeError):
        json.loads(span)
    assert extract_json('{"tips": [') is None


def test_bracketed_prose_before_json_is_skipped():
    payload = {"tips": [{"title": "Prepare", "description": "Read the job post."}]}
    text = "Guide for the [Senior] role:\n" + json.dumps(payload)

    assert find_json_span(text) == json.dumps(payload)
    assert extract_json(text) == payload


def test_unparsable_prose_span_is_reported_when_nothing_parses():
    assert find_json_span("Guide for the [Senior] role: {not json}") == "[Senior]"
