"""
JSON extraction from free-text model output.

Handles various AI output formats:
- Clean JSON
- JSON in ```json blocks
- JSON in ```blocks (no language tag)
- JSON mixed with prose

Only the location of the JSON span happens here. Callers decide what a
missing span or an unparseable one means.
"""

import json
import re
from collections.abc import Iterator

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_FENCED_ANY = re.compile(r"```(?:\w*)\s*([\s\S]*?)\s*```")


def find_json_span(text: str) -> str | None:
    """
    Locate the JSON payload in a model response.

    Candidates are tried in order; the first one that parses wins. When none
    parses, the first candidate is returned so the caller can report it as
    malformed.

    Returns:
        The candidate JSON text, or None when the response has no JSON-shaped span
    """
    if not text or not text.strip():
        return None

    first = None
    for candidate in _candidates(text):
        if first is None:
            first = candidate
        if _parses(candidate):
            return candidate
    return first


def extract_json(text: str) -> dict | list | None:
    """Parse the JSON payload of a response, or None if there is none."""
    span = find_json_span(text)
    if span is None:
        return None
    try:
        return json.loads(span)
    except json.JSONDecodeError:
        return None


def _candidates(text: str) -> Iterator[str]:
    stripped = text.strip()
    if _looks_like_json(stripped):
        yield stripped

    for match in _FENCED_JSON.findall(text):
        yield match.strip()

    for match in _FENCED_ANY.findall(text):
        if _looks_like_json(match.strip()):
            yield match.strip()

    yield from _bracket_spans(text)


def _looks_like_json(text: str) -> bool:
    return text.startswith(("{", "["))


def _parses(text: str) -> bool:
    try:
        json.loads(text)
    except json.JSONDecodeError:
        return False
    return True


def _bracket_spans(text: str) -> Iterator[str]:
    """Yield each top-level bracketed span in order, skipping past balanced ones.

    Prose such as "the [Senior] role" yields a span that does not parse, so
    scanning continues after it. An unterminated span runs to the end of the
    text and ends the scan.
    """
    pos = 0
    while True:
        positions = [p for p in (text.find("{", pos), text.find("[", pos)) if p != -1]
        if not positions:
            return

        start = min(positions)
        open_char = text[start]
        close_char = "}" if open_char == "{" else "]"
        balanced = _extract_balanced(text, start, open_char, close_char)
        if balanced is None:
            # Unterminated: the response was cut off mid-object
            yield text[start:].strip()
            return
        yield balanced
        pos = start + len(balanced)


def _extract_balanced(text: str, start: int, open_char: str, close_char: str) -> str | None:
    """Extract balanced brackets/braces starting from position."""
    depth = 0
    in_string = False
    escape_next = False

    for i, char in enumerate(text[start:], start):
        if escape_next:
            escape_next = False
            continue

        if char == '\\' and in_string:
            escape_next = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None
