"""Utility modules."""

from .parser import extract_json, find_json_span

__all__ = ["extract_json", "find_json_span"]
