"""
External integrations.

- pdf_parser: Extract text from PDF files
- google_jobs: Job listings via the Google Jobs API
"""

from backend.tools.google_jobs import clear_search_cache, search_jobs
from backend.tools.pdf_parser import parse_pdf

__all__ = ["parse_pdf", "search_jobs", "clear_search_cache"]
