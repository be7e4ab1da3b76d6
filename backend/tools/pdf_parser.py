"""
PDF parsing for résumé uploads.

Extracts text content from PDF files using pypdf.
"""

import logging
from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from backend.errors import BadRequest

logger = logging.getLogger(__name__)


def parse_pdf(pdf_content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages

    Raises:
        BadRequest: the bytes are not a readable PDF
    """
    try:
        reader = PdfReader(BytesIO(pdf_content))
        text_parts = []

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

    except PdfReadError as e:
        logger.warning("Unreadable PDF upload: %s", e)
        raise BadRequest("Could not read the PDF file") from e

    return "\n\n".join(text_parts)
