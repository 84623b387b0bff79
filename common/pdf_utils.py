# SPDX-License-Identifier: AGPL-3.0-only

"""
PDF utility functions for text extraction.
"""
from typing import BinaryIO, List, Union

import PyPDF2

from common.errors import PdfExtractionError

PdfSource = Union[str, BinaryIO]


def _open_reader(source: PdfSource) -> PyPDF2.PdfReader:
    try:
        return PyPDF2.PdfReader(source)
    except Exception as e:
        raise PdfExtractionError(f"Failed to read PDF: {str(e)}") from e


def extract_text_by_page(source: PdfSource) -> List[str]:
    """Extract text from each page separately. Accepts a path or a binary stream."""
    reader = _open_reader(source)
    pages = []
    try:
        for page in reader.pages:
            pages.append(page.extract_text() or "")
    except Exception as e:
        raise PdfExtractionError(f"Failed to extract pages from PDF: {str(e)}") from e
    return pages


def join_pages(pages: List[str]) -> str:
    """Join page texts the way the reader UI expects: each page followed by a blank line."""
    return "".join(page + "\n\n" for page in pages)


def extract_text_from_pdf(source: PdfSource) -> str:
    """Extract all text from a PDF file."""
    return join_pages(extract_text_by_page(source))
