"""
Document text extraction for uploaded resumes (PDF, DOCX, TXT).

Unreadable documents never raise: they come back as PLACEHOLDER_TEXT with
an error message, and skill extraction degrades to few or no skills.
"""

import io
import logging
import re
from pathlib import Path
from typing import Optional

import docx
import pdfplumber
from pydantic import BaseModel

from .config import PLACEHOLDER_TEXT

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


class ExtractedDocument(BaseModel):
    text: str
    error: Optional[str] = None


def clean_text(text: str) -> str:
    # Keep line breaks: bullet and section scans rely on them
    lines = (re.sub(r"[ \t]+", " ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def extract_pdf_text(data: bytes) -> str:
    pages = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
    return "\n".join(pages)


def extract_docx_text(data: bytes) -> str:
    document = docx.Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_document_text(filename: str, data: bytes) -> ExtractedDocument:
    """
    Extract plain text from an uploaded resume.

    Args:
        filename: Original file name, used to pick the parser
        data: Raw file bytes

    Returns:
        ExtractedDocument; on failure text is PLACEHOLDER_TEXT and error is set
    """
    ext = Path(filename or "").suffix.lower()

    if ext not in SUPPORTED_EXTENSIONS:
        logger.warning(f"Unsupported document type for {filename!r}")
        return ExtractedDocument(text=PLACEHOLDER_TEXT, error=f"Unsupported file type: {ext or 'none'}")

    try:
        if ext == ".pdf":
            text = extract_pdf_text(data)
        elif ext == ".docx":
            text = extract_docx_text(data)
        else:
            text = data.decode("utf-8", errors="replace")
    except Exception as e:
        logger.error(f"Text extraction failed for {filename!r}: {e}", exc_info=True)
        return ExtractedDocument(text=PLACEHOLDER_TEXT, error=f"Failed to extract text: {e}")

    text = clean_text(text)
    if not text:
        logger.warning(f"No text found in {filename!r}")
        return ExtractedDocument(text=PLACEHOLDER_TEXT, error="No readable text found in document")

    logger.info(f"Extracted {len(text)} characters from {filename!r}")
    return ExtractedDocument(text=text)
