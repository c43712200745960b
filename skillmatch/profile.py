"""
Candidate profile heuristics: experience years and education mentions
pulled from raw resume text.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field

from .config import EXPERIENCE_YEARS_CAP
from .extractor import extract_skills

EXPERIENCE_PATTERNS = (
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)\b", re.IGNORECASE),
    re.compile(r"(?:experience|exp)\b[^\n]*?(\d+)\+?\s*(?:years?|yrs?)\b", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\b[^\n]*?(?:experience|exp)\b", re.IGNORECASE),
)

EDUCATION_PATTERNS = (
    re.compile(r"(bachelor'?s?(?:\s+(?:of|in))?(?:\s+(?:science|arts|engineering|computer\s+science))?)", re.IGNORECASE),
    re.compile(r"(master'?s?(?:\s+(?:of|in))?(?:\s+(?:science|arts|engineering|computer\s+science|business\s+administration))?)", re.IGNORECASE),
    re.compile(r"\b(ph\.?d|doctorate|doctoral)\b", re.IGNORECASE),
    re.compile(r"(associate'?s?\s+degree)", re.IGNORECASE),
    re.compile(r"\b(diploma|certificate)\b", re.IGNORECASE),
)


class CandidateProfile(BaseModel):
    name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience_years: int = 0
    education: List[str] = Field(default_factory=list)


def extract_experience_years(text: Optional[str]) -> int:
    """Largest plausible "N years of experience" figure in the text, 0 if none."""
    if not text:
        return 0

    years = 0
    for pattern in EXPERIENCE_PATTERNS:
        for match in pattern.finditer(text):
            value = int(match.group(1))
            if years < value <= EXPERIENCE_YEARS_CAP:
                years = value
    return years


def extract_education(text: Optional[str]) -> List[str]:
    """Degree mentions in pattern order, de-duplicated case-insensitively."""
    if not text:
        return []

    found = {}
    for pattern in EDUCATION_PATTERNS:
        for match in pattern.finditer(text):
            degree = " ".join(match.group(1).split())
            found.setdefault(degree.lower(), degree)
    return list(found.values())


def build_profile(
    text: Optional[str], name: Optional[str] = None, skills: Optional[List[str]] = None
) -> CandidateProfile:
    """Profile of one resume. Pass skills to reuse an earlier extraction."""
    return CandidateProfile(
        name=name,
        skills=extract_skills(text) if skills is None else list(skills),
        experience_years=extract_experience_years(text),
        education=extract_education(text),
    )
