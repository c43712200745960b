"""
Skills Matching Engine

This package scores resumes against job descriptions by skills:
1. Dictionary and pattern based skill extraction from free text
2. Normalization of skill name variants ("js" -> "JavaScript")
3. Deterministic scoring with exact, substring and fuzzy (Levenshtein) matching

Usage:
    from skillmatch import extract_skills, score

    result = score(extract_skills(job_text), extract_skills(resume_text))
    print(f"Match: {result.match_percentage}%")
"""

from .extractor import extract_skills
from .fuzzy import levenshtein_distance
from .matcher import match_job_resume, match_resumes
from .normalizer import normalize
from .scoring_engine import MatchResult, score

__all__ = [
    "extract_skills",
    "normalize",
    "levenshtein_distance",
    "score",
    "MatchResult",
    "match_job_resume",
    "match_resumes",
]
__version__ = "1.0.0"
