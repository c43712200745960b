"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
No AI/LLM is used in this module.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import EMPTY_JOB_FALLBACK, FUZZY_MATCH_THRESHOLD
from .fuzzy import levenshtein_distance
from .normalizer import normalize_all

logger = logging.getLogger(__name__)


class MatchResult(BaseModel):
    """Skills match between one job and one resume. Immutable."""
    model_config = ConfigDict(frozen=True)

    match_percentage: int = Field(ge=0, le=100)
    matched_skills: Tuple[str, ...] = ()
    job_skill_count: int = Field(default=0, ge=0)
    resume_skill_count: int = Field(default=0, ge=0)


def skills_match(job_skill: str, resume_skill: str) -> bool:
    """
    Check whether two canonical skills denote the same skill.

    Accepts a case-insensitive exact match, a substring in either direction,
    or an edit distance within FUZZY_MATCH_THRESHOLD.
    """
    job_lower = job_skill.lower()
    resume_lower = resume_skill.lower()
    return (
        job_lower == resume_lower
        or job_lower in resume_lower
        or resume_lower in job_lower
        or levenshtein_distance(resume_lower, job_lower) <= FUZZY_MATCH_THRESHOLD
    )


def find_matching_skill(job_skill: str, resume_skills: List[str]) -> Optional[str]:
    """Return the first resume skill equivalent to job_skill, if any."""
    for resume_skill in resume_skills:
        if skills_match(job_skill, resume_skill):
            return resume_skill
    return None


def round_half_up(numerator: int, denominator: int) -> int:
    """Round 100 * numerator / denominator to the nearest integer, halves up."""
    return (200 * numerator + denominator) // (2 * denominator)


def calculate_fallback_percentage(resume_skill_count: int) -> int:
    """
    Percentage used when the job yields no skills to compare against.

    Signals "some skills present" without claiming a real match.
    """
    if resume_skill_count == 0:
        return 0
    return min(EMPTY_JOB_FALLBACK["cap"], EMPTY_JOB_FALLBACK["per_skill"] * resume_skill_count)


def score(job_skills: Iterable[str], resume_skills: Iterable[str]) -> MatchResult:
    """
    Calculate the skills match percentage (0-100) between a job and a resume.

    Formula:
    - Both inputs normalized and de-duplicated first
    - No job skills: fallback heuristic on resume skill count
    - No resume skills: 0
    - Otherwise: round(100 * matched_job_skills / total_job_skills)

    Args:
        job_skills: Skills required by the job
        resume_skills: Skills found on the resume

    Returns:
        MatchResult with percentage, matched job skills and counts
    """
    job_set = normalize_all(job_skills)
    resume_set = normalize_all(resume_skills)

    if not job_set:
        percentage = calculate_fallback_percentage(len(resume_set))
        logger.debug(f"No job skills, fallback score = {percentage}% for {len(resume_set)} resume skills")
        return MatchResult(
            match_percentage=percentage,
            matched_skills=(),
            job_skill_count=0,
            resume_skill_count=len(resume_set),
        )

    if not resume_set:
        logger.debug("No resume skills, score = 0%")
        return MatchResult(
            match_percentage=0,
            matched_skills=(),
            job_skill_count=len(job_set),
            resume_skill_count=0,
        )

    matched: List[str] = []
    for job_skill in job_set:
        resume_skill = find_matching_skill(job_skill, resume_set)
        if resume_skill is not None:
            logger.debug(f"Job skill '{job_skill}' matched by '{resume_skill}'")
            matched.append(job_skill)

    percentage = max(0, min(100, round_half_up(len(matched), len(job_set))))
    logger.info(f"Skills match: {len(matched)}/{len(job_set)} = {percentage}%")

    return MatchResult(
        match_percentage=percentage,
        matched_skills=tuple(matched),
        job_skill_count=len(job_set),
        resume_skill_count=len(resume_set),
    )
