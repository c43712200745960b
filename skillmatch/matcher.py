"""
Main Matcher Module

Orchestrates the complete matching process:
1. Extract skills from job and resume text
2. Calculate the deterministic skills match
3. Optionally add an AI assessment and hand results to a store

Failures in the advisory steps (assessment, persistence) are logged and
isolated; they never prevent the match percentage from being returned.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .config import SUMMARY_CONFIG
from .extractor import extract_skills
from .profile import build_profile
from .scoring_engine import score
from .summarizer import default_assessment, generate_assessment, summarizer_available

logger = logging.getLogger(__name__)


class MatchStore(Protocol):
    """Persistence collaborator keyed by (user, job, resume)."""

    def save_match_result(
        self, user_id: Optional[str], job_id: Optional[str], resume_id: Optional[str], result: Dict[str, Any]
    ) -> Any:
        ...


def combine_skills(*sources: Optional[Iterable[str]]) -> List[str]:
    """Union of skill lists, first occurrence wins."""
    combined: Dict[str, None] = {}
    for source in sources:
        for skill in source or []:
            if skill and skill.strip():
                combined.setdefault(skill, None)
    return list(combined)


def assess_candidate(
    match_percentage: int,
    job_title: Optional[str],
    job_description: Optional[str],
    candidate_name: Optional[str],
    experience_years: int,
    education: List[str],
    skills: List[str],
    model_name: Optional[str] = None,
) -> str:
    """
    Return an AI assessment for promising candidates, or the default text.

    Never raises: any summarizer failure falls back to default_assessment().
    """
    if match_percentage < SUMMARY_CONFIG["min_match_percentage"] or not summarizer_available():
        return default_assessment(match_percentage)

    try:
        return generate_assessment(
            job_title, job_description, candidate_name,
            experience_years, education, skills, match_percentage,
            model_name=model_name,
        )
    except Exception as e:
        logger.warning(f"Assessment generation failed, using default: {e}", exc_info=True)
        return default_assessment(match_percentage)


def match_job_resume(
    job_description: str,
    resume_text: str,
    job_skills: Optional[List[str]] = None,
    resume_skills: Optional[List[str]] = None,
    job_title: Optional[str] = None,
    candidate_name: Optional[str] = None,
    summarize: bool = False,
    model_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Calculate the skills match between a job and a resume.

    This is the main entry point for the matching system. It:
    1. Extracts skills from both texts (plus any explicitly listed skills)
    2. Scores the job skills against the resume skills
    3. Optionally asks the LLM for a short assessment

    Args:
        job_description: Full job description text
        resume_text: Full resume text (may be a placeholder for unreadable files)
        job_skills: Skills explicitly listed on the job, if any
        resume_skills: Skills already parsed from the resume, if any
        job_title: Job title for the assessment prompt
        candidate_name: Candidate name for the assessment prompt
        summarize: Whether to request an AI assessment
        model_name: Optional model name override for the assessment

    Returns:
        {
            "match_percentage": int (0-100),
            "matched_skills": [str],
            "job_skill_count": int,
            "resume_skill_count": int,
            "job_skills": [str],
            "resume_skills": [str],
            "experience_years": int,
            "education": [str],
            "ai_summary": str or None
        }

    Example:
        >>> result = match_job_resume(job_desc, resume_text)
        >>> print(f"Match: {result['match_percentage']}%")
    """
    logger.info("=" * 60)
    logger.info("STARTING SKILLS MATCHING")
    logger.info("=" * 60)

    # Step 1: Extract skills
    all_job_skills = combine_skills(extract_skills(job_description), job_skills)
    all_resume_skills = combine_skills(resume_skills, extract_skills(resume_text))
    logger.info(f"Job: {len(all_job_skills)} skills, Resume: {len(all_resume_skills)} skills")
    logger.debug(f"Job skills: {all_job_skills}")
    logger.debug(f"Resume skills: {all_resume_skills}")

    # Step 2: Score
    match = score(all_job_skills, all_resume_skills)

    profile = build_profile(resume_text, name=candidate_name, skills=all_resume_skills)

    result: Dict[str, Any] = {
        **match.model_dump(),
        "matched_skills": list(match.matched_skills),
        "job_skills": all_job_skills,
        "resume_skills": profile.skills,
        "experience_years": profile.experience_years,
        "education": profile.education,
        "ai_summary": None,
    }

    # Step 3: Advisory assessment
    if summarize:
        result["ai_summary"] = assess_candidate(
            match.match_percentage,
            job_title,
            job_description,
            profile.name,
            profile.experience_years,
            profile.education,
            profile.skills,
            model_name=model_name,
        )

    logger.info(f"MATCHING COMPLETE - Score: {result['match_percentage']}%")
    return result


def save_result(
    store: Optional[MatchStore],
    user_id: Optional[str],
    job_id: Optional[str],
    resume_id: Optional[str],
    result: Dict[str, Any],
) -> bool:
    """Hand a result to the store. Returns False (and logs) on failure."""
    if store is None:
        return False
    try:
        store.save_match_result(user_id, job_id, resume_id, result)
        return True
    except Exception as e:
        logger.error(f"Failed to store match for resume {resume_id}: {e}", exc_info=True)
        return False


def match_resume_entry(
    job_description: str,
    resume: Dict[str, Any],
    job_skills: Optional[List[str]] = None,
    job_title: Optional[str] = None,
    summarize: bool = False,
    model_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Match one resume record ({"resume_id", "text", "skills", "name", ...}).

    Per-resume failures are returned as a 0% entry with an "error" key.
    """
    resume_id = resume.get("resume_id")
    try:
        result = match_job_resume(
            job_description,
            resume.get("text") or "",
            job_skills=job_skills,
            resume_skills=resume.get("skills"),
            job_title=job_title,
            candidate_name=resume.get("name"),
            summarize=summarize,
            model_name=model_name,
        )
    except Exception as e:
        logger.error(f"Failed to match resume {resume_id}: {e}", exc_info=True)
        result = {
            "match_percentage": 0,
            "matched_skills": [],
            "job_skill_count": 0,
            "resume_skill_count": 0,
            "error": str(e),
        }

    result["resume_id"] = resume_id
    result["candidate_name"] = resume.get("name") or "Unknown"
    return result


def rank_matches(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort match results by match_percentage (highest first)."""
    return sorted(results, key=lambda x: x.get("match_percentage", 0), reverse=True)


def match_resumes(
    job_description: str,
    resumes: List[Dict[str, Any]],
    job_skills: Optional[List[str]] = None,
    job_title: Optional[str] = None,
    summarize: bool = False,
    model_name: Optional[str] = None,
    store: Optional[MatchStore] = None,
    user_id: Optional[str] = None,
    job_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Match every resume against one job.

    Args:
        job_description: Job description text
        resumes: Resume records with "resume_id", "text" and optional "skills"/"name"
        job_skills: Skills explicitly listed on the job
        job_title: Job title for assessments
        summarize: Whether to request AI assessments
        model_name: Optional model name override
        store: Optional persistence collaborator
        user_id: Owner of the job/resumes, passed to the store
        job_id: Job identifier, passed to the store

    Returns:
        List of match results, sorted by match_percentage (highest first)
    """
    logger.info(f"Matching {len(resumes)} resumes against job {job_id or job_title or ''}".rstrip())

    results = []
    for i, resume in enumerate(resumes, 1):
        logger.info(f"Processing resume {i}/{len(resumes)}")
        result = match_resume_entry(
            job_description, resume,
            job_skills=job_skills,
            job_title=job_title,
            summarize=summarize,
            model_name=model_name,
        )
        if "error" not in result:
            save_result(store, user_id, job_id, result["resume_id"], result)
        results.append(result)

    results = rank_matches(results)

    if results:
        logger.info(f"Completed matching {len(results)} resumes, top match: {results[0]['match_percentage']}%")
    return results
