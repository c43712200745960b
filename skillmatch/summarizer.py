"""
Assessment Summarizer

Uses PhiData + OpenAI to write a short recruiter-style assessment of a
candidate against a job. Advisory only: the match percentage never depends
on it, and callers are expected to fall back to default_assessment().
"""

import logging
import os
from typing import Any, Dict, List, Optional

from phi.agent import Agent
from phi.model.openai import OpenAIChat

from .config import SUMMARY_CONFIG

logger = logging.getLogger(__name__)


def get_model_config(model_name: str, temperature: float, max_tokens: int) -> Dict[str, Any]:
    """
    Get model configuration with temperature support check.
    Some models don't support custom temperature.
    """
    config: Dict[str, Any] = {"id": model_name, "max_tokens": max_tokens}

    # Models that don't support temperature customization
    models_without_temperature = ["o1", "o1-mini", "o1-preview", "gpt-5-mini", "gpt-5"]

    model_lower = model_name.lower()
    supports_temperature = not any(no_temp in model_lower for no_temp in models_without_temperature)

    if supports_temperature:
        config["temperature"] = temperature

    return config


def summarizer_available() -> bool:
    """True when an OpenAI key is configured for the assessment agent."""
    return bool(os.getenv("OPENAI_API_KEY"))


def default_assessment(match_percentage: int) -> str:
    return f"{match_percentage}% match based on skills analysis."


def build_assessment_agent(model_name: Optional[str] = None) -> Agent:
    """Build PhiData agent that writes the candidate-job assessment."""
    model_name = model_name or SUMMARY_CONFIG["model"]
    model_config = get_model_config(
        model_name,
        temperature=SUMMARY_CONFIG["temperature"],
        max_tokens=SUMMARY_CONFIG["max_tokens"],
    )

    return Agent(
        name="Candidate Assessor",
        role="Assess candidate-job fit for a recruiter",
        model=OpenAIChat(**model_config),
        instructions=[
            "You are an expert recruiter.",
            "Analyze candidate-job fit and provide a concise 2-3 sentence assessment.",
            "Focus on key strengths, alignment, and any notable gaps.",
            "Use ONLY the provided data - do NOT invent skills or experience.",
            "Return plain text, no markdown.",
        ],
        markdown=False,
    )


def build_assessment_prompt(
    job_title: Optional[str],
    job_description: Optional[str],
    candidate_name: Optional[str],
    experience_years: int,
    education: List[str],
    skills: List[str],
    match_percentage: int,
) -> str:
    description = (job_description or "")[:SUMMARY_CONFIG["job_description_chars"]] or "Not specified"
    top_skills = ", ".join(skills[:SUMMARY_CONFIG["top_skills"]])

    return f"""Job: {job_title or 'Untitled role'}
Requirements: {description}

Candidate: {candidate_name or 'Candidate'}
Experience: {experience_years} years
Education: {', '.join(education)}
Skills: {top_skills}
Match: {match_percentage}%

Provide assessment:"""


def generate_assessment(
    job_title: Optional[str],
    job_description: Optional[str],
    candidate_name: Optional[str],
    experience_years: int,
    education: List[str],
    skills: List[str],
    match_percentage: int,
    model_name: Optional[str] = None,
) -> str:
    """
    Ask the LLM for a short assessment of the candidate.

    Returns:
        Assessment text

    Raises:
        RuntimeError: If no API key is configured or the model returns nothing
    """
    if not summarizer_available():
        raise RuntimeError("OPENAI_API_KEY not set")

    agent = build_assessment_agent(model_name)
    prompt = build_assessment_prompt(
        job_title, job_description, candidate_name,
        experience_years, education, skills, match_percentage,
    )

    response = agent.run(prompt)
    text = str(getattr(response, "content", "") or "").strip()
    if not text:
        raise RuntimeError("Empty assessment returned by model")

    logger.debug(f"Assessment: {text[:200]}")
    return text
