from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from pydantic import ValidationError

from models import (
    ExtractSkillsRequest,
    ExtractSkillsResponse,
    ScoreSkillsRequest,
    MatchRequest,
    MatchResponse,
    MatchResumesRequest,
    MatchResumesResponse,
    ResumeMatch,
    DocumentTextRequest,
    DocumentTextResponse,
    Settings,
)
from skillmatch import __version__, extract_skills, score, match_job_resume, MatchResult
from skillmatch.config import DISPLAY_SKILL_LIMIT
from skillmatch.documents import extract_document_text
from skillmatch.matcher import match_resume_entry, rank_matches


# Load environment from project root .env if present
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Skills Matching API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings() -> Settings:
    try:
        return Settings(
            model_name=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            max_concurrent_matches=int(os.getenv("MAX_CONCURRENT_MATCHES", "8")),
        )
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid server configuration: {e}")
        raise HTTPException(status_code=500, detail=f"Invalid server configuration: {str(e)}")


@app.get("/")
async def root():
    return {"status": "ok", "version": __version__}


@app.post("/api/skills/extract", response_model=ExtractSkillsResponse)
async def extract_skills_endpoint(request: ExtractSkillsRequest):
    skills = extract_skills(request.text)
    return ExtractSkillsResponse(skills=skills[:DISPLAY_SKILL_LIMIT], count=len(skills))


@app.post("/api/skills/score", response_model=MatchResult)
async def score_skills(request: ScoreSkillsRequest):
    return score(request.job_skills, request.resume_skills)


@app.post("/api/match", response_model=MatchResponse)
async def match(request: MatchRequest, settings: Settings = Depends(get_settings)):
    """
    Match one resume against one job description.

    The AI assessment is only attempted when include_summary is set; its
    failure never affects the returned percentage.
    """
    try:
        result = await asyncio.to_thread(
            match_job_resume,
            request.job_description,
            request.resume_text,
            job_skills=request.job_skills,
            resume_skills=request.resume_skills,
            job_title=request.job_title,
            candidate_name=request.candidate_name,
            summarize=request.include_summary,
            model_name=settings.model_name,
        )
    except Exception as e:
        logger.error(f"Matching failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Matching failed: {str(e)}")

    return MatchResponse(**result)


@app.post("/api/match-resumes", response_model=MatchResumesResponse)
async def match_resumes_endpoint(request: MatchResumesRequest, settings: Settings = Depends(get_settings)):
    """
    Rank resumes against one job description.

    Resumes are scored concurrently (bounded by max_concurrent_matches) and
    sorted by match percentage once all are done.
    """
    started = time.time()
    semaphore = asyncio.Semaphore(settings.max_concurrent_matches)

    async def run_one(resume) -> Dict[str, Any]:
        async with semaphore:
            return await asyncio.to_thread(
                match_resume_entry,
                request.job_description,
                resume.model_dump(),
                job_skills=request.job_skills,
                job_title=request.job_title,
                summarize=request.include_summary,
                model_name=settings.model_name,
            )

    results = rank_matches(await asyncio.gather(*[run_one(r) for r in request.resumes]))

    matches: List[ResumeMatch] = [
        ResumeMatch(
            rank=i,
            resume_id=result["resume_id"],
            candidate_name=result["candidate_name"],
            match_percentage=result["match_percentage"],
            matched_skills=result["matched_skills"],
            job_skill_count=result["job_skill_count"],
            resume_skill_count=result["resume_skill_count"],
            extracted_skills=result.get("resume_skills", [])[:DISPLAY_SKILL_LIMIT],
            ai_summary=result.get("ai_summary"),
            error=result.get("error"),
        )
        for i, result in enumerate(results, 1)
    ]

    logger.info(f"Processed {len(matches)} resumes for job {request.job_title or ''}".rstrip())
    return MatchResumesResponse(
        job_title=request.job_title,
        matches=matches,
        total_processed=len(request.resumes),
        processing_time=f"{time.time() - started:.2f}s",
    )


@app.post("/api/resumes/text", response_model=DocumentTextResponse)
async def resume_text(request: DocumentTextRequest):
    """Extract text and skills from a base64-encoded resume file."""
    try:
        data = base64.b64decode(request.content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 content: {str(e)}")

    document = await asyncio.to_thread(extract_document_text, request.filename, data)
    return DocumentTextResponse(
        filename=request.filename,
        text=document.text,
        error=document.error,
        skills=extract_skills(document.text)[:DISPLAY_SKILL_LIMIT],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
