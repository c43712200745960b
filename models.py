from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, validator, ConfigDict


class ExtractSkillsRequest(BaseModel):
    text: str = Field(default="", description="Job description or resume text")


class ExtractSkillsResponse(BaseModel):
    skills: List[str] = Field(default_factory=list)
    count: int = 0


class ScoreSkillsRequest(BaseModel):
    job_skills: List[str] = Field(default_factory=list)
    resume_skills: List[str] = Field(default_factory=list)


class MatchRequest(BaseModel):
    job_description: str = ""
    resume_text: str = ""
    job_title: Optional[str] = None
    job_skills: List[str] = Field(
        default_factory=list,
        description="Skills explicitly listed on the job posting"
    )
    resume_skills: List[str] = Field(
        default_factory=list,
        description="Skills already parsed from the resume"
    )
    candidate_name: Optional[str] = None
    include_summary: bool = False


class MatchResponse(BaseModel):
    match_percentage: int = Field(ge=0, le=100)
    matched_skills: List[str] = Field(default_factory=list)
    job_skill_count: int = 0
    resume_skill_count: int = 0
    job_skills: List[str] = Field(default_factory=list)
    resume_skills: List[str] = Field(default_factory=list)
    experience_years: int = 0
    education: List[str] = Field(default_factory=list)
    ai_summary: Optional[str] = None


class ResumeInput(BaseModel):
    resume_id: str
    text: str = ""
    name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class MatchResumesRequest(BaseModel):
    job_description: str = ""
    job_title: Optional[str] = None
    job_skills: List[str] = Field(default_factory=list)
    resumes: List[ResumeInput] = Field(default_factory=list)
    include_summary: bool = False

    @validator("resumes")
    def validate_resumes(cls, v: List[ResumeInput]) -> List[ResumeInput]:
        if len(v) > 200:
            raise ValueError("A maximum of 200 resumes is allowed")
        return v


class ResumeMatch(BaseModel):
    rank: int
    resume_id: str
    candidate_name: str = "Unknown"
    match_percentage: int = Field(ge=0, le=100)
    matched_skills: List[str] = Field(default_factory=list)
    job_skill_count: int = 0
    resume_skill_count: int = 0
    extracted_skills: List[str] = Field(default_factory=list)
    ai_summary: Optional[str] = None
    error: Optional[str] = None


class MatchResumesResponse(BaseModel):
    job_title: Optional[str] = None
    matches: List[ResumeMatch]
    total_processed: int
    processing_time: str


class DocumentTextRequest(BaseModel):
    filename: str
    content: str = Field(..., description="Base64-encoded file content")


class DocumentTextResponse(BaseModel):
    filename: str
    text: str
    error: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class Settings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())
    model_name: str = "gpt-4o-mini"
    max_concurrent_matches: int = Field(default=8, ge=1)
