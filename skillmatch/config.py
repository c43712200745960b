"""
Configuration for the skills matching engine.
Adjust thresholds and parameters here.
"""

# Maximum Levenshtein distance for two skills to count as the same skill
FUZZY_MATCH_THRESHOLD = 2

# Fallback used when a job yields no skills at all:
# min(cap, per_skill * resume_skill_count)
EMPTY_JOB_FALLBACK = {
    "per_skill": 10,
    "cap": 50,
}

# Length bounds (inclusive) for candidates captured by section patterns
SECTION_TOKEN_LENGTH = {
    "min": 2,
    "max": 50,
}

# Callers truncate extracted skills to this many entries for display
DISPLAY_SKILL_LIMIT = 25

# Experience figures above this are treated as noise (phone numbers, dates)
EXPERIENCE_YEARS_CAP = 50

# Text handed back by the document collaborator when a file is unreadable
PLACEHOLDER_TEXT = "document could not be processed"

# Advisory assessment (LLM) configuration
SUMMARY_CONFIG = {
    "model": "gpt-4o-mini",
    "temperature": 0.3,
    "max_tokens": 150,
    "min_match_percentage": 50,  # Only summarize promising candidates
    "job_description_chars": 500,
    "top_skills": 10,
}
