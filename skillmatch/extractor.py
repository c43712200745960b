"""
Skill Extraction Module

Finds known skills in free-form job description or resume text.
Three deterministic passes, unioned through the normalizer:
1. Whole-word dictionary scan over the full text
2. Section patterns ("Skills: ...", "proficient in ...")
3. Bullet lines, also accepting compact spellings ("nodejs", "springboot")

No AI/LLM is used in this module.
"""

import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from .config import SECTION_TOKEN_LENGTH
from .dictionary import ALL_SKILL_TOKENS
from .normalizer import normalize_all

logger = logging.getLogger(__name__)

# Applied in this order; each captures the rest of the line after the header.
# The header form also accepts a list that starts on the following line.
SECTION_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(
        r"\b(?:technical skills?|skills?|technologies|technology|tech stack|expertise)"
        r"[ \t]*:[ \t]*\n?([^\n]+)"
    ),
    re.compile(
        r"\b(?:proficient in|experienced with|knowledge of|familiar with|worked with)"
        r"[ \t:]+([^\n]+)"
    ),
)

SEGMENT_SPLIT = re.compile(r"[,;|&\n]")

BULLET_LINE = re.compile(r"^[ \t]*[•▪▫◦●*\-][ \t]*(.+)$", re.MULTILINE)


def _word_pattern(token: str) -> Pattern:
    # A "." before the token or ".x" after it means the token is part of a
    # dotted name ("node.js" must not yield "js")
    return re.compile(r"(?<![\w.])" + re.escape(token) + r"(?!\w|\.\w)")


def _compact_variants(token: str) -> List[str]:
    variants = []
    for variant in (token.replace(".", ""), token.replace(" ", "")):
        if variant and variant != token and variant not in variants:
            variants.append(variant)
    return variants


_TOKEN_PATTERNS: Dict[str, Pattern] = {token: _word_pattern(token) for token in ALL_SKILL_TOKENS}

_VARIANT_PATTERNS: Dict[str, Tuple[Pattern, ...]] = {
    token: tuple(_word_pattern(variant) for variant in _compact_variants(token))
    for token in ALL_SKILL_TOKENS
}


def scan_dictionary(text_lower: str) -> List[str]:
    """Return dictionary tokens occurring as whole words in lowercased text."""
    return [token for token, pattern in _TOKEN_PATTERNS.items() if pattern.search(text_lower)]


def resolve_candidate(candidate: str) -> Optional[str]:
    """
    Resolve a captured section candidate to a dictionary token.

    Exact entry first, otherwise the first entry in catalog order that
    contains, or is contained by, the candidate.
    """
    if candidate in _TOKEN_PATTERNS:
        return candidate

    for token in ALL_SKILL_TOKENS:
        if token in candidate or candidate in token:
            return token

    return None


def scan_sections(text_lower: str) -> List[str]:
    """Return dictionary tokens named inside "Skills:"-style sections."""
    found: List[str] = []
    min_len = SECTION_TOKEN_LENGTH["min"]
    max_len = SECTION_TOKEN_LENGTH["max"]

    for pattern in SECTION_PATTERNS:
        for match in pattern.finditer(text_lower):
            segment = match.group(1)
            for raw in SEGMENT_SPLIT.split(segment):
                candidate = raw.strip().rstrip(".").strip()
                if not (min_len <= len(candidate) <= max_len):
                    continue
                token = resolve_candidate(candidate)
                if token is not None:
                    logger.debug(f"Section candidate '{candidate}' -> '{token}'")
                    found.append(token)

    return found


def scan_bullets(text_lower: str) -> List[str]:
    """Return dictionary tokens found in bullet-list lines, including compact spellings."""
    found: List[str] = []
    for match in BULLET_LINE.finditer(text_lower):
        bullet = match.group(1)
        for token, pattern in _TOKEN_PATTERNS.items():
            if pattern.search(bullet) or any(v.search(bullet) for v in _VARIANT_PATTERNS[token]):
                found.append(token)
    return found


def extract_skills(text: Optional[str]) -> List[str]:
    """
    Extract canonical skills from free text.

    Args:
        text: Job description or resume text (may be empty or None)

    Returns:
        Deduplicated canonical skill names, in discovery order.
        Empty or whitespace-only text yields an empty list.
    """
    if not text or not text.strip():
        return []

    text_lower = text.lower()

    direct = scan_dictionary(text_lower)
    sections = scan_sections(text_lower)
    bullets = scan_bullets(text_lower)

    skills = normalize_all(direct + sections + bullets)
    logger.debug(
        f"Extracted {len(skills)} skills (direct={len(direct)}, "
        f"sections={len(sections)}, bullets={len(bullets)})"
    )
    return skills
