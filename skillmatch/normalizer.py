"""
Skill Normalizer

Maps raw or aliased skill strings to their canonical display form.
"""

from typing import Iterable, List

from .dictionary import alias_for


def normalize(token: str) -> str:
    """
    Normalize a skill name to its canonical form.

    Known aliases resolve through the dictionary ("k8s" -> "Kubernetes").
    Anything else gets its first letter capitalized and the rest lowercased.
    The result is stable under repeated normalization.
    """
    skill_lower = (token or "").strip().lower()
    canonical = alias_for(skill_lower)
    if canonical is not None:
        return canonical
    # "ß" -> "Ss", not "SS"
    return skill_lower[:1].title() + skill_lower[1:]


def normalize_all(tokens: Iterable[str]) -> List[str]:
    """Normalize a collection of skills, dropping blanks and duplicates (order kept)."""
    normalized = (normalize(token) for token in tokens)
    return list(dict.fromkeys(skill for skill in normalized if skill))
