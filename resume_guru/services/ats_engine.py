"""
Heuristic ATS match score.

A rough estimate of how an applicant tracking system might rate a resume,
not a replacement for a real ATS.
"""
import math
import re
from typing import List, Optional

BASE_SCORE = 20
MAX_SCORE = 100

ACTION_VERBS = [
    "managed", "led", "developed", "created", "implemented",
    "achieved", "increased", "reduced", "negotiated", "launched",
]
MAX_ACTION_VERBS = 10
ACTION_VERB_POINTS = 1.5

MAX_JD_KEYWORDS = 25
JD_MATCH_POINTS = 20
NO_JD_POINTS = 10

_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)
_KEYWORD_RE = re.compile(r"\b[a-z]{4,}\b", re.ASCII)


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() rounds half to even)."""
    return int(math.floor(value + 0.5))


def count_words(text: str) -> int:
    return len(_WORD_RE.findall(text))


def extract_jd_keywords(jd: str, limit: int = MAX_JD_KEYWORDS) -> List[str]:
    """First `limit` distinct 4+ letter words of the job description, in order."""
    keywords = dict.fromkeys(_KEYWORD_RE.findall(jd.lower()))
    return list(keywords)[:limit]


def _length_points(word_count: int) -> int:
    if word_count < 250:
        return 5
    if word_count <= 700:
        return 20
    return 10


def _section_points(resume_lower: str) -> int:
    points = 0
    if "experience" in resume_lower:
        points += 10
    if "education" in resume_lower:
        points += 5
    # "skill" catches "skills" too
    if "skill" in resume_lower:
        points += 10
    return points


def _action_verb_points(resume_lower: str) -> float:
    found = sum(1 for verb in ACTION_VERBS if verb in resume_lower)
    return min(found, MAX_ACTION_VERBS) * ACTION_VERB_POINTS


def _jd_points(resume_lower: str, jd: Optional[str]) -> int:
    if not jd:
        return NO_JD_POINTS

    keywords = extract_jd_keywords(jd)
    if not keywords:
        return 0

    hits = sum(1 for keyword in keywords if keyword in resume_lower)
    return round_half_up((hits / len(keywords)) * JD_MATCH_POINTS)


def calculate_ats_score(resume: str, jd: Optional[str] = "") -> int:
    """
    Calculate a basic ATS-like score for a resume.

    Args:
        resume: Resume text
        jd: Optional job description text. Empty or None means "not supplied".

    Returns:
        Integer score between 0 and 100
    """
    resume_lower = resume.lower()

    score = BASE_SCORE
    score += _length_points(count_words(resume))
    score += _section_points(resume_lower)
    score += _action_verb_points(resume_lower)
    score += _jd_points(resume_lower, jd)

    return min(MAX_SCORE, round_half_up(score))
