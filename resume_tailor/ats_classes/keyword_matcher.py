"""keyword_matcher.py
Extracts ranked keywords from a job description and scores how many of them a
resume text contains.
"""
import math
import re
from typing import Dict, List, Optional

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.models import KeywordFrequency, MatchResult
from resume_tailor.ats_classes.stopwords import (
    STOPWORDS,
    SHORT_TOKEN_ALLOWLIST,
    KEYWORD_SYNONYMS,
)

# Tech-friendly tokens: keeps "c++", "node.js", "ci/cd" in one piece
TOKEN_RE = re.compile(r"[a-z0-9][a-z0-9+#.\-/]+")
EDGE_PUNCTUATION_RE = re.compile(r"^[.\-/]+|[.\-/]+$")
DIGIT_RE = re.compile(r"\d")
CURLY_APOSTROPHE_RE = re.compile(r"[‘’']")

MIN_TOKEN_LENGTH = 3


def tokenize_job_text(job_text: Optional[str]) -> List[str]:
    """
    Split job text into candidate keyword tokens (before filtering).

    Curly apostrophes are straightened, text is lower-cased and leading /
    trailing ``. - /`` characters are stripped from every token.
    """
    text = CURLY_APOSTROPHE_RE.sub("'", job_text or "").lower()
    return [EDGE_PUNCTUATION_RE.sub("", token) for token in TOKEN_RE.findall(text)]


def normalize_keyword(token: str) -> Optional[str]:
    """
    Apply the keyword filters to one token.

    Returns:
        Optional[str]: The canonical keyword, or None when the token is rejected
        (contains a digit, too short, or a stopword).
    """
    if DIGIT_RE.search(token):
        return None
    if len(token) < MIN_TOKEN_LENGTH and token not in SHORT_TOKEN_ALLOWLIST:
        return None
    if token in STOPWORDS:
        return None
    return KEYWORD_SYNONYMS.get(token, token)


def extract_keyword_index(
    job_text: Optional[str],
    max_keywords: int = TAILOR_DEFAULTS.MAX_KEYWORDS,
) -> List[KeywordFrequency]:
    """
    Build the keyword index of a job description.

    Keywords are counted after normalization and sorted by descending
    frequency. Ties keep the order in which keywords were first seen.

    Args:
        job_text (str | None): Job description text.
        max_keywords (int): Maximum number of keywords kept.

    Returns:
        List[KeywordFrequency]: Ranked keyword index.
    """
    frequencies: Dict[str, int] = {}
    for token in tokenize_job_text(job_text):
        keyword = normalize_keyword(token)
        if keyword is None:
            continue
        frequencies[keyword] = frequencies.get(keyword, 0) + 1

    # sorted() is stable, dict preserves first-seen order
    ranked = sorted(frequencies.items(), key=lambda item: -item[1])
    return [KeywordFrequency(keyword=k, count=c) for k, c in ranked[:max(max_keywords, 0)]]


def extract_job_keywords(
    job_text: Optional[str],
    max_keywords: int = TAILOR_DEFAULTS.MAX_KEYWORDS,
) -> List[str]:
    """Ranked job keywords without their counts."""
    return [entry.keyword for entry in extract_keyword_index(job_text, max_keywords)]


def compute_score(present_count: int, keyword_count: int) -> int:
    """
    Integer percentage of keywords present, rounded half up.

    The denominator floors at 1, so an empty keyword list scores 0.
    """
    total = keyword_count or 1
    return int(math.floor(present_count / total * 100 + 0.5))


def match_keywords(keywords: List[str], resume_text: Optional[str]) -> MatchResult:
    """
    Split keywords into present / missing by case-insensitive substring match.
    """
    haystack = (resume_text or "").lower()
    present = [k for k in keywords if k in haystack]
    missing = [k for k in keywords if k not in haystack]
    return MatchResult(
        score=compute_score(len(present), len(keywords)),
        keywords=list(keywords),
        present=present,
        missing=missing,
    )


def analyze_ats(
    job_text: Optional[str],
    resume_text: Optional[str],
    max_keywords: int = TAILOR_DEFAULTS.MAX_KEYWORDS,
) -> MatchResult:
    """
    Extract job keywords and match them against a resume text.

    Example:
        >>> analyze_ats("React developer with SQL and Node", "React, SQL").score
        50
    """
    return match_keywords(extract_job_keywords(job_text, max_keywords), resume_text)
