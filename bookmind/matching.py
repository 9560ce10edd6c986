# bookmind/matching.py — reconcile free-text completions with bookmark records

from typing import List

from .models import Bookmark, ScoredBookmark

TOP_K = 10

TITLE_MENTION_POINTS = 10
TITLE_TERM_POINTS = 3
EXCERPT_TERM_POINTS = 2
TAG_TERM_POINTS = 1
MIN_TERM_LEN = 3

EXPLANATION_TRIGGERS = ("relevant", "because", "why", "these bookmarks")
EXPLANATION_MIN_LINE = 21
EXPLANATION_MAX_CHARS = 200


def query_terms(query: str) -> List[str]:
    return [t for t in query.lower().split() if len(t) >= MIN_TERM_LEN]


def score_bookmark(bookmark: Bookmark, completion_lower: str, terms: List[str]) -> int:
    title = bookmark.title.lower()
    excerpt = (bookmark.excerpt or "").lower()
    # tags are matched as one space-joined string, so a term may span two tags
    tags = " ".join(t.lower() for t in bookmark.tags)

    score = 0
    if title and title in completion_lower:
        score += TITLE_MENTION_POINTS
    for term in terms:
        if term in title:
            score += TITLE_TERM_POINTS
        if term in excerpt:
            score += EXCERPT_TERM_POINTS
        if term in tags:
            score += TAG_TERM_POINTS
    return score


def match_bookmarks(
    completion_text: str,
    bookmarks: List[Bookmark],
    query: str,
    top_k: int = TOP_K,
) -> List[ScoredBookmark]:
    """Rank bookmarks by title mentions in the completion plus query-term hits.

    Zero scores are dropped. Ties keep the store order.
    """
    if not completion_text:
        return []
    completion_lower = completion_text.lower()
    terms = query_terms(query)

    scored = []
    for b in bookmarks:
        score = score_bookmark(b, completion_lower, terms)
        if score > 0:
            scored.append(ScoredBookmark(bookmark=b, score=score))

    scored = sorted(scored, key=lambda s: s.score, reverse=True)
    return scored[:top_k]


def extract_explanation(completion_text: str) -> str:
    captured = []
    capturing = False
    for raw in completion_text.splitlines():
        line = raw.strip()
        if not line:
            continue
        lower = line.lower()
        if any(t in lower for t in EXPLANATION_TRIGGERS):
            capturing = True
        if capturing and len(line) >= EXPLANATION_MIN_LINE and not line.startswith("Title:"):
            captured.append(line)

    explanation = " ".join(captured)
    if len(explanation) > EXPLANATION_MAX_CHARS:
        explanation = explanation[:EXPLANATION_MAX_CHARS] + "..."
    return explanation
