# bookmind/models.py — Pydantic data schemas

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Bookmark(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str = ""
    url: str = ""
    excerpt: Optional[str] = None
    tags: List[str] = []
    collection_id: Optional[int] = None


class Collection(BaseModel):
    id: int
    title: str
    parent_id: Optional[int] = None


class ScoredBookmark(BaseModel):
    bookmark: Bookmark
    score: int = Field(..., ge=0)


class SearchOutcome(str, Enum):
    DISABLED = "disabled"
    MISSING_API_KEY = "missing_api_key"
    EMPTY_QUERY = "empty_query"
    FETCH_FAILED = "fetch_failed"
    COMPLETION_FAILED = "completion_failed"
    NO_MATCHES = "no_matches"
    MATCHED = "matched"


class AISearchResult(BaseModel):
    """Terminal state of one AI search plus whatever it produced."""
    outcome: SearchOutcome
    results: List[ScoredBookmark] = []
    explanation: str = ""
    message: str = ""


# ---- HTTP schemas ----

class BookmarkIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    url: str = Field(..., min_length=3, max_length=2000)
    excerpt: Optional[str] = None
    tags: List[str] = []
    collection_id: Optional[int] = None


class BookmarkOut(BaseModel):
    bookmark: Bookmark
    collection: Optional[str] = None
    score: Optional[int] = None


class SearchOut(BaseModel):
    results: List[BookmarkOut]


class AISearchIn(BaseModel):
    query: str = ""


class AISearchOut(BaseModel):
    outcome: SearchOutcome
    results: List[BookmarkOut] = []
    explanation: str = ""
    message: str = ""


class SummaryIn(BaseModel):
    url: str = Field(..., min_length=3)


class SummaryOut(BaseModel):
    url: str
    summary: str


class TagsIn(BaseModel):
    title: str = ""
    excerpt: str = ""
    url: str = Field(..., min_length=3)


class TagsOut(BaseModel):
    tags: List[str]
