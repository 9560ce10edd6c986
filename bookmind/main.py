# bookmind/main.py — BookMind API
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, List

import os
import logging

from .db import BookmarkDB, collection_paths
from .enrich import summarize, suggest_tags
from .errors import CompletionError, StoreError
from .llm_client import CompletionClient
from .models import (
    AISearchIn, AISearchOut, Bookmark, BookmarkIn, BookmarkOut, SearchOut,
    SummaryIn, SummaryOut, TagsIn, TagsOut,
)
from .prompts import DISABLED_HINT, MISSING_KEY_HINT
from .raindrop import RaindropStore
from .search import ai_search
from .settings import settings

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="BookMind API", description="AI search and enrichment for your bookmarks.", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# State
db = BookmarkDB(os.path.join(settings.data_dir, "bookmarks.sqlite"))
store = RaindropStore(settings.raindrop_token) if settings.backend == "raindrop" else db


# ---- helpers ----
def _labels() -> Dict[int, str]:
    # labels are display-only; a failure here must not break the search itself
    try:
        return collection_paths(store.get_collections())
    except StoreError as e:
        logger.warning(f"collection lookup failed: {e}")
        return {}


def _out(bookmarks: List[Bookmark], labels: Dict[int, str]) -> List[BookmarkOut]:
    return [BookmarkOut(bookmark=b, collection=labels.get(b.collection_id)) for b in bookmarks]


def _client() -> CompletionClient:
    if not settings.ai_enabled:
        raise HTTPException(status_code=503, detail=DISABLED_HINT)
    if not settings.api_key.strip():
        raise HTTPException(status_code=503, detail=MISSING_KEY_HINT)
    return CompletionClient.from_settings(settings)


# ---- routes ----
@app.get("/")
def root():
    return {"app": "BookMind", "message": "Welcome to BookMind API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health():
    try:
        local = db.count()
    except StoreError as e:
        logger.warning(f"/health count failed: {e}")
        local = None
    return {
        "app": "BookMind",
        "status": "ok" if local is not None else "degraded",
        "backend": settings.backend,
        "local_bookmarks": local,
        "ai_ready": settings.ai_ready,
        "model_in_use": settings.model,
    }


@app.post("/bookmarks", response_model=BookmarkOut)
def add_bookmark(payload: BookmarkIn):
    if settings.backend == "raindrop":
        raise HTTPException(409, "The Raindrop backend is read-only; add bookmarks in Raindrop.io")
    title, url = payload.title.strip(), payload.url.strip()
    if not title or not url:
        raise HTTPException(400, "title and url are required")
    b = db.insert_bookmark(title, url, payload.excerpt, payload.tags, payload.collection_id)
    return BookmarkOut(bookmark=b)


@app.get("/search", response_model=SearchOut)
def search(q: str):
    try:
        found = store.search(q)
    except StoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return SearchOut(results=_out(found, _labels() if found else {}))


@app.post("/ai-search", response_model=AISearchOut)
def search_with_ai(body: AISearchIn):
    result = ai_search(body.query, store, settings)
    labels = _labels() if result.results else {}
    results = [
        BookmarkOut(bookmark=s.bookmark, collection=labels.get(s.bookmark.collection_id), score=s.score)
        for s in result.results
    ]
    if result.message:
        logger.info(f"/ai-search {result.outcome.value}: {result.message}")
    return AISearchOut(outcome=result.outcome, results=results, explanation=result.explanation, message=result.message)


@app.post("/summarize", response_model=SummaryOut)
def summarize_url(body: SummaryIn):
    client = _client()
    try:
        text = summarize(client, body.url)
    except CompletionError as e:
        logger.warning(f"/summarize failed: {e}")
        raise HTTPException(status_code=502, detail=f"AI summary failed: {e}")
    return SummaryOut(url=body.url, summary=text)


@app.post("/suggest-tags", response_model=TagsOut)
def tags_for_bookmark(body: TagsIn):
    client = _client()
    try:
        tags = suggest_tags(client, body.title, body.excerpt, body.url)
    except CompletionError as e:
        logger.warning(f"/suggest-tags failed: {e}")
        raise HTTPException(status_code=502, detail=f"AI tag suggestion failed: {e}")
    return TagsOut(tags=tags)
