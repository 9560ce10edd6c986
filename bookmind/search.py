# bookmind/search.py — AI search pipeline: store -> context -> completion -> ranking
import logging
from typing import Optional

from . import prompts as P
from .errors import CompletionError
from .llm_client import CompletionClient
from .matching import extract_explanation, match_bookmarks
from .models import AISearchResult, SearchOutcome
from .prompts import build_context
from .settings import Settings

log = logging.getLogger(__name__)


def _help_text() -> str:
    return "\n".join(f"{title}: {subtitle}" for title, subtitle in P.SEARCH_HELP)


def ai_search(
    query: str,
    store,
    settings: Settings,
    client: Optional[CompletionClient] = None,
) -> AISearchResult:
    """Run one AI search to a terminal outcome. Single pass, nothing is retried.

    `store` is anything with `get_all_bookmarks()`; failures there or in the
    completion call end the search, they are never raised to the caller.
    """
    if not settings.ai_enabled:
        return AISearchResult(outcome=SearchOutcome.DISABLED, message=P.DISABLED_HINT)
    if not settings.api_key.strip():
        return AISearchResult(outcome=SearchOutcome.MISSING_API_KEY, message=P.MISSING_KEY_HINT)

    query = query.strip()
    if not query:
        return AISearchResult(outcome=SearchOutcome.EMPTY_QUERY, message=_help_text())

    try:
        bookmarks = store.get_all_bookmarks()
    except Exception as e:
        log.warning("bookmark fetch failed: %s", e)
        return AISearchResult(outcome=SearchOutcome.FETCH_FAILED, message=f"Could not load bookmarks: {e}")
    if not bookmarks:
        return AISearchResult(outcome=SearchOutcome.FETCH_FAILED, message=P.NO_BOOKMARKS_HINT)

    context_block = build_context(bookmarks, settings.context_limit)
    if client is None:
        client = CompletionClient.from_settings(settings)
    try:
        completion = client.complete(
            P.SEARCH_SYSTEM,
            P.SEARCH_USER.format(query=query, context_block=context_block),
            max_tokens=P.SEARCH_MAX_TOKENS,
            temperature=P.SEARCH_TEMPERATURE,
        )
    except CompletionError as e:
        return AISearchResult(outcome=SearchOutcome.COMPLETION_FAILED, message=f"AI search failed: {e}")

    ranked = match_bookmarks(completion, bookmarks, query)
    if not ranked:
        return AISearchResult(outcome=SearchOutcome.NO_MATCHES, message=P.NO_MATCHES_HINT)

    log.info("ai search %r matched %d of %d bookmarks", query, len(ranked), len(bookmarks))
    return AISearchResult(
        outcome=SearchOutcome.MATCHED,
        results=ranked,
        explanation=extract_explanation(completion),
    )
