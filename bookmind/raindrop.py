# bookmind/raindrop.py — Raindrop.io REST bookmark store
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import StoreError
from .models import Bookmark, Collection

RAINDROP_API = "https://api.raindrop.io/rest/v1"
PER_PAGE = 50
MAX_PAGES = 200

log = logging.getLogger(__name__)


def _ref_id(ref: Any) -> Optional[int]:
    # Raindrop references look like {"$id": 123}
    if isinstance(ref, dict) and ref.get("$id") is not None:
        return int(ref["$id"])
    return None


def _to_bookmark(item: Dict[str, Any]) -> Bookmark:
    return Bookmark(
        id=int(item["_id"]),
        title=item.get("title") or "",
        url=item.get("link") or "",
        excerpt=item.get("excerpt") or None,
        tags=[str(t) for t in item.get("tags") or []],
        collection_id=_ref_id(item.get("collection")),
    )


def _to_collection(item: Dict[str, Any]) -> Collection:
    return Collection(
        id=int(item["_id"]),
        title=item.get("title") or "",
        parent_id=_ref_id(item.get("parent")),
    )


class RaindropStore:
    """Read-only view of a Raindrop.io account."""

    def __init__(self, token: str, base_url: str = RAINDROP_API, timeout: float = 30.0):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, **params) -> Dict[str, Any]:
        try:
            r = requests.get(
                f"{self.base_url}{path}",
                params=params or None,
                headers={"Authorization": f"Bearer {self.token}"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            data = r.json() or {}
        except requests.RequestException as e:
            raise StoreError(f"Raindrop request {path} failed: {e}") from e
        except ValueError as e:
            raise StoreError(f"Raindrop returned invalid JSON for {path}") from e
        if not isinstance(data, dict) or data.get("result") is False:
            raise StoreError(f"Raindrop error for {path}: {data.get('errorMessage') if isinstance(data, dict) else data}")
        return data

    def _raindrops(self, **params) -> List[Bookmark]:
        out: List[Bookmark] = []
        for page in range(MAX_PAGES):
            data = self._get("/raindrops/0", perpage=PER_PAGE, page=page, **params)
            items = data.get("items") or []
            out.extend(_to_bookmark(i) for i in items)
            if len(items) < PER_PAGE:
                break
        else:
            log.warning("stopped after %d pages (%d bookmarks); later bookmarks were not loaded",
                        MAX_PAGES, len(out))
        return out

    def get_all_bookmarks(self) -> List[Bookmark]:
        bookmarks = self._raindrops()
        log.info("fetched %d bookmarks from Raindrop", len(bookmarks))
        return bookmarks

    def get_collections(self) -> List[Collection]:
        roots = self._get("/collections").get("items") or []
        children = self._get("/collections/childrens").get("items") or []
        return [_to_collection(i) for i in roots + children]

    def search(self, query: str) -> List[Bookmark]:
        if not query.strip():
            return []
        return self._raindrops(search=query)
