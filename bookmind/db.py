# bookmind/db.py — local SQLite bookmark store
import sqlite3
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from datetime import datetime, timezone

from .errors import StoreError
from .models import Bookmark, Collection

Row = Tuple[int, str, str, Optional[str], Optional[str], Optional[int]]
# (id, title, url, excerpt, tags, collection_id)

_COLUMNS = "id, title, url, excerpt, tags, collection_id"


def _split_tags(tags: Optional[str]) -> List[str]:
    if not tags:
        return []
    return [t for t in tags.split(",") if t]


def _row_to_bookmark(row: Row) -> Bookmark:
    bid, title, url, excerpt, tags, collection_id = row
    return Bookmark(
        id=bid,
        title=title or "",
        url=url or "",
        excerpt=excerpt or None,
        tags=_split_tags(tags),
        collection_id=collection_id,
    )


def collection_paths(collections: List[Collection]) -> Dict[int, str]:
    """Map collection id to its "Parent/Child" label."""
    by_id = {c.id: c for c in collections}
    labels: Dict[int, str] = {}
    for c in collections:
        parts, seen, cur = [], set(), c
        while cur is not None and cur.id not in seen:
            seen.add(cur.id)
            parts.append(cur.title)
            cur = by_id.get(cur.parent_id) if cur.parent_id is not None else None
        labels[c.id] = "/".join(reversed(parts))
    return labels


class BookmarkDB:
    def __init__(self, path: str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._init()

    def _con(self):
        return sqlite3.connect(self.path)

    def _init(self):
        with self._con() as con:
            con.execute(
                """
                CREATE TABLE IF NOT EXISTS bookmarks (
                    id            INTEGER PRIMARY KEY AUTOINCREMENT,
                    ts            TEXT    NOT NULL,
                    title         TEXT    NOT NULL,
                    url           TEXT    NOT NULL,
                    excerpt       TEXT,
                    tags          TEXT,
                    collection_id INTEGER
                )
                """
            )
            con.execute(
                """
                CREATE TABLE IF NOT EXISTS collections (
                    id        INTEGER PRIMARY KEY,
                    title     TEXT    NOT NULL,
                    parent_id INTEGER
                )
                """
            )

    def insert_bookmark(
        self,
        title: str,
        url: str,
        excerpt: Optional[str] = None,
        tags: Optional[List[str]] = None,
        collection_id: Optional[int] = None,
    ) -> Bookmark:
        ts = datetime.now(timezone.utc).isoformat()
        # commas separate tags in the column, so they cannot appear inside one
        clean = [t.replace(",", " ").strip() for t in (tags or [])]
        tag_text = ",".join(t for t in clean if t) or None
        with self._con() as con:
            cur = con.execute(
                "INSERT INTO bookmarks (ts, title, url, excerpt, tags, collection_id) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (ts, title, url, excerpt, tag_text, collection_id),
            )
            bid = cur.lastrowid
        return _row_to_bookmark((bid, title, url, excerpt, tag_text, collection_id))

    def insert_collection(self, collection_id: int, title: str, parent_id: Optional[int] = None) -> Collection:
        with self._con() as con:
            con.execute(
                "INSERT OR REPLACE INTO collections (id, title, parent_id) VALUES (?, ?, ?)",
                (collection_id, title, parent_id),
            )
        return Collection(id=collection_id, title=title, parent_id=parent_id)

    def get_all_bookmarks(self) -> List[Bookmark]:
        """Newest first, the order the AI context is built in."""
        try:
            with self._con() as con:
                cur = con.execute(f"SELECT {_COLUMNS} FROM bookmarks ORDER BY id DESC")
                rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"failed to read bookmarks: {e}") from e
        return [_row_to_bookmark(r) for r in rows]

    def get_collections(self) -> List[Collection]:
        try:
            with self._con() as con:
                cur = con.execute("SELECT id, title, parent_id FROM collections ORDER BY id ASC")
                rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"failed to read collections: {e}") from e
        return [Collection(id=i, title=t, parent_id=p) for i, t, p in rows]

    def search(self, query: str, limit: int = 50) -> List[Bookmark]:
        """Plain keyword search; every word must hit title, excerpt, tags or url."""
        words = query.split()
        if not words:
            return []
        clauses, params = [], []
        for w in words:
            like = f"%{w}%"
            clauses.append(
                "(title LIKE ? OR IFNULL(excerpt, '') LIKE ? OR IFNULL(tags, '') LIKE ? OR url LIKE ?)"
            )
            params.extend([like, like, like, like])
        params.append(limit)
        try:
            with self._con() as con:
                cur = con.execute(
                    f"SELECT {_COLUMNS} FROM bookmarks WHERE {' AND '.join(clauses)} "
                    f"ORDER BY id DESC LIMIT ?",
                    tuple(params),
                )
                rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"bookmark search failed: {e}") from e
        return [_row_to_bookmark(r) for r in rows]

    def count(self) -> int:
        try:
            with self._con() as con:
                return con.execute("SELECT COUNT(*) FROM bookmarks").fetchone()[0]
        except sqlite3.Error as e:
            raise StoreError(f"failed to count bookmarks: {e}") from e
