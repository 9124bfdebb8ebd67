"""
MenuStore — in-memory menu with category/flavor lookups and filtering.

Loaded at startup (and on upload/reload), queried on every request.
The current items and their catalog index live in one immutable snapshot
that a load replaces with a single assignment, so readers never need a lock.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from menurec.config import (
    ALL_CATEGORIES_LABEL, INCLUDE_ALL_SENTINEL, MENU_SOURCE, NUMERIC_FIELDS, REQUIRED_FIELDS,
)
from menurec.data.catalog import build_index
from menurec.data.errors import MenuLoadError
from menurec.data.loader import fetch_source, load_menu_text
from menurec.data.normalize import normalize_rows
from menurec.data.sample import SAMPLE_MENU, SAMPLE_SOURCE
from menurec.data.schemas import LoadResult, MenuItem, MenuSnapshot

LoadListener = Callable[[LoadResult], None]


class MenuStore:
    """Menu items plus the category/flavor index that drives the dropdowns."""

    def __init__(
        self,
        include_all_sentinel: bool = INCLUDE_ALL_SENTINEL,
        sentinel_label: str = ALL_CATEGORIES_LABEL,
        required_fields: Iterable[str] = REQUIRED_FIELDS,
        numeric_fields: Iterable[str] = NUMERIC_FIELDS,
    ) -> None:
        self.include_all_sentinel = include_all_sentinel
        self.sentinel_label = sentinel_label
        self.required_fields = list(required_fields)
        self.numeric_fields = list(numeric_fields)
        self._snapshot: Optional[MenuSnapshot] = None
        self._listeners: list[LoadListener] = []
        # Loads queue up behind each other; reads never take this
        self._load_lock = threading.Lock()
        self.last_result: Optional[LoadResult] = None

    # ------------------------------------------------------------------
    # Load notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: LoadListener) -> Callable[[], None]:
        """Call listener with every LoadResult. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, result: LoadResult) -> None:
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception as exc:
                print(f"  Warning: load listener {listener!r} failed: {exc}")

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _run_load(
        self,
        source: str,
        produce: Callable[[], tuple[Sequence[MenuItem], int]],
    ) -> LoadResult:
        """Produce items, build the index, install both or nothing."""
        with self._load_lock:
            try:
                items, dropped = produce()
            except MenuLoadError as exc:
                print(f"  Error loading menu data from {source}: {exc}")
                result = LoadResult.failure(str(exc), source)
            else:
                items = tuple(items)
                snapshot = MenuSnapshot(
                    items=items,
                    index=build_index(items, self.include_all_sentinel, self.sentinel_label),
                    source=source,
                    dropped=dropped,
                )
                self._snapshot = snapshot
                result = LoadResult.success(snapshot)
                print(f"  Menu loaded from {source}: {len(items):,} items, "
                      f"{len(snapshot.index.categories):,} categories")
            self.last_result = result
        self._notify(result)
        return result

    def load(self, source: str = MENU_SOURCE, delimiter: Optional[str] = None) -> LoadResult:
        """Fetch a CSV path or URL and install it."""
        print(f"Loading menu data from {source}...")
        return self._run_load(
            source,
            lambda: load_menu_text(
                fetch_source(source), source, delimiter, self.required_fields, self.numeric_fields,
            ),
        )

    def load_text(
        self,
        text: str,
        filename: str = "",
        delimiter: Optional[str] = None,
    ) -> LoadResult:
        """Install CSV text already in memory (e.g. an upload)."""
        return self._run_load(
            filename or "upload",
            lambda: load_menu_text(
                text, filename, delimiter, self.required_fields, self.numeric_fields,
            ),
        )

    def load_rows(self, rows: Iterable[Mapping[str, Any]], source: str = "rows") -> LoadResult:
        """Install already-tokenized rows; they still go through the normalizer."""
        rows = list(rows)
        return self._run_load(
            source,
            lambda: normalize_rows(rows, self.required_fields, self.numeric_fields),
        )

    def load_items(self, items: Iterable[MenuItem], source: str = "items") -> LoadResult:
        """Install already-built items. Items with a blank name, category or flavor are dropped."""
        items = list(items)

        def _valid():
            kept = [i for i in items if i.name.strip() and i.category.strip() and i.flavor.strip()]
            dropped = len(items) - len(kept)
            if dropped:
                print(f"  Dropped {dropped} invalid item(s)")
            return kept, dropped

        return self._run_load(source, _valid)

    def load_sample(self) -> LoadResult:
        """Install the built-in sample menu."""
        return self.load_rows(SAMPLE_MENU, SAMPLE_SOURCE)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> Optional[MenuSnapshot]:
        return self._snapshot

    def item_count(self) -> int:
        snap = self._snapshot
        return len(snap.items) if snap else 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def items(self) -> list[MenuItem]:
        snap = self._snapshot
        return list(snap.items) if snap else []

    def categories_available(self) -> list[str]:
        """Categories in first-seen order, sentinel first when enabled."""
        snap = self._snapshot
        return list(snap.index.categories) if snap else []

    def flavors_for(self, category: Optional[str]) -> list[str]:
        """Flavors offered in a category; unknown category gives []."""
        snap = self._snapshot
        if snap is None or not category:
            return []
        return list(snap.index.flavors_for(category))

    def flavors_by_category(self) -> dict[str, list[str]]:
        snap = self._snapshot
        return snap.index.as_dict() if snap else {}

    def filter(self, category: Optional[str] = None, flavor: Optional[str] = None) -> list[MenuItem]:
        """Items matching a category and a flavor.

        An empty category or flavor places no constraint on that field, so
        both empty returns every item. The sentinel category matches on
        flavor alone.
        """
        snap = self._snapshot
        if snap is None:
            return []
        category = (category or "").strip()
        flavor = (flavor or "").strip()

        if not category and not flavor:
            return list(snap.items)
        if category and category == snap.index.sentinel:
            category = ""

        return [
            item for item in snap.items
            if (not category or item.category.strip() == category)
            and (not flavor or item.flavor.strip() == flavor)
        ]
