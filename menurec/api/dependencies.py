"""
FastAPI dependencies — MenuStore singleton.
"""
from __future__ import annotations

from fastapi import HTTPException

from menurec.data.store import MenuStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: MenuStore | None = None


def set_store(store: MenuStore | None) -> None:
    global _store
    _store = store


def get_store() -> MenuStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store
