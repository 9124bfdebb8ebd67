"""
Meta endpoints: health, reload, sample menu.
"""
from __future__ import annotations

import threading

from fastapi import APIRouter, Depends

from menurec.config import MENU_SOURCE
from menurec.data.store import MenuStore
from menurec.api.dependencies import get_store
from menurec.api.response_models import HealthResponse, LoadResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: MenuStore = Depends(get_store)):
    snap = store.snapshot
    return HealthResponse(
        status="ok" if snap is not None else "empty",
        loaded=snap is not None,
        items=len(snap.items) if snap else 0,
        categories=len(snap.index.categories) if snap else 0,
        source=snap.source if snap else "",
        dropped=snap.dropped if snap else 0,
        loaded_at=snap.loaded_at.isoformat() if snap else None,
    )


@router.post("/reload")
def reload_data(store: MenuStore = Depends(get_store)):
    """Re-fetch MENU_SOURCE and reload.

    Returns immediately, reload happens in background.
    """
    target = MENU_SOURCE

    def _do_reload():
        result = store.load(target)
        print(f"  Reload {'complete' if result.ok else 'failed'} — {result.message}")

    threading.Thread(target=_do_reload, daemon=True).start()
    return {
        "status": "reloading",
        "source": target,
        "message": "Menu reload started in background. Check /api/health for the updated item count.",
    }


@router.post("/sample", response_model=LoadResponse)
def load_sample(store: MenuStore = Depends(get_store)):
    """Replace the current menu with the built-in sample menu."""
    return LoadResponse.from_result(store.load_sample())
