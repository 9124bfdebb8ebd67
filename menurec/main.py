"""
Menu Recommender — FastAPI app factory with startup menu loading.
"""
from __future__ import annotations

import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from menurec.data.store import MenuStore
from menurec.api.dependencies import set_store
from menurec.api.router_meta import router as meta_router
from menurec.api.router_menu import router as menu_router
from menurec.api.router_upload import router as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the menu at startup."""
    from menurec.config import MENU_SAMPLE_FALLBACK, MENU_SOURCE

    print(f"  MENU_DATA_DIR = {os.environ.get('MENU_DATA_DIR', '(not set)')}")
    print(f"  MENU_SOURCE = {MENU_SOURCE}")

    store = MenuStore()
    result = store.load(MENU_SOURCE)
    if not result.ok and MENU_SAMPLE_FALLBACK:
        print("  Falling back to the built-in sample menu")
        result = store.load_sample()
    set_store(store)

    if store.is_loaded:
        print(f"\nMenu Recommender ready — {store.item_count():,} items, "
              f"{len(store.categories_available())} categories\n")
    else:
        print(f"\nMenu Recommender ready — no menu loaded ({result.message}). Upload a CSV.\n")
    yield
    set_store(None)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Menu Recommender API",
        description="Menu recommendations by category and flavor",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(menu_router)
    app.include_router(upload_router)

    # Serve the front end with no-cache headers so browsers always get fresh JS
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
