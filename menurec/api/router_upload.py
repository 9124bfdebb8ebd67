"""
Upload endpoint: replace the menu with an uploaded CSV.
Reload lives in router_meta.py.
"""
from __future__ import annotations

import gzip

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from menurec.data.errors import UnsupportedFileError
from menurec.data.loader import validate_upload
from menurec.data.store import MenuStore
from menurec.api.dependencies import get_store
from menurec.api.response_models import LoadResponse

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=LoadResponse)
async def upload_menu(file: UploadFile = File(...), store: MenuStore = Depends(get_store)):
    """Parse an uploaded CSV and install it as the current menu.

    The previous menu stays in place if the file is rejected or fails to load.
    """
    # Strip .gz suffix if present (browser gzip-compressed upload)
    filename = file.filename or ""
    is_gzipped = filename.lower().endswith(".csv.gz")
    if is_gzipped:
        filename = filename[:-3]

    try:
        validate_upload(filename, None if is_gzipped else file.content_type)
    except UnsupportedFileError as e:
        raise HTTPException(400, str(e))

    content = await file.read()
    try:
        if is_gzipped:
            content = gzip.decompress(content)
        text = content.decode("utf-8-sig")
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise HTTPException(400, f"Could not read '{filename}': {e}")

    # may wait on a reload holding the load lock
    result = await run_in_threadpool(store.load_text, text, filename)
    if not result.ok:
        raise HTTPException(400, result.message)
    return LoadResponse.from_result(result)
