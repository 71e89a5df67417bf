"""
State endpoints.

Full snapshot export, import (all-or-nothing) and reset.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from app.api.dependencies import get_store
from app.core.config import settings
from app.services.state_store import StateStore

router = APIRouter()


@router.get("/export", summary="Download the full application state as JSON.", )
def export_state(store: StateStore = Depends(get_store)):
    return Response(content=store.export_json(), media_type="application/json",
                    headers={ "Content-Disposition": 'attachment; filename="liftplan_backup.json"' }, )


@router.post("/export/file", summary="Write a timestamped snapshot into the export directory.", )
def export_state_to_file(store: StateStore = Depends(get_store)):
    path = store.export_to_file(settings.EXPORT_DIR)
    if path is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Export failed", )
    return { "path": str(path) }


@router.post("/import", summary="Replace the application state with a snapshot.",
             status_code=status.HTTP_204_NO_CONTENT, )
def import_state(document: dict = Body(...), store: StateStore = Depends(get_store)):
    if not store.import_state(document):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid application state document", )


@router.post("/reset", summary="Delete all data.", status_code=status.HTTP_204_NO_CONTENT, )
def reset_state(store: StateStore = Depends(get_store)):
    store.reset()
