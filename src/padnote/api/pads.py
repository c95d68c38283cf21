"""Pad API endpoints."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..core.schemas.pads import PadUpdateResponse
from ..core.services import PadService
from ..core.store import IKeyValueStore
from ..storage import get_store

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pads"])


def get_pad_service(request: Request, store: IKeyValueStore = Depends(get_store)) -> PadService:
    """Build the pad service for the running app."""
    return PadService(store, request.app.state.encoder, request.app.state.settings.redis_prefix)


@router.get("/", status_code=status.HTTP_301_MOVED_PERMANENTLY)
async def create_pad(pad_service: PadService = Depends(get_pad_service)):
    """Allocate a new pad and redirect to it."""
    pad_id = await pad_service.allocate_id()
    return RedirectResponse(url=f"/{pad_id}", status_code=status.HTTP_301_MOVED_PERMANENTLY)


@router.get("/{padname}", response_class=HTMLResponse)
async def get_pad(
    request: Request,
    padname: str,
    pad_service: PadService = Depends(get_pad_service)
):
    """Render a pad."""
    content = await pad_service.read(padname)
    return templates.TemplateResponse(
        request, "main.html", {"name": padname, "content": content}
    )


@router.post("/{padname}", response_model=PadUpdateResponse)
async def update_pad(
    request: Request,
    padname: str,
    t: str = Form(""),
    pad_service: PadService = Depends(get_pad_service)
):
    """Overwrite a pad with the submitted text."""
    max_length = request.app.state.settings.max_content_length
    if len(t) > max_length:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Pad content exceeds {max_length} characters"
        )

    await pad_service.write(padname, t)
    return PadUpdateResponse(message="ok", padname=padname)
