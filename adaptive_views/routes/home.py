"""
Home Routes for adaptive-views

Each action renders the view of the same name, resolved per domain.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from typing import Optional
import uuid

from adaptive_views.models.error import ErrorViewModel
from adaptive_views.services.view_engine import ViewEngine, get_view_engine

router = APIRouter()

CONTROLLER = "Home"
NO_STORE_HEADERS = {"Cache-Control": "no-store, no-cache", "Pragma": "no-cache"}


@router.get("/", response_class=HTMLResponse)
@router.get("/Home", response_class=HTMLResponse)
@router.get("/Home/Index", response_class=HTMLResponse)
async def index(request: Request, views: ViewEngine = Depends(get_view_engine)):
    """Landing page for the addressed domain."""
    return views.render(request, "Index", CONTROLLER)


@router.get("/Home/Privacy", response_class=HTMLResponse)
async def privacy(request: Request, views: ViewEngine = Depends(get_view_engine)):
    return views.render(request, "Privacy", CONTROLLER)


@router.get("/Home/Error", response_class=HTMLResponse)
async def error(
    request: Request,
    request_id: Optional[str] = None,
    views: ViewEngine = Depends(get_view_engine),
):
    """Error page; never cached."""
    return render_error(views, request, request_id or str(uuid.uuid4()))


def render_error(views: ViewEngine, request: Request, request_id: Optional[str], status_code: int = 200):
    model = ErrorViewModel(request_id=request_id)
    return views.render(
        request,
        "Error",
        CONTROLLER,
        {"model": model},
        status_code=status_code,
        headers=NO_STORE_HEADERS,
    )
