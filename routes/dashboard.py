from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from app.context import PanelContext
from app.services.store import EntityKind
from routes.deps import get_context
import os

VIEWS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "views")

router = APIRouter(tags=["Dashboard"])
templates = Jinja2Templates(directory=VIEWS_DIR)

@router.get("/")
def dashboard(request: Request, context: PanelContext = Depends(get_context)):
    store = context.store
    return templates.TemplateResponse(request, "dashboard.html", {
        "title": context.title,
        "user": store.find(EntityKind.USER, context.settings.panel_user_id),
        "servers": store.list(EntityKind.SERVER),
        "addons": store.list(EntityKind.ADDON),
        "themes": store.list(EntityKind.THEME),
        "backups": store.list(EntityKind.BACKUP),
        "databases": store.list(EntityKind.DATABASE),
        "tasks": store.list(EntityKind.TASK),
        "players": store.list(EntityKind.PLAYER),
        "logs": store.list(EntityKind.LOG),
    })

@router.get("/api/state")
def get_state(context: PanelContext = Depends(get_context)):
    """JSON snapshot of every collection"""
    return context.store.snapshot()

@router.get("/health")
def health(context: PanelContext = Depends(get_context)):
    return {
        "status": "ok",
        "version": context.settings.app_version,
        "store": context.store.backend,
        "panel": context.title,
    }
