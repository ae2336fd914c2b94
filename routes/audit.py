from fastapi import APIRouter, Depends, Query
from typing import Optional
from app.context import PanelContext
from app.services.store import EntityKind, serialize
from routes.deps import get_context

router = APIRouter(prefix="/api/audit", tags=["Audit"])


@router.get("/logs")
def get_audit_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    action: Optional[str] = None,
    user: Optional[str] = None,
    search: Optional[str] = None,
    context: PanelContext = Depends(get_context)
):
    logs = context.store.list(EntityKind.LOG)

    # Filters
    if action and action != "all":
        logs = [log for log in logs if log.action == action]

    if user:
        logs = [log for log in logs if user.lower() in (log.username or "").lower()]

    if search:
        logs = [log for log in logs if search.lower() in (log.message or "").lower()]

    # Pagination stats
    total = len(logs)
    total_pages = (total + limit - 1) // limit

    # Newest first
    logs = list(reversed(logs))[(page - 1) * limit: page * limit]

    return {
        "items": [serialize(EntityKind.LOG, log) for log in logs],
        "total": total,
        "page": page,
        "pages": total_pages
    }
