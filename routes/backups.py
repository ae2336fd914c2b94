from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import IdRequest, MessageResponse
from routes.deps import get_context

router = APIRouter(prefix="/backups", tags=["Backups"])

@router.post("/create", response_model=MessageResponse)
async def create_backup(body: IdRequest, context: PanelContext = Depends(get_context)):
    """Back up a server. ``id`` is the server id."""
    return {"message": await context.dispatcher.create_backup(body.id)}

@router.post("/restore", response_model=MessageResponse)
async def restore_backup(body: IdRequest, context: PanelContext = Depends(get_context)):
    """``id`` is the backup id."""
    return {"message": await context.dispatcher.restore_backup(body.id)}
