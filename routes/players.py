from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import IdRequest, MessageResponse
from routes.deps import get_context

router = APIRouter(prefix="/players", tags=["Players"])

@router.post("/kick", response_model=MessageResponse)
async def kick_player(body: IdRequest, context: PanelContext = Depends(get_context)):
    """Kick a player from the server"""
    return {"message": await context.dispatcher.kick_player(body.id)}

@router.post("/ban", response_model=MessageResponse)
async def ban_player(body: IdRequest, context: PanelContext = Depends(get_context)):
    """Ban a player. The player's status is not changed."""
    return {"message": await context.dispatcher.ban_player(body.id)}
