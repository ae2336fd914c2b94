from typing import Optional
from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import IdRequest, MessageResponse
from routes.auth import get_acting_user_id
from routes.deps import get_context

router = APIRouter(tags=["Catalog"])

@router.post("/addons/install", response_model=MessageResponse)
async def install_addon(
    body: IdRequest,
    user_id: Optional[str] = Depends(get_acting_user_id),
    context: PanelContext = Depends(get_context),
):
    return {"message": await context.dispatcher.install_addon(user_id, body.id)}

@router.post("/themes/purchase", response_model=MessageResponse)
async def purchase_theme(
    body: IdRequest,
    user_id: Optional[str] = Depends(get_acting_user_id),
    context: PanelContext = Depends(get_context),
):
    return {"message": await context.dispatcher.purchase_theme(user_id, body.id)}
