from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import MessageResponse
from routes.deps import get_context

router = APIRouter(tags=["Integrations"])

@router.post("/ai/suggestions", response_model=MessageResponse)
def get_ai_suggestions(context: PanelContext = Depends(get_context)):
    # Blocking HTTP client; FastAPI runs sync handlers in its threadpool
    return {"message": context.ai.get_suggestions()}

@router.post("/world/edit", response_model=MessageResponse)
async def open_world_editor(context: PanelContext = Depends(get_context)):
    return {"message": await context.world.open_editor()}
