from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import IdRequest, MessageResponse
from routes.deps import get_context

router = APIRouter(tags=["Operations"])

@router.post("/databases/manage", response_model=MessageResponse)
async def manage_database(body: IdRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.manage_database(body.id)}

@router.post("/tasks/run", response_model=MessageResponse)
async def run_task(body: IdRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.run_task(body.id)}
