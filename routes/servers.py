from fastapi import APIRouter, Depends
from app.context import PanelContext
from database.schemas import IdRequest, ChangeVersionRequest, AdjustResourcesRequest, MessageResponse
from routes.deps import get_context

router = APIRouter(prefix="/servers", tags=["Servers"])

@router.post("/start", response_model=MessageResponse)
async def start_server(body: IdRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.start_server(body.id)}

@router.post("/stop", response_model=MessageResponse)
async def stop_server(body: IdRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.stop_server(body.id)}

@router.post("/change-version", response_model=MessageResponse)
async def change_version(body: ChangeVersionRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.change_version(body.id, body.version)}

@router.post("/adjust-resources", response_model=MessageResponse)
async def adjust_resources(body: AdjustResourcesRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.adjust_resources(body.id, body.cpu, body.ram)}
