from fastapi import APIRouter
from app.controllers.system_controller import SystemController
from database.schemas import SystemStats

router = APIRouter(prefix="/api/system", tags=["System"])
system_controller = SystemController()

@router.get("/stats", response_model=SystemStats)
def get_system_stats():
    """Get real-time system stats for monitoring dashboard"""
    return system_controller.get_system_stats()
