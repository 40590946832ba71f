from fastapi import APIRouter, Depends
from app.core.auth import get_current_user
from app.controllers.dashboard_controller import read_dashboard
from app.schemas.user_schema import MessageResponse

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=MessageResponse)
def dashboard_route(user=Depends(get_current_user)):
    return read_dashboard()
