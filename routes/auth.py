from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Header, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.context import PanelContext
from app.controllers.auth_controller import AuthController
from app.services.auth_service import decode_access_token
from database.schemas import Token, UserLogin
from routes.deps import get_context

# Tokens are optional: they only pick the acting user, nothing is enforced
bearer_scheme = HTTPBearer(auto_error=False)

router = APIRouter(prefix="/auth", tags=["Auth"])

def get_acting_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    x_user_id: Optional[str] = Header(None),
    context: PanelContext = Depends(get_context),
) -> Optional[str]:
    """Bearer token subject, else X-User-Id, else the configured panel operator."""
    if credentials is not None:
        user_id = decode_access_token(credentials.credentials)
        if user_id is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Could not validate credentials",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return user_id
    return x_user_id or context.settings.panel_user_id or None

@router.post("/login", response_model=Token)
def login(user_data: UserLogin, context: PanelContext = Depends(get_context)):
    token = AuthController(context.store, context.audit).login(user_data.username, user_data.password)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {"access_token": token, "token_type": "bearer"}
