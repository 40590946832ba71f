from fastapi import APIRouter, Body, Depends
from pymongo.database import Database
from app.core.auth import get_current_user
from app.core.config import Settings
from app.core.db import get_app_settings, get_db, get_notifier, get_token_signer
from app.core.email import EmailNotifier
from app.core.security import TokenSigner
from app.controllers.auth_controller import (
    forgot_password,
    get_profile,
    login,
    register,
    reset_password,
)
from app.schemas.user_schema import (
    ForgotPasswordRequest,
    MessageResponse,
    ResetPasswordRequest,
    TokenResponse,
    UserLogin,
    UserRead,
    UserRegister,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse)
def register_route(
    payload: UserRegister = Body(...),
    db: Database = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
):
    return register(db, signer, payload)


@router.post("/login", response_model=TokenResponse)
def login_route(
    payload: UserLogin = Body(...),
    db: Database = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
):
    return login(db, signer, payload)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password_route(
    payload: ForgotPasswordRequest = Body(...),
    db: Database = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
    notifier: EmailNotifier = Depends(get_notifier),
    settings: Settings = Depends(get_app_settings),
):
    return forgot_password(db, signer, notifier, settings, payload.email)


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password_route(
    token: str,
    payload: ResetPasswordRequest = Body(...),
    db: Database = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
):
    return reset_password(db, signer, token, payload.password)


@router.get("/user", response_model=UserRead)
def user_route(user=Depends(get_current_user)):
    return get_profile(user)
