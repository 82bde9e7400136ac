from typing import Any

from fastapi import APIRouter, Body, Depends, status

from trackify.models.user import AuthResponse, UserPublic
from trackify.routers.deps import get_auth_service, get_current_user_id
from trackify.services.auth import AuthService
from trackify.validation.validator import validate_login, validate_register

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(payload: Any = Body(...), auth: AuthService = Depends(get_auth_service)):
    user = validate_register(payload).unwrap()
    return auth.register(name=user.name, email=user.email, password=user.password)


@router.post("/login", response_model=AuthResponse)
def login(payload: Any = Body(...), auth: AuthService = Depends(get_auth_service)):
    credentials = validate_login(payload).unwrap()
    return auth.login(email=credentials.email, password=credentials.password)


@router.get("/me", response_model=UserPublic)
def get_current_user(
    user_id: int = Depends(get_current_user_id),
    auth: AuthService = Depends(get_auth_service),
):
    """Get current user profile"""
    return auth.profile(user_id)
