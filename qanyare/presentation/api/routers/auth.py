"""
Login and registration routes
"""

from fastapi import APIRouter, Depends, status

from qanyare.application.dtos.auth_dtos import AuthResponse, LoginRequest, RegisterRequest
from qanyare.application.use_cases.auth_use_case import AuthUseCase
from qanyare.presentation.api.dependencies import get_auth_use_case

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest, auth: AuthUseCase = Depends(get_auth_use_case)
) -> AuthResponse:
    return AuthResponse(user=await auth.login(payload))


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    payload: RegisterRequest, auth: AuthUseCase = Depends(get_auth_use_case)
) -> AuthResponse:
    return AuthResponse(user=await auth.register(payload))
