"""
Authentication Routes

POST /auth/register - Register new staff user
POST /auth/login - Login and get JWT token
"""

from fastapi import APIRouter

from app.services import user_service
from app.schemas.schemas import LoginRequest, MessageResponse, RegisterRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=MessageResponse)
async def register(request: RegisterRequest):
    """
    Register a new user account (role "user").

    After registration, login to get access token.
    """
    user_service.register_user(
        name=request.name,
        email=request.email,
        phone=request.phone,
        password=request.password,
    )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token (valid 24h).

    Include token in requests: Authorization: Bearer <token>
    """
    token = user_service.login(request.email, request.password)
    return TokenResponse(token=token)
