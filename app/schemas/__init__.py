"""
Schemas module - Request/Response schemas for API endpoints.
"""

from app.schemas.schemas import (
    LeadStatus, UserRole,
    RegisterRequest, LoginRequest, TokenResponse,
    UserUpdate, UserResponse,
    TalentUpdate, TalentResponse,
    CompanyCreate, CompanyUpdate, CompanyResponse,
    MessageResponse,
)

__all__ = [
    "LeadStatus", "UserRole",
    "RegisterRequest", "LoginRequest", "TokenResponse",
    "UserUpdate", "UserResponse",
    "TalentUpdate", "TalentResponse",
    "CompanyCreate", "CompanyUpdate", "CompanyResponse",
    "MessageResponse",
]
