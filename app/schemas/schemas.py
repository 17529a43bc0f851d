"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Wire names are camelCase (fullName, cvPath, createdAt); requests also
accept snake_case.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class LeadStatus(str, Enum):
    lead = "lead"
    contacted = "contacted"
    client = "client"
    discarded = "discarded"


class UserRole(str, Enum):
    user = "user"
    admin = "admin"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1, max_length=72)

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    token: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    password: Optional[str] = Field(None, min_length=1, max_length=72)

class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    role: UserRole
    created_at: datetime


# ============================================================
# TALENT SCHEMAS
# ============================================================

class TalentUpdate(CamelModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[LeadStatus] = None

class TalentResponse(CamelModel):
    id: int
    full_name: str
    email: str
    phone: str
    cv_path: Optional[str] = None
    status: LeadStatus
    created_at: datetime


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(CamelModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    contact_person: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    industry: Optional[str] = None
    requirements: Optional[str] = None

class CompanyUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    contact_person: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    industry: Optional[str] = None
    requirements: Optional[str] = None
    status: Optional[LeadStatus] = None

class CompanyResponse(CamelModel):
    id: int
    company_name: str
    contact_person: str
    email: str
    phone: str
    industry: Optional[str] = None
    requirements: Optional[str] = None
    status: LeadStatus
    created_at: datetime


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
