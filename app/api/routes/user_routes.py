"""
User Routes (Bearer token required)

GET /users - List users (no password hashes)
PUT /users/{id} - Update user
DELETE /users/{id} - Delete user
"""

from fastapi import APIRouter, Depends
from typing import List

from app.core.auth import require_token
from app.services import user_service
from app.services.record_store import user_store
from app.schemas.schemas import UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(require_token)])


@router.get("", response_model=List[UserResponse])
async def list_users():
    """All users, most recent first."""
    return [user_service.public_user(r) for r in user_store.list()]


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, data: UserUpdate):
    """Update user. Only provided fields change; a new password is re-hashed."""
    return user_service.update_user(user_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True))


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(user_id: int):
    """Delete user and return the removed account."""
    return user_service.public_user(user_store.delete(user_id))
