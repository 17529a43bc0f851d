"""
User Service - staff account registration, login and admin bootstrap.

Passwords only ever leave this module hashed.
"""

import logging
from typing import Any, Dict, Optional

from app.core.auth import create_access_token, hash_password, verify_password
from app.core.errors import ConflictError, InvalidCredentialsError
from app.services.record_store import user_store

logger = logging.getLogger(__name__)


def public_user(row: Dict[str, Any]) -> Dict[str, Any]:
    """Strip the password hash from a user row."""
    return {k: v for k, v in row.items() if k != "password"}


def register_user(name: str, email: str, phone: str, password: str, role: str = "user") -> Dict[str, Any]:
    """
    Create a user account.
    Raises ConflictError when the email is taken.
    """
    row = user_store.insert({
        "name": name,
        "email": email,
        "phone": phone,
        "password": hash_password(password),
        "role": role,
    })
    logger.info("Registered %s account %s (id=%s)", role, email, row["id"])
    return public_user(row)


def login(email: str, password: str) -> str:
    """
    Check credentials and issue a signed token carrying (sub=user id, email).
    Unknown email and wrong password give the same error.
    """
    user = user_store.get_by("email", email)
    if not user or not verify_password(password, user["password"]):
        logger.info("Failed login for %s", email)
        raise InvalidCredentialsError()

    return create_access_token(data={"sub": str(user["id"]), "email": user["email"]})


def update_user(user_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
    """Partial update; a supplied password is re-hashed."""
    values = dict(patch)
    if values.get("password"):
        values["password"] = hash_password(values["password"])
    else:
        values.pop("password", None)
    return public_user(user_store.update(user_id, values))


def ensure_admin_user(email: Optional[str], password: Optional[str], name: str = "Admin User") -> bool:
    """
    Seed the bootstrap admin if no user with that email exists.

    Returns:
        True if the admin was created, False if it already existed
    """
    if not email or not password:
        raise ValueError("Admin credentials not found in environment variables")

    if user_store.get_by("email", email):
        logger.info("Admin user already exists")
        return False

    try:
        register_user(name=name, email=email, phone="admin", password=password, role="admin")
    except ConflictError:
        # created concurrently by another process
        return False
    logger.info("Admin user created successfully")
    return True
