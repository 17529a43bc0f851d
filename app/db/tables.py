"""
Table definitions (SQLAlchemy Core).

talents    - public talent registrations (optional CV upload)
companies  - public company registrations
users      - staff/admin accounts

No foreign keys between them: each table stands alone.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, Column, DateTime, Integer, MetaData, String, Table, Text
)

LEAD_STATUSES = ("lead", "contacted", "client", "discarded")
USER_ROLES = ("user", "admin")

metadata = MetaData()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _in_check(column: str, values, name: str) -> CheckConstraint:
    allowed = ", ".join(f"'{v}'" for v in values)
    return CheckConstraint(f"{column} IN ({allowed})", name=name)


def _status_check(table_name: str) -> CheckConstraint:
    return _in_check("status", LEAD_STATUSES, f"ck_{table_name}_status")


talents = Table(
    "talents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("full_name", Text, nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("phone", Text, nullable=False),
    Column("cv_path", Text, nullable=True),
    Column("status", String(20), nullable=False, default="lead", server_default="lead"),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
    _status_check("talents"),
)

companies = Table(
    "companies",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("company_name", Text, nullable=False),
    Column("contact_person", Text, nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("phone", Text, nullable=False),
    Column("industry", Text, nullable=True),
    Column("requirements", Text, nullable=True),
    Column("status", String(20), nullable=False, default="lead", server_default="lead"),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
    _status_check("companies"),
)

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("phone", Text, nullable=False),
    Column("password", Text, nullable=False),
    Column("role", String(20), nullable=False, default="user", server_default="user"),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
    _in_check("role", USER_ROLES, "ck_users_role"),
)
