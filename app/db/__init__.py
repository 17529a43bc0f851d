"""
Database module - engine, sessions and table definitions.
"""
from app.db.postgres import get_db_session, create_tables, test_postgres_connection
from app.db.tables import talents, companies, users, LEAD_STATUSES, USER_ROLES

__all__ = [
    "get_db_session",
    "create_tables",
    "test_postgres_connection",
    "talents",
    "companies",
    "users",
    "LEAD_STATUSES",
    "USER_ROLES",
]
