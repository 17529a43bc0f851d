#!/usr/bin/env python3
"""
Bootstrap Admin Script

Creates the admin account from ADMIN_EMAIL / ADMIN_PASSWORD if it does not
exist yet. Safe to run more than once.
Usage: python scripts/setup_admin.py
"""
import logging
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.core.logging_config import configure_logging
from app.db.postgres import create_tables
from app.services.user_service import ensure_admin_user

logger = logging.getLogger("setup_admin")


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.admin_email or not settings.admin_password:
        logger.error("Admin credentials not found in environment variables")
        return 1

    try:
        create_tables()
        ensure_admin_user(settings.admin_email, settings.admin_password, settings.admin_name)
    except Exception:
        logger.exception("Error creating admin user")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
