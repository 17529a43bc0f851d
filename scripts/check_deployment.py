#!/usr/bin/env python3
"""
Deployment Check Script

Run this to verify the environment is ready to serve traffic.
Usage: python scripts/check_deployment.py
"""
import os
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.postgres import test_postgres_connection
from app.services.notification_service import NotificationService

REQUIRED_ENV_VARS = [
    "DATABASE_URL",
    "SENDGRID_API_KEY",
    "SENDGRID_FROM_EMAIL",
    "JWT_SECRET_KEY",
    "ADMIN_EMAIL",
    "ADMIN_PASSWORD",
]


def main():
    settings = get_settings()
    print("=" * 50)
    print("LEAD INTAKE PORTAL - DEPLOYMENT CHECK")
    print("=" * 50)

    # Python version
    print(f"\n[1] Python {sys.version.split()[0]}")
    if sys.version_info < (3, 10):
        print("    ❌ Python 3.10 or higher is required")
    else:
        print("    ✅ Python version is compatible")

    # Environment variables
    print("\n[2] Environment variables...")
    for name in REQUIRED_ENV_VARS:
        if os.environ.get(name) or getattr(settings, name.lower(), None):
            print(f"    ✅ {name} is set")
        else:
            print(f"    ❌ {name} is missing")

    # Database
    print("\n[3] Testing database...")
    if test_postgres_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")

    # Upload directory
    print("\n[4] Checking upload directory...")
    upload_dir = os.path.abspath(settings.upload_dir)
    if os.path.isdir(upload_dir) and os.access(upload_dir, os.W_OK):
        print(f"    ✅ {upload_dir} exists and is writable")
    else:
        print(f"    ❌ {upload_dir} is missing or not writable")

    # SendGrid (only if API key is set)
    print("\n[5] Testing SendGrid...")
    if settings.sendgrid_api_key:
        notifier = NotificationService(settings.sendgrid_api_key, settings.sendgrid_from_email)
        if notifier.verify():
            print("    ✅ SendGrid API key is valid")
        else:
            print("    ❌ SendGrid API key is invalid")
    else:
        print("    ⚠️  SendGrid: API key not configured, emails will be skipped")

    print("\n" + "=" * 50)
    print("Deployment check complete.")
    print("=" * 50)


if __name__ == "__main__":
    main()
