"""
Shared route dependencies.

The notifier and upload store are built once in the app lifespan and kept on
app.state; tests swap them with app.dependency_overrides.
"""

from fastapi import Request

from app.services.notification_service import NotificationService
from app.utils.file_upload import UploadStore


def get_notifier(request: Request) -> NotificationService:
    return request.app.state.notifier


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store
