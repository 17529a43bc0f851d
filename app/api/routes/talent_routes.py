"""
Talent Routes (public intake, no auth)

POST /talents - Register talent (multipart, optional PDF "cv")
GET /talents - List talents, newest first
PUT /talents/{id} - Update contact fields / status
DELETE /talents/{id} - Delete talent (uploaded CV is kept on disk)
"""

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile
from pydantic import EmailStr
from typing import List, Optional

from app.api.deps import get_notifier, get_upload_store
from app.services.notification_service import NotificationService
from app.services.record_store import talent_store
from app.utils.file_upload import UploadStore
from app.schemas.schemas import TalentResponse, TalentUpdate

router = APIRouter(prefix="/talents", tags=["Talents"])


def to_response(row: dict, uploads: UploadStore) -> dict:
    """Swap the stored CV filename for its public URL."""
    return {**row, "cv_path": uploads.public_url(row.get("cv_path"))}


@router.post("", response_model=TalentResponse)
async def create_talent(
    background_tasks: BackgroundTasks,
    full_name: str = Form(..., alias="fullName", min_length=1),
    email: EmailStr = Form(...),
    phone: str = Form(..., min_length=1),
    cv: Optional[UploadFile] = File(None, description="CV (PDF, max 5MB)"),
    uploads: UploadStore = Depends(get_upload_store),
    notifier: NotificationService = Depends(get_notifier),
):
    """
    Register a talent lead.

    Process:
    1. Validate form fields
    2. Store CV (PDF only, max 5MB) if provided
    3. Insert talent with status "lead"
    4. Queue welcome email (response does not wait for it)
    """
    cv_filename = None
    if cv is not None and cv.filename:
        cv_filename = await uploads.save_upload(cv)

    row = talent_store.insert({
        "full_name": full_name,
        "email": email,
        "phone": phone,
        "cv_path": cv_filename,
    })

    background_tasks.add_task(notifier.send_talent_welcome, row["full_name"], row["email"])

    return to_response(row, uploads)


@router.get("", response_model=List[TalentResponse])
async def list_talents(uploads: UploadStore = Depends(get_upload_store)):
    """All talents, most recent first."""
    return [to_response(r, uploads) for r in talent_store.list()]


@router.put("/{talent_id}", response_model=TalentResponse)
async def update_talent(
    talent_id: int,
    data: TalentUpdate,
    uploads: UploadStore = Depends(get_upload_store),
):
    """Update talent. Only provided fields are updated."""
    row = talent_store.update(talent_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    return to_response(row, uploads)


@router.delete("/{talent_id}", response_model=TalentResponse)
async def delete_talent(talent_id: int, uploads: UploadStore = Depends(get_upload_store)):
    """Delete talent and return the removed record."""
    return to_response(talent_store.delete(talent_id), uploads)
