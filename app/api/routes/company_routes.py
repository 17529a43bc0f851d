"""
Company Routes (public intake, no auth)

POST /companies - Register company
GET /companies - List companies, newest first
PUT /companies/{id} - Update company fields / status
DELETE /companies/{id} - Delete company
"""

from fastapi import APIRouter, BackgroundTasks, Depends
from typing import List

from app.api.deps import get_notifier
from app.services.notification_service import NotificationService
from app.services.record_store import company_store
from app.schemas.schemas import CompanyCreate, CompanyResponse, CompanyUpdate

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", response_model=CompanyResponse)
async def create_company(
    data: CompanyCreate,
    background_tasks: BackgroundTasks,
    notifier: NotificationService = Depends(get_notifier),
):
    """Register a company lead and queue the welcome email."""
    row = company_store.insert(data.model_dump(mode="json"))

    background_tasks.add_task(
        notifier.send_company_welcome, row["company_name"], row["contact_person"], row["email"]
    )
    return row


@router.get("", response_model=List[CompanyResponse])
async def list_companies():
    """All companies, most recent first."""
    return company_store.list()


@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(company_id: int, data: CompanyUpdate):
    """Update company. Only provided fields are updated."""
    return company_store.update(company_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True))


@router.delete("/{company_id}", response_model=CompanyResponse)
async def delete_company(company_id: int):
    """Delete company and return the removed record."""
    return company_store.delete(company_id)
