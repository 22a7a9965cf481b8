from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.auth.dependencies import require_staff
from backend.models.contact_info import ContactInfo
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/contact-info", tags=["contact-info"])

ContactInfoType = Literal["address", "phone", "email", "hours"]


class CreateContactInfoRequest(BaseModel):
    type: ContactInfoType
    title: str = Field(min_length=1)
    value: str = Field(min_length=1)
    icon: str = ""
    is_active: bool = True
    order: int = 0


class UpdateContactInfoRequest(BaseModel):
    type: ContactInfoType | None = None
    title: str | None = Field(default=None, min_length=1)
    value: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    is_active: bool | None = None
    order: int | None = None


class ContactInfoResponse(BaseModel):
    id: str
    type: str
    title: str
    value: str
    icon: str
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


contact_info = CrudResource(
    ContactInfo,
    "contact info",
    ContactInfoResponse,
    order_by=(ContactInfo.order.asc(), ContactInfo.created_at.asc()),
)

add_crud_routes(
    router,
    contact_info,
    CreateContactInfoRequest,
    UpdateContactInfoRequest,
    write_dependencies=[Depends(require_staff)],
)
