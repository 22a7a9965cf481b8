from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, Field

from backend.auth.dependencies import require_staff
from backend.models.contact_message import ContactMessage
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/contact-messages", tags=["contact-messages"])

MessageStatus = Literal["new", "read", "replied", "archived"]
MessagePriority = Literal["low", "medium", "high"]


class CreateContactMessageRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str | None = None
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
    priority: MessagePriority = "medium"


class UpdateContactMessageRequest(BaseModel):
    status: MessageStatus | None = None
    priority: MessagePriority | None = None
    reply: str | None = None
    replied_by: str | None = None


class ContactMessageResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    status: str
    priority: str
    reply: str | None = None
    replied_at: datetime | None = None
    replied_by: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


def message_update_columns(payload: UpdateContactMessageRequest) -> dict:
    columns = payload.model_dump(exclude_unset=True)
    # Recording a reply moves the message to "replied" unless a status was given.
    if columns.get("reply"):
        if columns.get("status") is None:
            columns["status"] = "replied"
        columns["replied_at"] = datetime.now(timezone.utc)
    return columns


contact_messages = CrudResource(
    ContactMessage,
    "contact message",
    ContactMessageResponse,
    order_by=(ContactMessage.created_at.desc(),),
    update_columns=message_update_columns,
)

add_crud_routes(
    router,
    contact_messages,
    CreateContactMessageRequest,
    UpdateContactMessageRequest,
    read_dependencies=[Depends(require_staff)],
    write_dependencies=[Depends(require_staff)],
    create_dependencies=[],
)
