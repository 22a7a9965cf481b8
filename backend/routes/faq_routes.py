from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.auth.dependencies import require_staff
from backend.models.faq import FAQ
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/faqs", tags=["faqs"])


class CreateFAQRequest(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    category: str = ""
    order: int = 0
    is_active: bool = True
    tags: list[str] = []


class UpdateFAQRequest(BaseModel):
    question: str | None = Field(default=None, min_length=1)
    answer: str | None = Field(default=None, min_length=1)
    category: str | None = None
    order: int | None = None
    is_active: bool | None = None
    tags: list[str] | None = None


class FAQResponse(BaseModel):
    id: str
    question: str
    answer: str
    category: str
    order: int
    is_active: bool
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


faqs = CrudResource(
    FAQ,
    "FAQ",
    FAQResponse,
    order_by=(FAQ.order.asc(), FAQ.created_at.asc()),
)

add_crud_routes(
    router,
    faqs,
    CreateFAQRequest,
    UpdateFAQRequest,
    write_dependencies=[Depends(require_staff)],
)
