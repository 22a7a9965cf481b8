from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from backend.auth.dependencies import require_staff
from backend.models.service import DEFAULT_SERVICE_ICON, Service
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/services", tags=["services"])

ServiceStatus = Literal["active", "inactive", "draft"]


class ServicePrice(BaseModel):
    basic: float = Field(default=0, ge=0)
    premium: float = Field(default=0, ge=0)
    enterprise: float = Field(default=0, ge=0)


def _normalize_status(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class CreateServiceRequest(BaseModel):
    title: str = Field(min_length=1)
    short_description: str
    description: str
    icon: str = DEFAULT_SERVICE_ICON
    features: list[str] = []
    category: str
    status: ServiceStatus = "active"
    price: ServicePrice = ServicePrice()
    popularity: int = 0
    clients: int = 0
    rating: float = Field(default=0, ge=0, le=5)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return _normalize_status(value)


class UpdateServiceRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    short_description: str | None = None
    description: str | None = None
    icon: str | None = None
    features: list[str] | None = None
    category: str | None = None
    status: ServiceStatus | None = None
    price: ServicePrice | None = None
    popularity: int | None = None
    clients: int | None = None
    rating: float | None = Field(default=None, ge=0, le=5)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return _normalize_status(value)


class ServiceResponse(BaseModel):
    id: str
    title: str
    short_description: str
    description: str
    icon: str
    features: list[str]
    category: str
    status: str
    price: ServicePrice
    popularity: int
    clients: int
    rating: float
    created_at: datetime
    updated_at: datetime


def service_to_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        title=service.title,
        short_description=service.short_description,
        description=service.description,
        icon=service.icon or DEFAULT_SERVICE_ICON,
        features=service.features or [],
        category=service.category,
        status=(service.status or "active").lower(),
        price=ServicePrice(
            basic=service.basic_price or 0,
            premium=service.premium_price or 0,
            enterprise=service.enterprise_price or 0,
        ),
        popularity=service.popularity or 0,
        clients=service.clients or 0,
        rating=service.rating or 0,
        created_at=service.created_at,
        updated_at=service.updated_at,
    )


PRICE_TIERS = ("basic", "premium", "enterprise")


def _flatten_price(columns: dict) -> dict:
    # Partial updates carry only the tiers that were sent.
    price = columns.pop("price", None) or {}
    for tier in PRICE_TIERS:
        if tier in price:
            columns[f"{tier}_price"] = price[tier]
    return columns


def service_create_columns(payload: CreateServiceRequest) -> dict:
    return _flatten_price(payload.model_dump())


def service_update_columns(payload: UpdateServiceRequest) -> dict:
    return _flatten_price(payload.model_dump(exclude_unset=True))


services = CrudResource(
    Service,
    "service",
    ServiceResponse,
    order_by=(Service.created_at.desc(),),
    create_columns=service_create_columns,
    update_columns=service_update_columns,
    serializer=service_to_response,
)

add_crud_routes(
    router,
    services,
    CreateServiceRequest,
    UpdateServiceRequest,
    write_dependencies=[Depends(require_staff)],
)
