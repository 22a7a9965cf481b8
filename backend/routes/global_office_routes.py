from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.auth.dependencies import require_staff
from backend.models.global_office import GlobalOffice
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/global-offices", tags=["global-offices"])


class Coordinates(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class CreateGlobalOfficeRequest(BaseModel):
    name: str = Field(min_length=1)
    address: str
    city: str
    country: str
    phone: str = ""
    email: str = ""
    timezone: str = ""
    is_headquarters: bool = False
    is_active: bool = True
    coordinates: Coordinates | None = None
    working_hours: str = ""


class UpdateGlobalOfficeRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    address: str | None = None
    city: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
    timezone: str | None = None
    is_headquarters: bool | None = None
    is_active: bool | None = None
    coordinates: Coordinates | None = None
    working_hours: str | None = None


class GlobalOfficeResponse(BaseModel):
    id: str
    name: str
    address: str
    city: str
    country: str
    phone: str
    email: str
    timezone: str
    is_headquarters: bool
    is_active: bool
    coordinates: Coordinates | None = None
    working_hours: str
    created_at: datetime
    updated_at: datetime


def office_to_response(office: GlobalOffice) -> GlobalOfficeResponse:
    coordinates = None
    if office.latitude is not None and office.longitude is not None:
        coordinates = Coordinates(lat=office.latitude, lng=office.longitude)
    return GlobalOfficeResponse(
        id=office.id,
        name=office.name,
        address=office.address,
        city=office.city,
        country=office.country,
        phone=office.phone,
        email=office.email,
        timezone=office.timezone,
        is_headquarters=office.is_headquarters,
        is_active=office.is_active,
        coordinates=coordinates,
        working_hours=office.working_hours,
        created_at=office.created_at,
        updated_at=office.updated_at,
    )


def _split_coordinates(columns: dict) -> dict:
    if "coordinates" in columns:
        coordinates = columns.pop("coordinates")
        columns["latitude"] = coordinates["lat"] if coordinates else None
        columns["longitude"] = coordinates["lng"] if coordinates else None
    return columns


global_offices = CrudResource(
    GlobalOffice,
    "global office",
    GlobalOfficeResponse,
    order_by=(GlobalOffice.is_headquarters.desc(), GlobalOffice.created_at.asc()),
    create_columns=lambda payload: _split_coordinates(payload.model_dump()),
    update_columns=lambda payload: _split_coordinates(payload.model_dump(exclude_unset=True)),
    serializer=office_to_response,
)

add_crud_routes(
    router,
    global_offices,
    CreateGlobalOfficeRequest,
    UpdateGlobalOfficeRequest,
    write_dependencies=[Depends(require_staff)],
)
