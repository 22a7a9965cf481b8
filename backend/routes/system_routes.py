from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.core.responses import ApiResponse, ok
from backend.database import get_db
from backend.seed import count_records, seed_default_content

router = APIRouter(tags=["system"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class InitializeDataResponse(BaseModel):
    initialized: list[str]
    existing: dict[str, int]


@router.get("/health", response_model=ApiResponse[HealthResponse])
def health():
    return ok({"status": "OK", "timestamp": datetime.now(timezone.utc)}, "Server is running")


@router.post(
    "/initialize-data",
    response_model=ApiResponse[InitializeDataResponse],
    dependencies=[Depends(require_admin)],
)
def initialize_data(db: Session = Depends(get_db)):
    initialized = seed_default_content(db)
    return ok(
        {"initialized": initialized, "existing": count_records(db)},
        "Default data initialization completed",
    )
