from datetime import date, datetime
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, model_validator
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_staff
from backend.core.responses import ApiResponse, ok
from backend.database import get_db
from backend.models.job import Job
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/jobs", tags=["jobs"])

JobType = Literal["full-time", "part-time", "contract", "remote"]


class CreateJobRequest(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    requirements: list[str] = []
    responsibilities: list[str] = []
    location: str = ""
    type: JobType = "full-time"
    salary_min: int | None = Field(default=None, ge=0)
    salary_max: int | None = Field(default=None, ge=0)
    salary_currency: str = Field(default="USD", max_length=10)
    category: str = ""
    department: str = ""
    experience: str = ""
    deadline: date | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_salary_range(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salary_min must not exceed salary_max")
        return self


class UpdateJobRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    requirements: list[str] | None = None
    responsibilities: list[str] | None = None
    location: str | None = None
    type: JobType | None = None
    salary_min: int | None = Field(default=None, ge=0)
    salary_max: int | None = Field(default=None, ge=0)
    salary_currency: str | None = Field(default=None, max_length=10)
    category: str | None = None
    department: str | None = None
    experience: str | None = None
    deadline: date | None = None
    is_active: bool | None = None


class JobResponse(BaseModel):
    id: str
    title: str
    description: str
    requirements: list[str]
    responsibilities: list[str]
    location: str
    type: str
    salary_min: int | None = None
    salary_max: int | None = None
    salary_currency: str
    category: str
    department: str
    experience: str
    deadline: date | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


jobs = CrudResource(
    Job,
    "job",
    JobResponse,
    order_by=(Job.created_at.desc(),),
)


@router.get("", response_model=ApiResponse[list[JobResponse]])
def list_jobs(active: bool | None = None, db: Session = Depends(get_db)):
    criteria = [] if active is None else [Job.is_active.is_(active)]
    return ok([jobs.serialize(job) for job in jobs.list(db, *criteria)])


add_crud_routes(
    router,
    jobs,
    CreateJobRequest,
    UpdateJobRequest,
    write_dependencies=[Depends(require_staff)],
    include_list=False,
)
