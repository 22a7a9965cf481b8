from datetime import datetime
from typing import Any, Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_staff
from backend.core.responses import ApiResponse, ok
from backend.database import get_db
from backend.models.course import Course
from backend.models.user import User
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/courses", tags=["courses"])

CourseLevel = Literal["beginner", "intermediate", "advanced"]


class CreateCourseRequest(BaseModel):
    title: str = Field(min_length=1)
    short_description: str = ""
    description: str = ""
    thumbnail: str | None = None
    price: float = Field(default=0, ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    duration: str | None = None
    level: CourseLevel = "beginner"
    category: str = ""
    instructor_id: str | None = None
    curriculum: list[dict[str, Any]] = []
    rating: float = Field(default=0, ge=0, le=5)
    review_count: int = 0
    enrollment_count: int = 0
    is_published: bool = False


class UpdateCourseRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    short_description: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    price: float | None = Field(default=None, ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    duration: str | None = None
    level: CourseLevel | None = None
    category: str | None = None
    instructor_id: str | None = None
    curriculum: list[dict[str, Any]] | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    review_count: int | None = None
    enrollment_count: int | None = None
    is_published: bool | None = None


class CourseResponse(BaseModel):
    id: str
    title: str
    short_description: str
    description: str
    thumbnail: str | None = None
    price: float
    discount_price: float | None = None
    duration: str | None = None
    level: str
    category: str
    instructor_id: str | None = None
    curriculum: list[dict[str, Any]]
    rating: float
    review_count: int
    enrollment_count: int
    is_published: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CourseResource(CrudResource):
    """Rejects instructor ids that do not point at an existing user."""

    def _check_instructor(self, db: Session, columns: dict) -> None:
        instructor_id = columns.get("instructor_id")
        if instructor_id and db.get(User, instructor_id) is None:
            raise HTTPException(status_code=400, detail="Instructor not found")

    def create(self, db, payload):
        columns = self.create_columns(payload)
        self._check_instructor(db, columns)
        return self.create_from_columns(db, columns)

    def update(self, db, record_id, payload):
        self._check_instructor(db, self.update_columns(payload))
        return super().update(db, record_id, payload)


courses = CourseResource(
    Course,
    "course",
    CourseResponse,
    order_by=(Course.created_at.desc(),),
)


@router.get("", response_model=ApiResponse[list[CourseResponse]])
def list_courses(published: bool | None = None, db: Session = Depends(get_db)):
    criteria = [] if published is None else [Course.is_published.is_(published)]
    return ok([courses.serialize(course) for course in courses.list(db, *criteria)])


add_crud_routes(
    router,
    courses,
    CreateCourseRequest,
    UpdateCourseRequest,
    write_dependencies=[Depends(require_staff)],
    include_list=False,
)
