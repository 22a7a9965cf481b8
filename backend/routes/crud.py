"""Shared plumbing for the per-entity CRUD routers.

Every entity router maps the HTTP verbs straight onto one `CrudResource`
call. The resource owns the session handling: storage failures are rolled
back, logged and turned into a 500, and unknown ids become a 404.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.responses import ApiResponse, ok, storage_error_detail
from backend.database import get_db

logger = logging.getLogger(__name__)


def _dump_create(payload: BaseModel) -> dict[str, Any]:
    return payload.model_dump()


def _dump_update(payload: BaseModel) -> dict[str, Any]:
    return payload.model_dump(exclude_unset=True)


class CrudResource:
    def __init__(
        self,
        model,
        label: str,
        response_schema: type[BaseModel],
        order_by: Sequence = (),
        create_columns: Callable[[BaseModel], dict[str, Any]] = _dump_create,
        update_columns: Callable[[BaseModel], dict[str, Any]] = _dump_update,
        serializer: Callable[[Any], BaseModel] | None = None,
    ):
        self.model = model
        self.label = label
        self.title = label[:1].upper() + label[1:]
        self.response_schema = response_schema
        self.order_by = tuple(order_by)
        self.create_columns = create_columns
        self.update_columns = update_columns
        self.serializer = serializer or response_schema.model_validate

    def _storage_failure(self, db: Session, exc: SQLAlchemyError, action: str) -> HTTPException:
        db.rollback()
        logger.exception("Failed to %s %s", action, self.label)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=storage_error_detail(exc, f"Failed to {action} {self.label}"),
        )

    def serialize(self, record) -> BaseModel:
        return self.serializer(record)

    def list(self, db: Session, *criteria) -> list:
        try:
            query = db.query(self.model)
            if criteria:
                query = query.filter(*criteria)
            return query.order_by(*self.order_by).all()
        except SQLAlchemyError as exc:
            raise self._storage_failure(db, exc, "fetch") from exc

    def get(self, db: Session, record_id: str):
        try:
            record = db.get(self.model, record_id)
        except SQLAlchemyError as exc:
            raise self._storage_failure(db, exc, "fetch") from exc
        if record is None:
            raise HTTPException(status_code=404, detail=f"{self.title} not found")
        return record

    def create(self, db: Session, payload: BaseModel):
        return self.create_from_columns(db, self.create_columns(payload))

    def create_from_columns(self, db: Session, columns: dict[str, Any]):
        record = self.model(**columns)
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except IntegrityError as exc:
            db.rollback()
            raise HTTPException(status_code=400, detail=f"Invalid {self.label} data") from exc
        except SQLAlchemyError as exc:
            raise self._storage_failure(db, exc, "create") from exc
        return record

    def update(self, db: Session, record_id: str, payload: BaseModel):
        record = self.get(db, record_id)
        for column, value in self.update_columns(payload).items():
            setattr(record, column, value)
        try:
            db.commit()
            db.refresh(record)
        except IntegrityError as exc:
            db.rollback()
            raise HTTPException(status_code=400, detail=f"Invalid {self.label} data") from exc
        except SQLAlchemyError as exc:
            raise self._storage_failure(db, exc, "update") from exc
        return record

    def delete(self, db: Session, record_id: str) -> None:
        record = self.get(db, record_id)
        try:
            db.delete(record)
            db.commit()
        except SQLAlchemyError as exc:
            raise self._storage_failure(db, exc, "delete") from exc

    def count(self, db: Session) -> int:
        return db.query(self.model).count()


def add_crud_routes(
    router: APIRouter,
    resource: CrudResource,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_dependencies: Sequence = (),
    write_dependencies: Sequence = (),
    create_dependencies: Sequence | None = None,
    include_list: bool = True,
) -> APIRouter:
    """Register list/get/create/update/delete routes for `resource` on `router`.

    `create_dependencies` defaults to `write_dependencies`; pass an empty
    sequence to leave creation open (e.g. the public contact form).
    """
    response_schema = resource.response_schema
    title = resource.title
    read_deps = list(read_dependencies)
    write_deps = list(write_dependencies)
    create_deps = write_deps if create_dependencies is None else list(create_dependencies)

    if include_list:
        @router.get("", response_model=ApiResponse[list[response_schema]], dependencies=read_deps)
        def list_records(db: Session = Depends(get_db)):
            return ok([resource.serialize(record) for record in resource.list(db)])

    @router.get("/{record_id}", response_model=ApiResponse[response_schema], dependencies=read_deps)
    def get_record(record_id: str, db: Session = Depends(get_db)):
        return ok(resource.serialize(resource.get(db, record_id)))

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=ApiResponse[response_schema],
        dependencies=create_deps,
    )
    def create_record(payload: create_schema, db: Session = Depends(get_db)):
        record = resource.create(db, payload)
        return ok(resource.serialize(record), f"{title} created")

    @router.put("/{record_id}", response_model=ApiResponse[response_schema], dependencies=write_deps)
    def update_record(record_id: str, payload: update_schema, db: Session = Depends(get_db)):
        record = resource.update(db, record_id, payload)
        return ok(resource.serialize(record), f"{title} updated")

    @router.delete("/{record_id}", response_model=ApiResponse[None], dependencies=write_deps)
    def delete_record(record_id: str, db: Session = Depends(get_db)):
        resource.delete(db, record_id)
        return ok(None, f"{title} deleted")

    return router
