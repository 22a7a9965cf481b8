"""Create demo accounts and default site content.

Usage:
    python -m backend.seed
"""
import logging
import sys

from sqlalchemy.orm import Session

from backend.auth.passwords import hash_password
from backend.database import SessionLocal, init_db
from backend.fixtures import DEFAULT_CONTENT, DEMO_USERS
from backend.models.user import User
from backend.routes.contact_info_routes import CreateContactInfoRequest, contact_info
from backend.routes.course_routes import courses
from backend.routes.faq_routes import CreateFAQRequest, faqs
from backend.routes.global_office_routes import CreateGlobalOfficeRequest, global_offices
from backend.routes.job_routes import jobs
from backend.routes.service_routes import CreateServiceRequest, services
from backend.routes.user_routes import users

logger = logging.getLogger(__name__)

CONTENT_RESOURCES = {
    "services": (services, CreateServiceRequest),
    "contact_info": (contact_info, CreateContactInfoRequest),
    "global_offices": (global_offices, CreateGlobalOfficeRequest),
    "faqs": (faqs, CreateFAQRequest),
}

COUNTED_RESOURCES = {
    "services": services,
    "contact_info": contact_info,
    "global_offices": global_offices,
    "faqs": faqs,
    "users": users,
    "courses": courses,
    "jobs": jobs,
}


def seed_demo_users(db: Session) -> list[str]:
    """Insert any missing demo account. Existing rows are left untouched."""
    created = []
    for demo_user in DEMO_USERS:
        if db.query(User).filter(User.email == demo_user["email"]).first() is not None:
            continue
        db.add(
            User(
                name=demo_user["name"],
                email=demo_user["email"],
                password_hash=hash_password(demo_user["password"]),
                role=demo_user["role"],
            )
        )
        created.append(demo_user["email"])
    db.commit()
    if created:
        logger.info("Created demo users: %s", ", ".join(created))
    return created


def seed_default_content(db: Session) -> list[str]:
    """Fill every empty content table with its defaults; returns the tables filled."""
    initialized = []
    for collection, (resource, schema) in CONTENT_RESOURCES.items():
        if resource.count(db) > 0:
            continue
        for record in DEFAULT_CONTENT[collection]:
            resource.create(db, schema(**record))
        initialized.append(collection)
    if initialized:
        logger.info("Initialized default content: %s", ", ".join(initialized))
    return initialized


def count_records(db: Session) -> dict[str, int]:
    return {name: resource.count(db) for name, resource in COUNTED_RESOURCES.items()}


def seed_all() -> None:
    init_db()
    db = SessionLocal()
    try:
        seed_demo_users(db)
        seed_default_content(db)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stdout)
    seed_all()
