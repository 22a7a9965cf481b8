import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.core.responses import register_exception_handlers
from backend.database import SessionLocal, init_db
from backend.routes import (
    auth_routes,
    contact_info_routes,
    contact_message_routes,
    course_routes,
    faq_routes,
    global_office_routes,
    job_routes,
    service_routes,
    system_routes,
    user_routes,
)
from backend.seed import seed_default_content, seed_demo_users

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="AssetMagnets API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_exception_handlers(app)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
        return

    if not config.SEED_DEMO_DATA:
        return

    db = SessionLocal()
    try:
        seed_demo_users(db)
        seed_default_content(db)
    except SQLAlchemyError:
        logger.exception('Seeding demo data failed.')
    finally:
        db.close()


@app.get('/')
def root():
    return {'success': True, 'data': {'status': 'AssetMagnets API Running'}, 'message': None}


app.include_router(system_routes.router, prefix='/api')
app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(service_routes.router, prefix='/api')
app.include_router(course_routes.router, prefix='/api')
app.include_router(job_routes.router, prefix='/api')
app.include_router(contact_info_routes.router, prefix='/api')
app.include_router(global_office_routes.router, prefix='/api')
app.include_router(faq_routes.router, prefix='/api')
app.include_router(contact_message_routes.router, prefix='/api')
app.include_router(user_routes.router, prefix='/api')


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('backend.main:app', host='0.0.0.0', port=config.API_PORT)
