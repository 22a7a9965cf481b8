import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret-key-for-the-assetmagnets-suite')
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('APP_ENV', 'test')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.auth import jwt_handler  # noqa: E402
from backend.auth.passwords import hash_password  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.user import User  # noqa: E402


@pytest.fixture
def db_engine():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(email='member@assetmagnets.com', password='secret123', role='student', name='Member'):
        user = User(name=name, email=email, password_hash=hash_password(password), role=role)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def bearer(user: User) -> dict[str, str]:
    token = jwt_handler.create_access_token(user_id=user.id, email=user.email, role=user.role)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_headers(make_user):
    return bearer(make_user(email='admin@assetmagnets.com', role='admin', name='Admin User'))


@pytest.fixture
def editor_headers(make_user):
    return bearer(make_user(email='editor@assetmagnets.com', role='editor', name='Editor'))


@pytest.fixture
def student_headers(make_user):
    return bearer(make_user(email='student@assetmagnets.com', role='student', name='Student'))


@pytest.fixture
def bearer_for():
    return bearer
