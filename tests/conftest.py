from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from resume_builder.app.api.routes.route_logic.resume_crud import create_resume
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import get_password_hash
from resume_builder.app.database.database import get_db
from resume_builder.app.main import create_app
from resume_builder.app.models import Base
from resume_builder.app.models.resume import ResumeDocument
from resume_builder.app.models.resume_model import Resume as DatabaseResume
from resume_builder.app.models.user import User, UserData


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test.

    pysqlite's own transaction handling breaks SAVEPOINT, which slug
    assignment relies on, so BEGIN is emitted explicitly instead.
    """
    _engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(_engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=_engine)
    yield _engine
    Base.metadata.drop_all(bind=_engine)
    _engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Session:
    """A session for tests that call route logic directly."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def build_payload(
    title: str = "Software Engineer",
    first_name: str = "Jane",
    last_name: str = "Doe",
    email: str = "jane.doe@example.com",
    **extra: Any,
) -> dict[str, Any]:
    """A valid camelCase create payload."""
    payload: dict[str, Any] = {
        "title": title,
        "personalInfo": {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "city": "Portland",
        },
        "education": [
            {
                "institution": "State University",
                "degree": "BSc Computer Science",
                "startDate": "2012-09",
                "endDate": "2016-06",
            },
        ],
        "experience": [
            {
                "company": "Acme",
                "position": "Backend Engineer",
                "startDate": "2016-07",
                "current": True,
                "description": "Built the billing service.",
                "achievements": ["Cut invoice latency in half"],
            },
        ],
        "skills": [{"name": "Python", "level": "Expert"}],
    }
    payload.update(extra)
    return payload


@pytest.fixture
def resume_payload():
    """Factory for valid create payloads."""
    return build_payload


@pytest.fixture
def make_user(session_factory):
    """Factory persisting a user and returning it detached with its attributes loaded."""
    counter = {"n": 0}

    def _make_user(
        first_name: str = "Jane",
        last_name: str = "Doe",
        email: str | None = None,
        password: str = "secret-password",
    ) -> User:
        counter["n"] += 1
        with session_factory() as session:
            user = User(
                data=UserData(
                    first_name=first_name,
                    last_name=last_name,
                    email=email or f"user{counter['n']}@example.com",
                    hashed_password=get_password_hash(password),
                ),
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
        return user

    return _make_user


@pytest.fixture
def make_resume(session_factory):
    """Factory creating a resume through the route logic and returning its id."""

    def _make_resume(user: User, **overrides: Any) -> int:
        document = ResumeDocument.model_validate(build_payload(**overrides))
        with session_factory() as session:
            resume = create_resume(session, user_id=user.id, document=document)
            return resume.id

    return _make_resume


@pytest.fixture
def load_resume(session_factory):
    """Read a resume row in a short-lived session and return it detached."""

    def _load_resume(resume_id: int) -> DatabaseResume | None:
        with session_factory() as session:
            resume = session.get(DatabaseResume, resume_id)
            if resume is not None:
                session.expunge(resume)
            return resume

    return _load_resume


@pytest.fixture
def app(session_factory) -> FastAPI:
    """Fixture to create a new app for each test, bound to the test database."""
    get_settings.cache_clear()
    _app = create_app()

    def get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    _app.dependency_overrides[get_db] = get_test_db
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Fixture to create an unauthenticated test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def login_as(app: FastAPI):
    """Make the app treat every request as coming from the given user."""

    def _login_as(user: User) -> None:
        app.dependency_overrides[get_current_user] = lambda: user

    return _login_as
