import pytest
import os
import sys
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_LOCALE"] = "en"
os.environ.pop("ERROR_REPORTER_URL", None)


@pytest.fixture
def engine():
    """Движок тестовой БД: отдельная in-memory база на каждый тест"""
    import database  # noqa: F401  включает PRAGMA foreign_keys для всех движков

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    yield engine
    engine.dispose()


@pytest.fixture
def create_tables(engine):
    """Создание таблиц перед тестом"""
    from database import Base
    import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(engine, create_tables):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient с подменённой зависимостью get_db"""
    from fastapi.testclient import TestClient
    from database import get_db
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_user_data():
    """Тестовые данные пользователя"""
    return {
        "first_name": "Test",
        "last_name": "User",
        "email": "test@example.com",
        "password": "secret"
    }


@pytest.fixture
def make_user(db_session):
    """Фабрика пользователей в БД"""
    from crud.user import create_user
    from schemas.user import UserCreate

    def _make_user(email="user@example.com", password="secret", first_name="Jane", last_name="Doe"):
        return create_user(db_session, UserCreate(
            first_name=first_name, last_name=last_name, email=email, password=password
        ))

    return _make_user


@pytest.fixture
def make_status(db_session):
    from crud.status import create_status
    from schemas.status import StatusCreate

    def _make_status(name="new"):
        return create_status(db_session, StatusCreate(name=name))

    return _make_status


@pytest.fixture
def make_label(db_session):
    from crud.label import create_label
    from schemas.label import LabelCreate

    def _make_label(name="bug"):
        return create_label(db_session, LabelCreate(name=name))

    return _make_label


@pytest.fixture
def make_task(db_session):
    from crud.task import create_task
    from schemas.task import TaskCreate

    def _make_task(name, creator, status, executor=None, labels=()):
        return create_task(db_session, TaskCreate(
            name=name,
            status_id=status.id,
            creator_id=creator.id,
            executor_id=executor.id if executor else None,
            label_ids=[label.id for label in labels],
        ))

    return _make_task


@pytest.fixture
def logged_in_client(client, make_user):
    """Клиент, вошедший как user@example.com"""
    user_id = make_user(email="user@example.com", password="secret").id
    response = client.post("/session", data={"email": "user@example.com", "password": "secret"},
                           follow_redirects=False)
    assert response.status_code == 302
    client.current_user_id = user_id
    return client
