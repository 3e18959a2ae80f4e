import os

# In-memory SQLite shared through a StaticPool; must be set before settings load
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")
# Same as the shipped default
os.environ["DEBUG"] = "true"

import pytest
from fastapi.testclient import TestClient

from student_crud.core.database import SessionLocal, create_database_tables, drop_database_tables
from student_crud.main import app
from student_crud.services.student.repository import StudentRepository
from student_crud.services.student.student import StudentService


@pytest.fixture()
def db():
    create_database_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_database_tables()


@pytest.fixture()
def service(db):
    return StudentService(StudentRepository(db))


@pytest.fixture()
def client(db):
    # Not used as a context manager; test_lifespan.py covers startup
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
