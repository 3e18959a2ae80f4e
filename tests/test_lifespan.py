from fastapi.testclient import TestClient

from student_crud.core.database import check_database_connection, drop_database_tables, init_db
from student_crud.main import app


def test_check_database_connection():
    assert check_database_connection() is True


def test_startup_creates_table_and_serves_requests():
    try:
        with TestClient(app) as client:
            created = client.post(
                "/api/v1/students/",
                json={"name": "John Doe", "age": 15, "grade": "A"}
            )
            assert created.status_code == 201
            assert client.get(f"/api/v1/students/{created.json()['id']}").status_code == 200
    finally:
        drop_database_tables()


def test_init_db_is_repeatable():
    try:
        init_db()
        init_db()
        assert check_database_connection() is True
    finally:
        drop_database_tables()
