import pytest

from student_crud.api.deps import get_student_service
from student_crud.main import app
from student_crud.services.student.student import StudentService

CREATE_STUDENT = """
mutation Create($name: String!, $age: Int!, $grade: String!) {
  createStudent(name: $name, age: $age, grade: $grade) { id name age grade }
}
"""

STUDENT_BY_ID = """
query Get($id: ID!) {
  studentById(id: $id) { id name age grade }
}
"""


class ExplodingService(StudentService):
    def __init__(self):
        pass

    def create(self, student):
        raise RuntimeError("disk full")

    def get_by_id(self, student_id):
        raise RuntimeError("connection reset")


def graphql(client, query, **variables):
    response = client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200
    return response.json()


def test_create_student(client):
    result = graphql(client, CREATE_STUDENT, name="John Doe", age=15, grade="A")

    assert "errors" not in result
    student = result["data"]["createStudent"]
    assert student["id"]
    assert student["name"] == "John Doe"
    assert student["age"] == 15
    assert student["grade"] == "A"


def test_student_by_id_after_create(client):
    created = graphql(client, CREATE_STUDENT, name="Jane", age=16, grade="B")["data"]["createStudent"]

    first = graphql(client, STUDENT_BY_ID, id=created["id"])
    second = graphql(client, STUDENT_BY_ID, id=created["id"])

    assert first["data"]["studentById"] == created
    assert second == first


def test_missing_student_is_not_found_error(client):
    result = graphql(client, STUDENT_BY_ID, id="999999")

    assert result["data"]["studentById"] is None
    error = result["errors"][0]
    assert "999999" in error["message"]
    assert error["extensions"]["classification"] == "NOT_FOUND"
    assert error["extensions"]["status"] == 404
    assert error["extensions"]["timestamp"]


def test_non_integer_id_is_bad_request(client):
    result = graphql(client, STUDENT_BY_ID, id="abc")

    assert result["errors"][0]["extensions"]["classification"] == "BAD_REQUEST"


def test_unexpected_failure_is_internal_error(client):
    app.dependency_overrides[get_student_service] = ExplodingService

    result = graphql(client, STUDENT_BY_ID, id="1")

    error = result["errors"][0]
    assert error["message"] == "connection reset"
    assert error["extensions"]["classification"] == "INTERNAL_ERROR"
    assert error["extensions"]["status"] == 500


def test_create_unexpected_failure_is_internal_error(client):
    app.dependency_overrides[get_student_service] = ExplodingService

    result = graphql(client, CREATE_STUDENT, name="John Doe", age=15, grade="A")

    assert result["data"] is None
    error = result["errors"][0]
    assert error["message"] == "disk full"
    assert error["extensions"]["classification"] == "INTERNAL_ERROR"
    assert error["extensions"]["status"] == 500
    assert error["extensions"]["timestamp"]


def test_id_beyond_64_bits_is_not_found(client):
    result = graphql(client, STUDENT_BY_ID, id="9223372036854775808")

    assert result["data"]["studentById"] is None
    assert result["errors"][0]["extensions"]["classification"] == "NOT_FOUND"
    assert "9223372036854775808" in result["errors"][0]["message"]


@pytest.mark.parametrize("student_id", ["1_000", " 5 ", "5.0", ""])
def test_loose_integer_ids_are_bad_request(client, student_id):
    result = graphql(client, STUDENT_BY_ID, id=student_id)

    assert result["errors"][0]["extensions"]["classification"] == "BAD_REQUEST"


def test_signed_id_is_accepted(client):
    result = graphql(client, STUDENT_BY_ID, id="-1")

    assert result["errors"][0]["extensions"]["classification"] == "NOT_FOUND"
