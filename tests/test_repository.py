from student_crud.models.student import Student
from student_crud.schemas.student import StudentCreate
from student_crud.services.student.repository import StudentRepository


def test_save_assigns_increasing_ids(db):
    repository = StudentRepository(db)
    first = repository.save(Student(name="A", age=10, grade="A"))
    second = repository.save(Student(name="B", age=11, grade="B"))

    assert first.id is not None
    assert second.id > first.id


def test_find_by_id_returns_saved_row(db):
    repository = StudentRepository(db)
    saved = repository.save(Student(name="A", age=10, grade="A"))

    found = repository.find_by_id(saved.id)
    assert found is not None
    assert (found.name, found.age, found.grade) == ("A", 10, "A")


def test_find_by_id_missing_returns_none(db):
    assert StudentRepository(db).find_by_id(999999) is None


def test_service_round_trip_through_database(service):
    created = service.create(StudentCreate(name="John Doe", age=15, grade="A"))
    assert service.get_by_id(created.id) == created


def test_find_by_id_outside_64_bit_range_returns_none(db):
    repository = StudentRepository(db)

    assert repository.find_by_id(2 ** 63) is None
    assert repository.find_by_id(-(2 ** 63) - 1) is None
