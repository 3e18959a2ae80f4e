import logging

from student_crud.core.exceptions import StudentNotFoundException
from student_crud.models.student import Student
from student_crud.schemas.student import StudentCreate, StudentResponse
from student_crud.services.student.repository import StudentRepositoryBase

logger = logging.getLogger(__name__)


def to_record(student: StudentCreate) -> Student:
    """Build an unsaved record (id is None) from the create-input shape."""
    return Student(
        name=student.name,
        age=student.age,
        grade=student.grade
    )


def to_response(student: Student) -> StudentResponse:
    """Convert a persisted record into the output shape."""
    return StudentResponse(
        id=student.id,
        name=student.name,
        age=student.age,
        grade=student.grade
    )


class StudentService:
    """
    The only holder of student business rules.

    REST, SOAP and GraphQL all call into this class; none of them touch the
    repository directly.
    """

    def __init__(self, repository: StudentRepositoryBase):
        self.repository = repository

    def create(self, student: StudentCreate) -> StudentResponse:
        """Persist a new student and return it with its assigned id."""
        saved = self.repository.save(to_record(student))
        logger.info(f"Created student id={saved.id}")
        return to_response(saved)

    def get_by_id(self, student_id: int) -> StudentResponse:
        """
        Fetch one student.

        Raises:
            StudentNotFoundException: no row has this id
        """
        student = self.repository.find_by_id(student_id)
        if student is None:
            logger.info(f"Student id={student_id} not found")
            raise StudentNotFoundException(student_id)
        return to_response(student)
