"""
Persistence collaborator for Student records.
"""
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from student_crud.models.student import Student

# Signed 64-bit range of the id column
MIN_STUDENT_ID = -(2 ** 63)
MAX_STUDENT_ID = 2 ** 63 - 1


class StudentRepositoryBase(ABC):
    """Key-value-by-id store the student service persists through."""

    @abstractmethod
    def save(self, student: Student) -> Student:
        """Persist a new record and return it with its id assigned."""
        pass

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Return the record with this id, or None."""
        pass


class StudentRepository(StudentRepositoryBase):
    """SQLAlchemy implementation over the ``students`` table."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, student: Student) -> Student:
        self.db.add(student)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(student)
        return student

    def find_by_id(self, student_id: int) -> Optional[Student]:
        if not MIN_STUDENT_ID <= student_id <= MAX_STUDENT_ID:
            return None
        return self.db.get(Student, student_id)
