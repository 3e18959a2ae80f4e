from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from student_crud.core.database import SessionLocal
from student_crud.services.student.repository import StudentRepository
from student_crud.services.student.student import StudentService


def get_db() -> Generator:
    """
    Dependency that yields a database session.
    The session is closed once the request is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return StudentRepository(db)


def get_student_service(
    repository: StudentRepository = Depends(get_student_repository)
) -> StudentService:
    """Shared by the REST, SOAP and GraphQL front-ends."""
    return StudentService(repository)
