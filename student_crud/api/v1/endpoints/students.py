from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from student_crud.api.deps import get_student_service
from student_crud.schemas.student import StudentCreate, StudentResponse
from student_crud.services.student.student import StudentService

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
def health():
    """
    REST liveness probe
    """
    return "REST API is running! ✓"


@router.post("/", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Create a new student

    Required:
    - **name**: student name
    - **age**: student age
    - **grade**: student grade
    """
    return service.create(student)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """
    Get one student by ID

    Responds 404 when no student has this ID.
    """
    return service.get_by_id(student_id)
