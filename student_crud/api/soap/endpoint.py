import logging
from xml.etree.ElementTree import Element

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from student_crud.api.deps import get_student_service
from student_crud.api.soap import envelope
from student_crud.core.config import settings
from student_crud.core.exceptions import BadRequestException, BaseAPIException
from student_crud.core.handlers import error_timestamp
from student_crud.schemas.student import StudentCreate, StudentResponse
from student_crud.services.student.student import StudentService

logger = logging.getLogger(__name__)

SOAP_MEDIA_TYPE = "text/xml; charset=utf-8"

router = APIRouter(prefix=settings.SOAP_PATH)


def create_student(service: StudentService, payload: Element, namespace: str) -> StudentResponse:
    request = StudentCreate(
        name=envelope.child_text(payload, "name", namespace),
        age=envelope.child_int(payload, "age", namespace),
        grade=envelope.child_text(payload, "grade", namespace)
    )
    return service.create(request)


def get_student_by_id(service: StudentService, payload: Element, namespace: str) -> StudentResponse:
    student_id = envelope.child_int(payload, "id", namespace)
    return service.get_by_id(student_id)


OPERATIONS = {
    "createStudent": create_student,
    "getStudentById": get_student_by_id,
}


def _fault_response(fault_code: str, message: str, code: str, status: int) -> Response:
    # SOAP 1.1 over HTTP reports every fault with a 500
    content = envelope.build_fault(
        fault_code=fault_code,
        message=message,
        code=code,
        status=status,
        timestamp=error_timestamp(),
        namespace=settings.SOAP_NAMESPACE
    )
    return Response(content=content, status_code=500, media_type=SOAP_MEDIA_TYPE)


@router.get("/health", response_class=PlainTextResponse)
def health():
    """
    SOAP liveness probe
    """
    return "SOAP API is running! ✓"


@router.post("", response_class=Response)
async def soap_endpoint(
    request: Request,
    service: StudentService = Depends(get_student_service)
):
    """
    Single SOAP 1.1 entry point; dispatches on the Body payload element.

    - **createStudentRequest**: name, age, grade
    - **getStudentByIdRequest**: id
    """
    namespace = settings.SOAP_NAMESPACE
    body = await request.body()
    try:
        operation, payload = envelope.parse_request(body, namespace)
        handler = OPERATIONS.get(operation)
        if handler is None:
            raise BadRequestException(f"Unknown SOAP operation: {operation}")

        student = await run_in_threadpool(handler, service, payload, namespace)
        content = envelope.build_student_response(operation, student, namespace)
        return Response(content=content, media_type=SOAP_MEDIA_TYPE)

    except BaseAPIException as exc:
        logger.info(f"SOAP client fault {exc.code}: {exc.message}")
        return _fault_response("Client", exc.message, exc.code, exc.status_code)

    except Exception as exc:
        logger.critical(f"Unhandled SOAP exception: {exc}", exc_info=True)
        return _fault_response("Server", str(exc), "INTERNAL_SERVER_ERROR", 500)
