"""
GraphQL front-end for students, built with Strawberry.

    type Query    { studentById(id: ID!): Student }
    type Mutation { createStudent(name: String!, age: Int!, grade: String!): Student! }

Errors carry ``extensions.classification`` (NOT_FOUND, BAD_REQUEST,
INTERNAL_ERROR), ``extensions.status`` and ``extensions.timestamp``.
"""
import logging
import re
from typing import Optional

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from starlette.concurrency import run_in_threadpool
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from student_crud.api.deps import get_student_service
from student_crud.core.config import settings
from student_crud.core.exceptions import NotFoundException
from student_crud.core.handlers import error_timestamp
from student_crud.schemas.student import StudentCreate, StudentResponse
from student_crud.services.student.student import StudentService

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only; int() alone also takes "1_000" and " 5 "
STRICT_ID = re.compile(r"[+-]?[0-9]+")


@strawberry.type(name="Student")
class StudentType:
    id: strawberry.ID
    name: str
    age: int
    grade: str

    @classmethod
    def from_response(cls, student: StudentResponse) -> "StudentType":
        return cls(
            id=strawberry.ID(str(student.id)),
            name=student.name,
            age=student.age,
            grade=student.grade
        )


def _error(message: str, classification: str, status: int) -> GraphQLError:
    return GraphQLError(
        message,
        extensions={
            "classification": classification,
            "status": status,
            "timestamp": error_timestamp()
        }
    )


def _service(info: Info) -> StudentService:
    return info.context["student_service"]


@strawberry.type
class Query:
    @strawberry.field
    async def student_by_id(self, info: Info, id: strawberry.ID) -> Optional[StudentType]:
        if not STRICT_ID.fullmatch(id):
            raise _error(f"Invalid student id: {id}", "BAD_REQUEST", 400)

        student_id = int(id)
        try:
            student = await run_in_threadpool(_service(info).get_by_id, student_id)
        except NotFoundException as exc:
            raise _error(exc.message, "NOT_FOUND", exc.status_code)
        except Exception as exc:
            logger.critical(f"Unhandled GraphQL exception: {exc}", exc_info=True)
            raise _error(str(exc), "INTERNAL_ERROR", 500)
        return StudentType.from_response(student)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_student(self, info: Info, name: str, age: int, grade: str) -> StudentType:
        request = StudentCreate(name=name, age=age, grade=grade)
        try:
            student = await run_in_threadpool(_service(info).create, request)
        except Exception as exc:
            logger.critical(f"Unhandled GraphQL exception: {exc}", exc_info=True)
            raise _error(str(exc), "INTERNAL_ERROR", 500)
        return StudentType.from_response(student)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(service: StudentService = Depends(get_student_service)):
    return {"student_service": service}


graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.GRAPHQL_IDE else None,
)
