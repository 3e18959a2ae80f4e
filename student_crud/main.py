from contextlib import asynccontextmanager

from fastapi import FastAPI
from student_crud.core.config import settings
from student_crud.core.database import init_db
from student_crud.core.handlers import register_exception_handlers
from student_crud.core.logging import logger
from student_crud.api.v1.router import api_router
from student_crud.api.soap.endpoint import router as soap_router
from student_crud.api.graphql.schema import graphql_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(
        f"{settings.PROJECT_NAME} ready: REST {settings.API_V1_PREFIX}/students, "
        f"SOAP {settings.SOAP_PATH}, GraphQL {settings.GRAPHQL_PATH}"
    )
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

register_exception_handlers(app)

# REST, SOAP and GraphQL front-ends over the same student service
app.include_router(api_router, prefix=settings.API_V1_PREFIX)
app.include_router(soap_router, tags=["soap"])
app.include_router(graphql_router, prefix=settings.GRAPHQL_PATH, tags=["graphql"])


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "status": "running",
        "message": "Welcome to Student CRUD API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }
