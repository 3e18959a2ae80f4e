import uvicorn

from student_crud.core.config import settings


def main():
    uvicorn.run(
        "student_crud.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    main()
