from sqlalchemy import BigInteger, Column, Integer, String
from student_crud.core.database import Base

# BIGINT on Postgres; SQLite only autoincrements an INTEGER primary key
StudentId = BigInteger().with_variant(Integer(), "sqlite")


class Student(Base):
    __tablename__ = "students"

    id = Column(StudentId, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    grade = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, name={self.name!r}, age={self.age!r}, grade={self.grade!r})"
