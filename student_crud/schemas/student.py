from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str
    age: int
    grade: str


class StudentCreate(StudentBase):
    """Create-input shape: everything but the id."""
    pass


class StudentResponse(StudentBase):
    """Output shape returned by every protocol."""
    id: int

    model_config = ConfigDict(from_attributes=True)
