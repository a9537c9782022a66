from datetime import datetime
from pydantic import BaseModel, Field
from app.models.student import Section


class StudentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    student_id: str = Field(..., min_length=1, max_length=64)
    section: Section | None = None


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    student_id: str | None = Field(None, max_length=64)
    section: Section | None = None


class StudentResponse(StudentBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StudentWithComputer(StudentResponse):
    computer_id: int | None = None
    computer_name: str | None = None
