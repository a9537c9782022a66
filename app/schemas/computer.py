from datetime import datetime
from pydantic import BaseModel, Field


class ComputerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)


class ComputerCreate(ComputerBase):
    pass


class ComputerUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)


class ComputerResponse(ComputerBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ComputerWithCount(ComputerResponse):
    student_count: int = 0
    load_percent: int = 0  # soft indicator against CAPACITY_HINT, never enforced
