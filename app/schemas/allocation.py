from datetime import datetime
from pydantic import BaseModel


class AssignRequest(BaseModel):
    student_id: int
    computer_id: int


class AllocationResponse(BaseModel):
    id: int
    student_id: int
    computer_id: int
    allocated_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
