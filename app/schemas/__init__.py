from app.schemas.computer import ComputerCreate, ComputerUpdate, ComputerResponse, ComputerWithCount
from app.schemas.student import StudentCreate, StudentUpdate, StudentResponse, StudentWithComputer
from app.schemas.allocation import AssignRequest, AllocationResponse

__all__ = [
    "ComputerCreate", "ComputerUpdate", "ComputerResponse", "ComputerWithCount",
    "StudentCreate", "StudentUpdate", "StudentResponse", "StudentWithComputer",
    "AssignRequest", "AllocationResponse",
]
