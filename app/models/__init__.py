from app.models.computer import Computer
from app.models.student import Student, Section
from app.models.allocation import Allocation

__all__ = ["Computer", "Student", "Section", "Allocation"]
