from sqlalchemy.orm import Session
from sqlalchemy import select
from app.config import settings
from app.models.allocation import Allocation
from app.models.computer import Computer
from app.models.student import Student
import app.services.projection as projection


def computers_with_counts(db: Session) -> list[dict]:
    # One statement, so the computer list and the counts come from the same snapshot
    rows = db.execute(
        select(Computer, Allocation.id)
        .outerjoin(Allocation, Allocation.computer_id == Computer.id)
        .order_by(Computer.name, Computer.id)
    ).all()
    return [
        _computer_dict(computer, count)
        for computer, count in projection.computers_with_counts(rows)
    ]


def students_with_computer(db: Session) -> list[dict]:
    rows = db.execute(
        select(Student, Computer.id, Computer.name)
        .outerjoin(Allocation, Allocation.student_id == Student.id)
        .outerjoin(Computer, Computer.id == Allocation.computer_id)
        .order_by(Student.name, Student.id)
    ).all()
    return [
        _student_dict(student, computer_id, computer_name)
        for student, computer_id, computer_name in projection.students_with_computer(rows)
    ]


def _computer_dict(computer: Computer, count: int) -> dict:
    return {
        "id": computer.id,
        "name": computer.name,
        "location": computer.location,
        "created_at": computer.created_at,
        "updated_at": computer.updated_at,
        "student_count": count,
        "load_percent": projection.load_percent(count, settings.CAPACITY_HINT),
    }


def _student_dict(student: Student, computer_id: int | None, computer_name: str | None) -> dict:
    return {
        "id": student.id,
        "name": student.name,
        "student_id": student.student_id,
        "section": student.section,
        "created_at": student.created_at,
        "updated_at": student.updated_at,
        "computer_id": computer_id,
        "computer_name": computer_name,
    }
