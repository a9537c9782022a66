import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.config import settings
from app.database import transaction
from app.errors import NotFound, ValidationError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate
import app.services.allocation_service as ledger

logger = logging.getLogger(__name__)

_REQUIRED = {
    "name": "Jméno studenta je povinné",
    "student_id": "Číslo studenta je povinné",
}


def _clean(value):
    if isinstance(value, str):
        return value.strip() or None
    return value


def list_students(db: Session) -> list[Student]:
    return db.scalars(select(Student).order_by(Student.name, Student.id)).all()


def find_student(db: Session, student_id: int) -> Student | None:
    return db.get(Student, student_id)


def get_student(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if not student:
        raise NotFound("Student nenalezen")
    return student


def _check_required(fields: dict) -> None:
    for field, message in _REQUIRED.items():
        if field in fields and not fields[field]:
            raise ValidationError(message)
    if settings.STUDENT_SECTION_REQUIRED and "section" in fields and fields["section"] is None:
        raise ValidationError("Vyberte sekci")


def create_student(db: Session, data: StudentCreate) -> Student:
    fields = {field: _clean(value) for field, value in data.model_dump().items()}
    _check_required(fields)
    student = Student(**fields)
    with transaction(db):
        db.add(student)
    db.refresh(student)
    return student


def update_student(db: Session, student_id: int, data: StudentUpdate) -> Student:
    student = get_student(db, student_id)
    changes = {field: _clean(value) for field, value in data.model_dump(exclude_unset=True).items()}
    _check_required(changes)
    with transaction(db):
        for field, value in changes.items():
            setattr(student, field, value)
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int) -> None:
    with transaction(db):
        student = get_student(db, student_id)
        released = ledger.release_student(db, student_id)
        db.delete(student)
    logger.info("Student %s smazán, uvolněno přiřazení: %s", student_id, released)
