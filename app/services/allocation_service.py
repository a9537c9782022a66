import logging
import threading
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import transaction
from app.errors import NotFound, ConflictError
from app.models.allocation import Allocation
from app.models.computer import Computer
from app.models.student import Student

logger = logging.getLogger(__name__)

# ── Per-student serialisation (single process) ─────────────────────────────
# Across processes the unique(student_id) constraint catches the race instead.
# student_id -> [lock, holders + waiters]; the entry lives only while in use.
_student_locks: dict[int, list] = {}
_student_locks_guard = threading.Lock()


@contextmanager
def _student_lock(student_id: int) -> Generator[None, None, None]:
    with _student_locks_guard:
        entry = _student_locks.get(student_id)
        if entry is None:
            entry = _student_locks[student_id] = [threading.Lock(), 0]
        entry[1] += 1
    try:
        with entry[0]:
            yield
    finally:
        with _student_locks_guard:
            entry[1] -= 1
            if entry[1] == 0:
                del _student_locks[student_id]


def assign(db: Session, student_id: int, computer_id: int) -> Allocation:
    """Seat a student at a computer, replacing any current allocation.

    The old row is deleted and a new one inserted in a single transaction,
    so the result always has a fresh id and allocated_at, even when the
    computer did not change. The returned allocation is detached and fully
    loaded, so a concurrent delete after the commit cannot break it.
    """
    with _student_lock(student_id):
        for attempt in range(settings.ASSIGN_MAX_RETRIES + 1):
            try:
                allocation, previous_computer_id = _replace(db, student_id, computer_id)
            except IntegrityError:
                logger.warning(
                    "Kolize při přiřazení studenta %s (pokus %s), opakuji",
                    student_id, attempt + 1,
                )
                continue
            if previous_computer_id is None:
                logger.info("Student %s přiřazen k počítači %s", student_id, computer_id)
            else:
                logger.info(
                    "Student %s přesunut z počítače %s na %s",
                    student_id, previous_computer_id, computer_id,
                )
            return allocation

    logger.error("Přiřazení studenta %s se nepodařilo dokončit", student_id)
    raise ConflictError()


def _replace(db: Session, student_id: int, computer_id: int) -> tuple[Allocation, int | None]:
    with transaction(db):
        if db.get(Student, student_id) is None:
            raise NotFound("Student nenalezen")
        if db.get(Computer, computer_id) is None:
            raise NotFound("Počítač nenalezen")

        previous_computer_id = db.scalar(
            select(Allocation.computer_id).where(Allocation.student_id == student_id)
        )
        db.execute(delete(Allocation).where(Allocation.student_id == student_id))

        allocation = Allocation(student_id=student_id, computer_id=computer_id)
        db.add(allocation)
        db.flush()
        # Load the stored values now and keep the commit from expiring them
        db.refresh(allocation)
        db.expunge(allocation)
    return allocation, previous_computer_id


def unassign(db: Session, student_id: int) -> None:
    """Remove the student's allocation. No-op when there is none."""
    with _student_lock(student_id):
        with transaction(db):
            result = db.execute(delete(Allocation).where(Allocation.student_id == student_id))
    if result.rowcount:
        logger.info("Student %s odebrán z počítače", student_id)


def remove(db: Session, allocation_id: int) -> None:
    with transaction(db):
        allocation = db.get(Allocation, allocation_id)
        if allocation is None:
            raise NotFound("Přiřazení nenalezeno")
        student_id = allocation.student_id
        db.delete(allocation)
    logger.info("Přiřazení %s (student %s) smazáno", allocation_id, student_id)


def get_allocation(db: Session, allocation_id: int) -> Allocation:
    allocation = db.get(Allocation, allocation_id)
    if allocation is None:
        raise NotFound("Přiřazení nenalezeno")
    return allocation


def get_student_allocation(db: Session, student_id: int) -> Allocation | None:
    return db.scalar(select(Allocation).where(Allocation.student_id == student_id))


def list_allocations(db: Session) -> list[Allocation]:
    return db.scalars(
        select(Allocation).order_by(Allocation.allocated_at.desc(), Allocation.id.desc())
    ).all()


def list_students_at_computer(db: Session, computer_id: int) -> list[Student]:
    if db.get(Computer, computer_id) is None:
        raise NotFound("Počítač nenalezen")
    return db.scalars(
        select(Student)
        .join(Allocation, Allocation.student_id == Student.id)
        .where(Allocation.computer_id == computer_id)
        .order_by(Student.name, Student.id)
    ).all()


def list_computer_allocations(db: Session, computer_id: int) -> list[Allocation]:
    if db.get(Computer, computer_id) is None:
        raise NotFound("Počítač nenalezen")
    return db.scalars(
        select(Allocation)
        .where(Allocation.computer_id == computer_id)
        .order_by(Allocation.allocated_at.desc(), Allocation.id.desc())
    ).all()


# ── Cascade cleanup, run inside the registry's delete transaction ──────────

def release_computer(db: Session, computer_id: int) -> int:
    result = db.execute(delete(Allocation).where(Allocation.computer_id == computer_id))
    return result.rowcount


def release_student(db: Session, student_id: int) -> int:
    result = db.execute(delete(Allocation).where(Allocation.student_id == student_id))
    return result.rowcount
