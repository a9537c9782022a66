import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.database import transaction
from app.errors import NotFound, ValidationError
from app.models.computer import Computer
from app.schemas.computer import ComputerCreate, ComputerUpdate
import app.services.allocation_service as ledger

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def list_computers(db: Session) -> list[Computer]:
    return db.scalars(select(Computer).order_by(Computer.name, Computer.id)).all()


def find_computer(db: Session, computer_id: int) -> Computer | None:
    return db.get(Computer, computer_id)


def get_computer(db: Session, computer_id: int) -> Computer:
    computer = db.get(Computer, computer_id)
    if not computer:
        raise NotFound("Počítač nenalezen")
    return computer


def create_computer(db: Session, data: ComputerCreate) -> Computer:
    name = _clean(data.name)
    if not name:
        raise ValidationError("Název počítače je povinný")
    computer = Computer(name=name, location=_clean(data.location))
    with transaction(db):
        db.add(computer)
    db.refresh(computer)
    return computer


def update_computer(db: Session, computer_id: int, data: ComputerUpdate) -> Computer:
    computer = get_computer(db, computer_id)
    changes = {field: _clean(value) for field, value in data.model_dump(exclude_unset=True).items()}
    if "name" in changes and not changes["name"]:
        raise ValidationError("Název počítače je povinný")
    with transaction(db):
        for field, value in changes.items():
            setattr(computer, field, value)
    db.refresh(computer)
    return computer


def delete_computer(db: Session, computer_id: int) -> None:
    with transaction(db):
        computer = get_computer(db, computer_id)
        released = ledger.release_computer(db, computer_id)
        db.delete(computer)
    logger.info("Počítač %s smazán, uvolněno přiřazení: %s", computer_id, released)
