from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.computer import ComputerCreate, ComputerUpdate, ComputerResponse, ComputerWithCount
from app.schemas.student import StudentResponse
from app.schemas.allocation import AllocationResponse
import app.services.computer_service as svc
import app.services.allocation_service as ledger
import app.services.dashboard_service as dashboard

router = APIRouter(prefix="/api/computers", tags=["computers"])


@router.get("", response_model=list[ComputerWithCount])
def list_computers(db: Session = Depends(get_db)):
    return dashboard.computers_with_counts(db)


@router.post("", response_model=ComputerResponse, status_code=201)
def create_computer(data: ComputerCreate, db: Session = Depends(get_db)):
    return svc.create_computer(db, data)


@router.get("/{computer_id}", response_model=ComputerResponse)
def get_computer(computer_id: int, db: Session = Depends(get_db)):
    return svc.get_computer(db, computer_id)


@router.put("/{computer_id}", response_model=ComputerResponse)
def update_computer(computer_id: int, data: ComputerUpdate, db: Session = Depends(get_db)):
    return svc.update_computer(db, computer_id, data)


@router.delete("/{computer_id}", status_code=204)
def delete_computer(computer_id: int, db: Session = Depends(get_db)):
    svc.delete_computer(db, computer_id)
    return Response(status_code=204)


@router.get("/{computer_id}/students", response_model=list[StudentResponse])
def students_at_computer(computer_id: int, db: Session = Depends(get_db)):
    return ledger.list_students_at_computer(db, computer_id)


@router.get("/{computer_id}/allocations", response_model=list[AllocationResponse])
def computer_allocations(computer_id: int, db: Session = Depends(get_db)):
    return ledger.list_computer_allocations(db, computer_id)
