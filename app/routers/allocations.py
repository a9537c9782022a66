from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.allocation import AssignRequest, AllocationResponse
import app.services.allocation_service as svc

router = APIRouter(prefix="/api/allocations", tags=["allocations"])


@router.get("", response_model=list[AllocationResponse])
def list_allocations(db: Session = Depends(get_db)):
    return svc.list_allocations(db)


@router.post("", response_model=AllocationResponse, status_code=201)
def assign(data: AssignRequest, db: Session = Depends(get_db)):
    """Seat a student; an existing allocation of the student is replaced."""
    return svc.assign(db, data.student_id, data.computer_id)


@router.get("/{allocation_id}", response_model=AllocationResponse)
def get_allocation(allocation_id: int, db: Session = Depends(get_db)):
    return svc.get_allocation(db, allocation_id)


@router.delete("/{allocation_id}", status_code=204)
def remove_allocation(allocation_id: int, db: Session = Depends(get_db)):
    svc.remove(db, allocation_id)
    return Response(status_code=204)
