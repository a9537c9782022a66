from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.student import StudentCreate, StudentUpdate, StudentResponse, StudentWithComputer
from app.schemas.allocation import AllocationResponse
import app.services.student_service as svc
import app.services.allocation_service as ledger
import app.services.dashboard_service as dashboard

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=list[StudentWithComputer])
def list_students(db: Session = Depends(get_db)):
    return dashboard.students_with_computer(db)


@router.post("", response_model=StudentResponse, status_code=201)
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    return svc.create_student(db, data)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: int, db: Session = Depends(get_db)):
    return svc.get_student(db, student_id)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(student_id: int, data: StudentUpdate, db: Session = Depends(get_db)):
    return svc.update_student(db, student_id, data)


@router.delete("/{student_id}", status_code=204)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    svc.delete_student(db, student_id)
    return Response(status_code=204)


@router.get("/{student_id}/allocation", response_model=AllocationResponse | None)
def student_allocation(student_id: int, db: Session = Depends(get_db)):
    svc.get_student(db, student_id)
    return ledger.get_student_allocation(db, student_id)


@router.delete("/{student_id}/allocation", status_code=204)
def unassign_student(student_id: int, db: Session = Depends(get_db)):
    ledger.unassign(db, student_id)
    return Response(status_code=204)
