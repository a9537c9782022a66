"""Seed script — naplní DB testovacími daty."""
import os
import sys

# Ensure we're in the project root
sys.path.insert(0, os.path.dirname(__file__))

from app.database import Base, engine, SessionLocal
from app.models.computer import Computer
from app.models.student import Student, Section
import app.services.allocation_service as ledger


def seed():
    os.makedirs("data", exist_ok=True)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    # Computers
    computers = [
        Computer(name="Lab-1", location="Učebna 101"),
        Computer(name="Lab-2", location="Učebna 101"),
        Computer(name="Lab-3", location="Učebna 102"),
        Computer(name="Lab-4", location="Učebna 102"),
    ]
    existing_names = {c.name for c in db.query(Computer).all()}
    for computer in computers:
        if computer.name not in existing_names:
            db.add(computer)

    # Students
    students_data = [
        ("Alena Nováková", "S001", Section.A),
        ("Boris Král", "S002", Section.A),
        ("Cyril Dvořák", "S003", Section.B),
        ("Dana Svobodová", "S004", Section.B),
        ("Emil Černý", "S005", Section.C),
        ("Filip Horák", "S006", Section.C),
    ]
    existing_ids = {s.student_id for s in db.query(Student).all()}
    for name, roll, section in students_data:
        if roll not in existing_ids:
            db.add(Student(name=name, student_id=roll, section=section))

    db.commit()

    # Allocations — two students per computer, only for students without a seat
    computers_all = db.query(Computer).order_by(Computer.name).all()
    students_all = db.query(Student).order_by(Student.student_id).all()
    for index, student in enumerate(students_all):
        if not computers_all or ledger.get_student_allocation(db, student.id):
            continue
        computer = computers_all[(index // 2) % len(computers_all)]
        ledger.assign(db, student.id, computer.id)

    db.close()
    print("✅ Seed dokončen!")


if __name__ == "__main__":
    seed()
