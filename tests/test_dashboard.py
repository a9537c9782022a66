"""Testy odvozených přehledů — obsazenost počítačů a počítač studenta."""
from types import SimpleNamespace

from app.config import settings
from app.models.student import Section
from app.schemas.computer import ComputerCreate
from app.schemas.student import StudentCreate
import app.services.allocation_service as ledger
import app.services.computer_service as computers
import app.services.dashboard_service as dashboard
import app.services.projection as projection
import app.services.student_service as students


def _computer(db, name):
    return computers.create_computer(db, ComputerCreate(name=name))


def _student(db, name, roll):
    return students.create_student(db, StudentCreate(name=name, student_id=roll, section=Section.A))


def _counts(db):
    return {c["name"]: c["student_count"] for c in dashboard.computers_with_counts(db)}


def _seats(db):
    return {s["name"]: s["computer_name"] for s in dashboard.students_with_computer(db)}


# ─── projection (pure) ───────────────────────────────────────────────────────

def test_projection_counts_outer_join_rows():
    lab1 = SimpleNamespace(id=1, name="Lab-1")
    lab2 = SimpleNamespace(id=2, name="Lab-2")
    rows = [(lab1, 10), (lab1, 11), (lab2, None)]

    result = projection.computers_with_counts(rows)

    assert [(c.name, n) for c, n in result] == [("Lab-1", 2), ("Lab-2", 0)]


def test_projection_students_one_entry_each():
    alice = SimpleNamespace(id=1, name="Alice")
    bob = SimpleNamespace(id=2, name="Bob")

    result = projection.students_with_computer([(alice, 5, "Lab-5"), (bob, None, None)])

    assert [(s.name, cid, cname) for s, cid, cname in result] == [
        ("Alice", 5, "Lab-5"),
        ("Bob", None, None),
    ]


def test_load_percent_is_capped():
    assert projection.load_percent(0, 10) == 0
    assert projection.load_percent(3, 10) == 30
    assert projection.load_percent(25, 10) == 100


# ─── scenarios ───────────────────────────────────────────────────────────────

def test_scenario_assign_move_delete(db):
    r1 = _computer(db, "Lab-1")
    o1 = _student(db, "Alice", "S1")
    ledger.assign(db, o1.id, r1.id)

    assert _seats(db) == {"Alice": "Lab-1"}
    assert _counts(db) == {"Lab-1": 1}

    r2 = _computer(db, "Lab-2")
    ledger.assign(db, o1.id, r2.id)

    assert ledger.get_student_allocation(db, o1.id).computer_id == r2.id
    assert _counts(db) == {"Lab-1": 0, "Lab-2": 1}

    computers.delete_computer(db, r2.id)

    assert _seats(db) == {"Alice": None}
    assert _counts(db) == {"Lab-1": 0}


def test_self_reassign_keeps_count(db):
    r1 = _computer(db, "Lab-1")
    o1 = _student(db, "Alice", "S1")
    ledger.assign(db, o1.id, r1.id)
    ledger.assign(db, o1.id, r1.id)
    assert _counts(db) == {"Lab-1": 1}


def test_student_delete_decreases_count(db):
    r1 = _computer(db, "Lab-1")
    alice = _student(db, "Alice", "S1")
    bob = _student(db, "Bob", "S2")
    ledger.assign(db, alice.id, r1.id)
    ledger.assign(db, bob.id, r1.id)

    students.delete_student(db, alice.id)

    assert _counts(db) == {"Lab-1": 1}


def test_counts_match_allocation_rows(db):
    labs = [_computer(db, f"Lab-{i}") for i in range(1, 4)]
    people = [_student(db, f"Student {i:02d}", f"S{i}") for i in range(7)]
    for index, person in enumerate(people):
        ledger.assign(db, person.id, labs[index % 2].id)
    ledger.unassign(db, people[0].id)

    expected = {}
    for allocation in ledger.list_allocations(db):
        expected[allocation.computer_id] = expected.get(allocation.computer_id, 0) + 1

    result = dashboard.computers_with_counts(db)
    assert [c["name"] for c in result] == ["Lab-1", "Lab-2", "Lab-3"]
    assert {c["id"]: c["student_count"] for c in result} == {
        lab.id: expected.get(lab.id, 0) for lab in labs
    }


def test_students_sorted_with_computer(db):
    r1 = _computer(db, "Lab-1")
    carol = _student(db, "Carol", "S3")
    _student(db, "Alice", "S1")
    ledger.assign(db, carol.id, r1.id)

    result = dashboard.students_with_computer(db)

    assert [s["name"] for s in result] == ["Alice", "Carol"]
    assert result[0]["computer_id"] is None
    assert result[1]["computer_id"] == r1.id
    assert result[1]["computer_name"] == "Lab-1"


def test_load_percent_uses_capacity_hint(db, monkeypatch):
    monkeypatch.setattr(settings, "CAPACITY_HINT", 4)
    r1 = _computer(db, "Lab-1")
    ledger.assign(db, _student(db, "Alice", "S1").id, r1.id)

    assert dashboard.computers_with_counts(db)[0]["load_percent"] == 25
