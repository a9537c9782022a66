"""Testy exportu rozpisu do Excelu."""
import io

from openpyxl import load_workbook


def test_roster_export(client):
    computer_id = client.post("/api/computers", json={"name": "Lab-1"}).json()["id"]
    student_id = client.post(
        "/api/students", json={"name": "Alice", "student_id": "S1", "section": "A"}
    ).json()["id"]
    client.post("/api/students", json={"name": "Bob", "student_id": "S2", "section": "B"})
    client.post("/api/allocations", json={"student_id": student_id, "computer_id": computer_id})

    res = client.get("/api/export/roster.xlsx")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/vnd.openxmlformats")

    wb = load_workbook(io.BytesIO(res.content))
    assert wb.sheetnames == ["Počítače", "Studenti"]
    computers = list(wb["Počítače"].iter_rows(min_row=2, values_only=True))
    assert [(row[0], row[1], row[3], row[4]) for row in computers] == [(computer_id, "Lab-1", 1, 10)]
    students = list(wb["Studenti"].iter_rows(min_row=2, values_only=True))
    assert [(row[1], row[4]) for row in students] == [("Alice", "Lab-1"), ("Bob", "Nepřiřazen")]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
