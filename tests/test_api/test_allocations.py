"""API testy pro /api/allocations — výměna, nikdy úprava na místě."""


def _lab(client):
    r1 = client.post("/api/computers", json={"name": "Lab-1"}).json()["id"]
    r2 = client.post("/api/computers", json={"name": "Lab-2"}).json()["id"]
    o1 = client.post("/api/students", json={"name": "Alice", "student_id": "S1", "section": "A"}).json()["id"]
    return r1, r2, o1


def test_assign(client):
    r1, _r2, o1 = _lab(client)
    res = client.post("/api/allocations", json={"student_id": o1, "computer_id": r1})
    assert res.status_code == 201
    data = res.json()
    assert data["student_id"] == o1
    assert data["computer_id"] == r1
    assert "allocated_at" in data


def test_reassign_replaces_row(client):
    r1, r2, o1 = _lab(client)
    first = client.post("/api/allocations", json={"student_id": o1, "computer_id": r1}).json()
    second = client.post("/api/allocations", json={"student_id": o1, "computer_id": r2}).json()

    assert first["id"] != second["id"]
    allocations = client.get("/api/allocations").json()
    assert [a["id"] for a in allocations] == [second["id"]]
    assert client.get(f"/api/allocations/{first['id']}").status_code == 404

    counts = {c["name"]: c["student_count"] for c in client.get("/api/computers").json()}
    assert counts == {"Lab-1": 0, "Lab-2": 1}


def test_assign_unknown_student(client):
    r1, _r2, _o1 = _lab(client)
    res = client.post("/api/allocations", json={"student_id": 99999, "computer_id": r1})
    assert res.status_code == 404


def test_assign_unknown_computer(client):
    _r1, _r2, o1 = _lab(client)
    res = client.post("/api/allocations", json={"student_id": o1, "computer_id": 99999})
    assert res.status_code == 404


def test_remove_allocation(client):
    r1, _r2, o1 = _lab(client)
    allocation_id = client.post("/api/allocations", json={"student_id": o1, "computer_id": r1}).json()["id"]

    res = client.delete(f"/api/allocations/{allocation_id}")
    assert res.status_code == 204
    assert client.get("/api/allocations").json() == []


def test_remove_missing_allocation(client):
    res = client.delete("/api/allocations/99999")
    assert res.status_code == 404


def test_list_allocations_newest_first(client):
    r1, r2, o1 = _lab(client)
    o2 = client.post("/api/students", json={"name": "Bob", "student_id": "S2", "section": "B"}).json()["id"]
    a1 = client.post("/api/allocations", json={"student_id": o1, "computer_id": r1}).json()["id"]
    a2 = client.post("/api/allocations", json={"student_id": o2, "computer_id": r2}).json()["id"]

    res = client.get("/api/allocations")
    assert res.status_code == 200
    assert [a["id"] for a in res.json()] == [a2, a1]
