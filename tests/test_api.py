import pytest
from fastapi.testclient import TestClient

from crossedwires.api.main import create_app

EXAMPLE_3 = "R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51\nU98,R91,D20,R16,D67,R40,U7,R15,U6,R7"


@pytest.fixture
def client():
    return TestClient(create_app())


def test_solve_shows_requested_answers(client):
    resp = client.post("/api/solve", json={
        "input": EXAMPLE_3,
        "options": {"show_solution1": True, "show_solution2": True},
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["solution1"] == "135"
    assert body["solution2"] == "410"
    assert body["rule_count"] == 2
    assert len(body["report"]["wires"]) == 2
    assert body["report"]["intersections"]


def test_solve_hides_answers_by_default(client):
    body = client.post("/api/solve", json={"input": EXAMPLE_3}).json()
    assert body["solution1"] is None
    assert body["solution2"] is None


def test_solve_can_hide_intersections(client):
    body = client.post("/api/solve", json={
        "input": EXAMPLE_3,
        "options": {"show_intersections": False},
    }).json()
    assert body["report"]["intersections"] == []


def test_solve_single_wire(client):
    body = client.post("/api/solve", json={
        "input": "R8,U5",
        "options": {"show_solution1": True, "show_solution2": True},
    }).json()
    assert body["solution1"] is None
    assert body["solution2"] is None
    assert body["report"]["intersections"] == []


def test_solve_rejects_oversized_input(client):
    resp = client.post("/api/solve", json={"input": "R1," * 100_000})
    assert resp.status_code == 413


def test_frame(client):
    resp = client.post("/api/frame", json={"input": "R8,U5,L5,D3\nU7,R6,D4,L4", "step": 15})

    assert resp.status_code == 200
    body = resp.json()
    assert body["endstep"] == 21
    assert body["traces"][1][-1] == {"x": 6, "y": -5}
    assert len(body["intersections"]) == 1


def test_frame_rejects_negative_step(client):
    resp = client.post("/api/frame", json={"input": "R8", "step": -1})
    assert resp.status_code == 422


def test_sample(client):
    body = client.get("/api/sample").json()
    assert body["input"].startswith("R997,D443")
    assert len(body["input"].splitlines()) == 2


def test_rules(client):
    assert [r["id"] for r in client.get("/api/rules").json()] == ["part1.closest", "part2.fastest"]
    assert client.get("/api/rules/part1.closest").json()["name"] == "Closest Intersection"
    assert client.get("/api/rules/nope").status_code == 404


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_solve_large_answer_is_exact(client):
    body = client.post("/api/solve", json={
        "input": "R1234567,D10\nD5,R2000000",
        "options": {"show_solution1": True, "show_solution2": True},
    }).json()
    assert body["solution1"] == "1234572"
    assert body["solution2"] == "2469144"


def test_grid_points_serialise_as_integers(client):
    body = client.post("/api/solve", json={"input": "R8,U5\nU7,R6"}).json()
    end = body["report"]["wires"][0]["segments"][0]["end"]
    assert end == {"x": 8, "y": 0}
    assert isinstance(end["x"], int)
