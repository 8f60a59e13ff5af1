import random

from fastapi.testclient import TestClient

from deps.practice import get_configuration, get_rng
from main import app
from practice.configuration import Configuration, Operator
from practice.hint_state import HintState
from routers.sessions import _update

client = TestClient(app)


def _use(config, seed=1):
    app.dependency_overrides[get_configuration] = lambda: config
    app.dependency_overrides[get_rng] = lambda: random.Random(seed)


def test_generate_problem_from_settings():
    client.put("/settings", json={"enabled_operations": ["/"], "digits_operand2": 1})
    r = client.post("/problems")
    assert r.status_code == 200
    p = r.json()
    assert p["operator"] == "/"
    assert p["operand1"] == p["operand2"] * p["answer"]
    assert 1 <= p["operand2"] < 10


def test_analysis_endpoints():
    r = client.post(
        "/analysis/carries", json={"operand1": 18, "operand2": 7, "operator": "+", "answer": 25}
    )
    assert r.json() == {"carries": [False, True, False], "row": "1 "}

    r = client.post(
        "/analysis/borrows", json={"operand1": 500, "operand2": 7, "operator": "-", "answer": 493}
    )
    digits = r.json()["digits"]
    assert [d["value_after_lending"] for d in digits] == ["4", "9", None]
    assert digits[2]["value_after_borrowing"] == "10"

    r = client.post(
        "/analysis/partial-sums",
        json={"operand1": 123, "operand2": 456, "operator": "+", "answer": 579},
    )
    body = r.json()
    assert body["total"] == 579
    assert [i["numeral"] for i in body["items"]] == ["  500", "   70", "    9"]


def test_analysis_rejects_inconsistent_problem():
    r = client.post(
        "/analysis/carries", json={"operand1": 18, "operand2": 7, "operator": "+", "answer": 26}
    )
    assert r.status_code == 422


def test_session_hint_cycle_for_addition():
    _use(Configuration(enabled_operations=frozenset({Operator.ADDITION})))
    r = client.post("/sessions")
    assert r.status_code == 201
    session = r.json()
    sid = session["id"]
    assert session["hint_state"] == "none" and session["show_answer"] is False

    states = [client.post(f"/sessions/{sid}/hint").json()["hint_state"] for _ in range(4)]
    assert states == ["show_answer", "multi_layer", "standard", "none"]


def test_session_hint_views():
    _use(Configuration(enabled_operations=frozenset({Operator.SUBTRACTION}), digits_operand1=3))
    sid = client.post("/sessions").json()["id"]

    view = client.get(f"/sessions/{sid}/hint").json()
    assert view["state"] == "none" and view["answer"] is None

    client.post(f"/sessions/{sid}/hint")
    session = client.get(f"/sessions/{sid}").json()
    view = client.get(f"/sessions/{sid}/hint").json()
    assert view["answer"] == session["problem"]["answer"]

    client.post(f"/sessions/{sid}/hint")
    view = client.get(f"/sessions/{sid}/hint").json()
    assert view["state"] == "standard"
    assert len(view["borrows"]["digits"]) == 3


def test_next_problem_resets_hint_and_scratch():
    _use(Configuration())
    sid = client.post("/sessions").json()["id"]
    client.post(f"/sessions/{sid}/hint")
    r = client.post(f"/sessions/{sid}/scratch/strokes", json={"points": [[0, 0], [3, 4]]})
    assert r.json()["scratchpad"]["strokes"] == [[[0.0, 0.0], [3.0, 4.0]]]

    r = client.post(f"/sessions/{sid}/next")
    body = r.json()
    assert body["hint_state"] == "none"
    assert body["scratchpad"]["strokes"] == []
    assert body["problem_count"] == 2


def test_scratch_undo_and_clear():
    _use(Configuration())
    sid = client.post("/sessions").json()["id"]
    for x in range(3):
        client.post(f"/sessions/{sid}/scratch/strokes", json={"points": [[x, x]]})
    r = client.post(f"/sessions/{sid}/scratch/undo")
    assert len(r.json()["scratchpad"]["strokes"]) == 2
    r = client.delete(f"/sessions/{sid}/scratch")
    assert r.json()["scratchpad"]["strokes"] == []


def test_empty_stroke_is_rejected():
    _use(Configuration())
    sid = client.post("/sessions").json()["id"]
    r = client.post(f"/sessions/{sid}/scratch/strokes", json={"points": []})
    assert r.status_code == 422


def test_unknown_session_is_404():
    assert client.get("/sessions/999999").status_code == 404
    assert client.post("/sessions/999999/hint").status_code == 404
    assert client.get("/sessions/999999/hint").status_code == 404


def test_sessions_start_at_the_largest_digit_counts():
    client.put(
        "/settings",
        json={"digits_operand1": 9, "digits_operand2": 9, "enabled_operations": ["+", "-", "*", "/"]},
    )
    client.put("/settings", json={"digits_operand1": 20, "digits_operand2": 20})
    app.dependency_overrides[get_rng] = lambda: random.Random(7)
    for _ in range(12):
        r = client.post("/sessions")
        assert r.status_code == 201
        sid = r.json()["id"]
        assert client.post(f"/sessions/{sid}/next").status_code == 200


def test_concurrent_hint_change_is_not_lost():
    _use(Configuration(enabled_operations=frozenset({Operator.SUBTRACTION})))
    sid = client.post("/sessions").json()["id"]
    seen = []

    def cycle(s):
        seen.append(s.hint_state)
        if len(seen) == 1:
            # another request lands between our read and our write
            client.post(f"/sessions/{sid}/hint")
        return s.cycle_hint()

    out = _update(sid, cycle)
    assert seen == [HintState.NONE, HintState.SHOW_ANSWER]
    assert out.hint_state is HintState.STANDARD
    assert client.get(f"/sessions/{sid}").json()["hint_state"] == "standard"
