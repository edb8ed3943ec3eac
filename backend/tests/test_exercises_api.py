import uuid
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from exercise_tracker.main import app
from exercise_tracker.repositories.exercise_repo import ExerciseRepository

client = TestClient(app)

def make_user(name=None):
    name = name or f"u-{uuid.uuid4().hex[:8]}"
    r = client.post("/api/users", data={"username": name})
    assert r.status_code == 200, r.text
    return r.json()

def add(user_id, **fields):
    return client.post(f"/api/users/{user_id}/exercises", data=fields)

def test_log_exercise_and_read_back():
    alice = make_user("alice")
    r = add(alice["id"], description="run", duration="30", date="2023-05-01")
    assert r.status_code == 200, r.text
    assert r.json() == {
        "id": alice["id"],
        "username": "alice",
        "date": "Mon May 01 2023",
        "duration": 30,
        "description": "run",
    }

    r = client.get(f"/api/users/{alice['id']}/logs")
    assert r.status_code == 200
    assert r.json() == {
        "username": "alice",
        "count": 1,
        "id": alice["id"],
        "log": [{"description": "run", "duration": 30, "date": "Mon May 01 2023"}],
    }

def test_log_exercise_json_body_with_numeric_duration():
    user = make_user()
    r = client.post(f"/api/users/{user['id']}/exercises",
                    json={"description": "bike", "duration": 45, "date": "1990-01-01"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["duration"] == 45
    assert body["date"] == "Mon Jan 01 1990"

def test_log_exercise_unknown_user_404():
    r = add("000000000000000000000000", description="run", duration="30")
    assert r.status_code == 404
    assert r.json() == {"error": "user not found"}
    # unknown user wins over bad fields
    r = add("missing", description="", duration="0")
    assert r.status_code == 404

def test_log_exercise_bad_fields_400():
    user = make_user()
    for fields in ({"description": "run"}, {"duration": "30"},
                   {"description": "run", "duration": "0"},
                   {"description": "  ", "duration": "10"},
                   {"description": "run", "duration": "ten"}):
        r = add(user["id"], **fields)
        assert r.status_code == 400, fields
        assert r.json() == {"error": "description and duration are required"}

def test_log_exercise_without_date_uses_today():
    user = make_user()
    first = add(user["id"], description="a", duration="5").json()
    second = add(user["id"], description="b", duration="5", date="not-a-date").json()
    assert first["date"] == second["date"]
    assert len(first["date"].split()) == 4

def test_logs_unknown_user_404():
    r = client.get("/api/users/nobody/logs")
    assert r.status_code == 404
    assert r.json() == {"error": "user not found"}

def seed_five():
    user = make_user()
    for i, d in enumerate(["2023-03-01", "2023-01-01", "2023-02-15", "2022-12-31", "2023-01-20"]):
        assert add(user["id"], description=f"ex{i}", duration=str(10 + i), date=d).status_code == 200
    return user

def test_logs_limit():
    user = seed_five()
    body = client.get(f"/api/users/{user['id']}/logs", params={"limit": 2}).json()
    assert body["count"] == 2
    assert [e["date"] for e in body["log"]] == ["Sat Dec 31 2022", "Sun Jan 01 2023"]

def test_logs_from_to():
    user = seed_five()
    body = client.get(f"/api/users/{user['id']}/logs",
                      params={"from": "2023-01-01", "to": "2023-01-31"}).json()
    assert [e["description"] for e in body["log"]] == ["ex1", "ex4"]
    assert body["count"] == 2

def test_logs_ignore_garbage_params():
    user = seed_five()
    body = client.get(f"/api/users/{user['id']}/logs",
                      params={"from": "x", "to": "y", "limit": "z"}).json()
    assert body["count"] == 5
    dates = [e["date"] for e in body["log"]]
    assert dates[0] == "Sat Dec 31 2022" and dates[-1] == "Wed Mar 01 2023"

def test_logs_limit_too_large_to_cap():
    user = seed_five()
    r = client.get(f"/api/users/{user['id']}/logs", params={"limit": "99999999999999999999"})
    assert r.status_code == 200, r.text
    assert r.json()["count"] == 5

def test_log_exercise_accepts_own_date_format():
    user = make_user()
    r = add(user["id"], description="run", duration="30", date="Mon May 01 2023")
    assert r.json()["date"] == "Mon May 01 2023"
    for raw in ("2023/05/01", "May 1, 2023", "1 May 2023", "2023-5-1"):
        assert add(user["id"], description="run", duration="30", date=raw).json()["date"] == "Mon May 01 2023", raw

def db_down(*args, **kwargs):
    raise OperationalError("SQL", {}, Exception("connection refused"))

def test_log_exercise_database_down(monkeypatch):
    user = make_user()
    monkeypatch.setattr(ExerciseRepository, "create", db_down)
    r = add(user["id"], description="run", duration="30")
    assert r.status_code == 500
    assert r.json() == {"error": "server error"}

def test_logs_database_down(monkeypatch):
    user = make_user()
    monkeypatch.setattr(ExerciseRepository, "find", db_down)
    r = client.get(f"/api/users/{user['id']}/logs")
    assert r.status_code == 500
    assert r.json() == {"error": "server error"}

def test_unexpected_error_is_json_500(monkeypatch):
    user = make_user()
    def boom(*args, **kwargs):
        raise RuntimeError("driver exploded")
    monkeypatch.setattr(ExerciseRepository, "find", boom)
    # the server-error middleware re-raises after responding; look at the response only
    quiet = TestClient(app, raise_server_exceptions=False)
    r = quiet.get(f"/api/users/{user['id']}/logs")
    assert r.status_code == 500
    assert r.json() == {"error": "server error"}
