from fastapi.testclient import TestClient

from main import app
from tools.check_alembic_single_head import main as check_single_head

client = TestClient(app)


def test_health_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_health_db():
    r = client.get("/health/db")
    assert r.status_code == 200 and r.json()["ok"] is True


def test_health_migrations_basic():
    r = client.get("/health/migrations")
    assert r.status_code == 200
    b = r.json()
    assert b["code_heads"] == ["7c2e4a91d3b0"]
    # test database is built with create_all, never stamped
    assert b["db_version"] is None
    assert b["ok"] is False


def test_single_alembic_head(capsys):
    assert check_single_head() == 0
    assert "7c2e4a91d3b0" in capsys.readouterr().out
