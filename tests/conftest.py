import os
import tempfile

import pytest

# Point the app at a throwaway SQLite file before db.py builds its engine.
_DB_DIR = tempfile.mkdtemp(prefix="calcu-later-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "practice.db")

from db import Base, SessionLocal, engine  # noqa: E402
from models import Setting  # noqa: E402

Base.metadata.create_all(engine)


@pytest.fixture(autouse=True)
def _fresh_settings():
    with SessionLocal() as db:
        db.query(Setting).delete()
        db.commit()
    yield
    from main import app

    app.dependency_overrides.clear()
