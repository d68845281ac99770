from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the barkeep package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from barkeep.core import config as core_config  # noqa: E402
from barkeep.db import models  # noqa: E402
from barkeep.db.create_tables import create_all  # noqa: E402
from barkeep.db import session as db_session  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("DEMO_EMAIL", "demo@barkeep.test")
    monkeypatch.setenv("GRAVATAR_BASE_URL", "https://gravatar.test/avatar")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_all()

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def repo(temp_db):
    from barkeep.repositories.sql_repository import SQLRepository

    return SQLRepository()


@pytest.fixture()
def demo_user(repo):
    return repo.create_user("demo@barkeep.test", username="demo", permission="demo")


@pytest.fixture()
def normal_user(repo):
    return repo.create_user("Alice@Example.com", username="alice")
