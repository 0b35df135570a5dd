from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from config import load_settings
import manage_db
from manage_db import create_tables, drop_tables, list_tables, seed_statuses, DEFAULT_STATUSES


def _engine():
    return create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)


class TestManageDB:

    def test_create_and_drop_tables(self):
        engine = _engine()
        assert list_tables(engine) == []

        create_tables(engine)
        assert list_tables(engine) == ["labels", "statuses", "tasks", "tasks_labels", "users"]

        drop_tables(engine)
        assert list_tables(engine) == []

    def test_seed_statuses_is_idempotent(self):
        engine = _engine()
        create_tables(engine)

        assert seed_statuses(engine) == DEFAULT_STATUSES
        assert seed_statuses(engine) == []
        assert seed_statuses(engine, names=["new", "blocked"]) == ["blocked"]

    def test_cli_logging_follows_settings(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(manage_db, "setup_logging", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_DIR", str(tmp_path))

        manage_db.configure_logging(load_settings())

        assert calls == [{"level": "DEBUG", "log_dir": str(tmp_path)}]
