# tests/test_db_config.py
"""Tests for the database configuration module."""

from sqlalchemy.pool import StaticPool

from db_config import DEFAULT_DATABASE_URL, DatabaseConfig, DatabaseMode


class TestDatabaseConfig:
    """Tests for DatabaseConfig class."""

    def setup_method(self):
        """Reset config before each test."""
        DatabaseConfig.reset()

    def teardown_method(self):
        DatabaseConfig.reset()

    def test_default_mode_is_disk(self):
        assert not DatabaseConfig.is_memory_mode()

    def test_set_memory_mode(self):
        DatabaseConfig.set_mode(DatabaseMode.MEMORY)
        assert DatabaseConfig.is_memory_mode()

    def test_disk_mode_defaults_to_local_sqlite(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert DatabaseConfig.get_database_uri() == DEFAULT_DATABASE_URL

    def test_disk_mode_uses_database_url(self, monkeypatch):
        """Disk mode should use DATABASE_URL if set."""
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/perfpages")
        assert DatabaseConfig.get_database_uri() == "postgresql://localhost/perfpages"

    def test_memory_mode_ignores_database_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/perfpages")
        DatabaseConfig.set_mode(DatabaseMode.MEMORY)
        assert DatabaseConfig.get_database_uri() == "sqlite:///:memory:"

    def test_memory_engine_shares_one_connection(self):
        options = DatabaseConfig.get_engine_options("sqlite:///:memory:")
        assert options["poolclass"] is StaticPool
        assert options["connect_args"] == {"check_same_thread": False}

    def test_disk_engine_checks_connections(self):
        options = DatabaseConfig.get_engine_options("postgresql://localhost/perfpages")
        assert options == {"pool_pre_ping": True, "pool_recycle": 300}

    def test_set_memory_mode_logs_warning(self, caplog):
        DatabaseConfig.set_mode(DatabaseMode.MEMORY)
        assert "memory-only database" in caplog.text
