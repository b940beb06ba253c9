"""DatabaseFactory 测试"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from infrastructure.config.settings import Settings
from infrastructure.database.database_factory import DatabaseFactory


class TestCreateEngine:
    """create_engine 测试"""

    def test_test_env_uses_shared_memory_database(self):
        """测试环境使用 StaticPool，所有连接共享同一个内存库"""
        engine = DatabaseFactory.create_engine(Settings(app_env="test"))

        assert engine.url.database == ":memory:"
        assert isinstance(engine.pool, StaticPool)

    def test_dev_env_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "dev.db"

        engine = DatabaseFactory.create_engine(
            Settings(app_env="dev", dev_db_path=str(db_path))
        )

        assert db_path.parent.exists()
        assert engine.url.database == str(db_path)

    def test_database_url_override(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'override.db'}"

        engine = DatabaseFactory.create_engine(Settings(app_env="test"), database_url=url)

        assert str(engine.url) == url

    def test_missing_url_raises(self):
        with pytest.raises(ValueError):
            DatabaseFactory.create_engine(Settings(app_env="prod", prod_database_url=""))


class TestCreateTables:
    """create_tables 测试"""

    def test_creates_all_tables(self):
        engine = DatabaseFactory.create_engine(Settings(app_env="test"))

        DatabaseFactory.create_tables(engine)

        tables = set(inspect(engine).get_table_names())
        assert {"users", "verification_images", "verification_requests"} <= tables

    def test_session_factory_binds_engine(self):
        engine = DatabaseFactory.create_engine(Settings(app_env="test"))
        session_factory = DatabaseFactory.create_session_factory(engine)

        session = session_factory()
        try:
            assert session.bind is engine
        finally:
            session.close()
