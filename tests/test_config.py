from __future__ import annotations

import logging
from unittest.mock import MagicMock

import run
from app.core.config import Settings
from app.db import base
from app.infrastructure.response import not_found_response, success_response


def test_database_uri_defaults_to_mysql(monkeypatch):
    monkeypatch.delenv("DATABASE_URI", raising=False)
    settings = Settings(DB_USER="u", DB_PASSWORD="p", DB_HOST="db", DB_PORT="3307", DB_NAME="books")

    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://u:p@db:3307/books"


def test_database_uri_override_wins():
    settings = Settings(DATABASE_URI="sqlite:///./records.db")
    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./records.db"


def test_cors_origins_accept_comma_separated_string():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_response_envelope_shape():
    assert success_response(data=[1]) == {"code": 200, "data": [1], "msg": "操作成功"}
    assert not_found_response("图书")["code"] == 404


def test_mysql_database_lookup_matches_name_exactly(monkeypatch):
    monkeypatch.setattr(base.settings, "DATABASE_URI", "mysql+pymysql://u:p@db:3306/record_crud")
    temp_engine = MagicMock()
    connection = temp_engine.connect.return_value.__enter__.return_value
    connection.execute.return_value.fetchone.return_value = ("record_crud",)
    monkeypatch.setattr(base, "create_engine", MagicMock(return_value=temp_engine))

    base._ensure_mysql_database()

    statement, params = connection.execute.call_args_list[0].args
    assert "INFORMATION_SCHEMA.SCHEMATA WHERE SCHEMA_NAME = :name" in str(statement)
    assert "LIKE" not in str(statement)
    assert params == {"name": "record_crud"}
    # 数据库已存在，不再建库
    assert connection.execute.call_count == 1
    temp_engine.dispose.assert_called_once()


def test_setup_logging_writes_to_console_and_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        log_file = run.setup_logging(log_dir=str(tmp_path / "logs"), level="DEBUG")
        logging.getLogger("tests.run").debug("hello")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        with open(log_file, encoding="utf-8") as f:
            assert "tests.run - DEBUG - hello" in f.read()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
