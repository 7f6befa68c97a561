"""
Pytest configuration for the record examples.

Provides fixtures for:
- A throwaway SQLite engine per test
- A FastAPI test client whose sessions are bound to that engine
"""

from __future__ import annotations

import os

# 在导入 app 之前指定数据库，避免默认连接 MySQL
os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.db.base import create_db_engine
from app.db.init_db import reset_db
from app.db.session import get_db
from app.main import app


@pytest.fixture(scope="function")
def db_engine(tmp_path) -> Generator[Engine, None, None]:
    """
    File-backed SQLite engine, so every per-operation connection sees the same data.
    """
    engine = create_db_engine(f"sqlite:///{tmp_path / 'records.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_engine: Engine) -> Generator[TestClient, None, None]:
    """
    Test client with the book tables created and get_db pointed at the test engine.
    """
    reset_db(db_engine)
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db() -> Generator[Session, None, None]:
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
