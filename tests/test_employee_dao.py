from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.dao import employee_dao
from app.schemas.employee import Employee


@pytest.fixture
def engine(db_engine):
    employee_dao.create_employee_table(engine=db_engine)
    return db_engine


def _alice() -> Employee:
    return Employee(name="Alice", email="alice@example.com", salary=75000.0)


def test_create_table_is_idempotent(engine):
    employee_dao.create_employee_table(engine=engine)
    assert employee_dao.get_all_employees(engine=engine) == []


def test_insert_assigns_id_and_fetch_returns_same_fields(engine):
    inserted = employee_dao.insert_employee(_alice(), engine=engine)

    assert inserted.id is not None
    fetched = employee_dao.get_employee_by_id(inserted.id, engine=engine)
    assert fetched == inserted


def test_insert_ignores_caller_supplied_id(engine):
    first = employee_dao.insert_employee(_alice(), engine=engine)
    second = employee_dao.insert_employee(_alice().model_copy(update={"id": first.id}), engine=engine)

    assert second.id != first.id


def test_get_all_returns_every_inserted_row(engine):
    for i in range(4):
        employee_dao.insert_employee(
            Employee(name=f"E{i}", email=f"e{i}@example.com", salary=1000.0 * i), engine=engine
        )

    employees = employee_dao.get_all_employees(engine=engine)

    assert len(employees) == 4
    assert [e.name for e in employees] == ["E0", "E1", "E2", "E3"]


def test_get_missing_employee_returns_none(engine):
    assert employee_dao.get_employee_by_id(42, engine=engine) is None


def test_update_replaces_all_fields(engine):
    inserted = employee_dao.insert_employee(_alice(), engine=engine)
    replacement = Employee(id=inserted.id, name="Alice Smith", email="asmith@example.com", salary=80000.0)

    assert employee_dao.update_employee(replacement, engine=engine) is True
    assert employee_dao.get_employee_by_id(inserted.id, engine=engine) == replacement


def test_update_missing_employee_returns_false(engine):
    missing = Employee(id=42, name="Nobody", email="nobody@example.com", salary=1.0)

    assert employee_dao.update_employee(missing, engine=engine) is False
    assert employee_dao.get_all_employees(engine=engine) == []


def test_update_without_id_is_rejected(engine):
    with pytest.raises(ValueError):
        employee_dao.update_employee(_alice(), engine=engine)


def test_delete_removes_employee(engine):
    kept = employee_dao.insert_employee(_alice(), engine=engine)
    removed = employee_dao.insert_employee(
        Employee(name="Bob", email="bob@example.com", salary=62000.0), engine=engine
    )

    assert employee_dao.delete_employee(removed.id, engine=engine) is True
    assert employee_dao.get_employee_by_id(removed.id, engine=engine) is None
    assert employee_dao.get_all_employees(engine=engine) == [kept]


def test_delete_missing_employee_returns_false(engine):
    assert employee_dao.delete_employee(42, engine=engine) is False


def test_database_errors_propagate(engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE t_employee"))

    with pytest.raises(SQLAlchemyError):
        employee_dao.get_all_employees(engine=engine)


def test_not_null_columns_are_enforced_by_the_store(engine):
    with pytest.raises(SQLAlchemyError):
        with engine.begin() as conn:
            conn.execute(text("INSERT INTO t_employee (name, email, salary) VALUES ('x', NULL, 1)"))
