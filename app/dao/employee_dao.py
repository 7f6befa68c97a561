"""
员工数据访问层

不经过 ORM，每个函数单独获取一个连接，执行一条手写的参数化 SQL，
再把结果行映射为 Employee。连接在 with 块结束时释放（包括异常路径），
数据库异常原样抛给调用方，不做重试。
"""
import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.db.base import engine as default_engine
from app.schemas.employee import Employee

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = {
    "mysql": """
        CREATE TABLE IF NOT EXISTS t_employee (
            id INT PRIMARY KEY AUTO_INCREMENT,
            name VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL,
            salary DECIMAL(12, 2) NOT NULL
        )
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS t_employee (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL,
            salary DECIMAL(12, 2) NOT NULL
        )
    """,
}

INSERT_SQL = text("INSERT INTO t_employee (name, email, salary) VALUES (:name, :email, :salary)")
SELECT_ALL_SQL = text("SELECT id, name, email, salary FROM t_employee ORDER BY id")
SELECT_BY_ID_SQL = text("SELECT id, name, email, salary FROM t_employee WHERE id = :id")
UPDATE_SQL = text("UPDATE t_employee SET name = :name, email = :email, salary = :salary WHERE id = :id")
DELETE_SQL = text("DELETE FROM t_employee WHERE id = :id")


def _row_to_employee(row) -> Employee:
    return Employee(**row._mapping)


def create_employee_table(engine: Optional[Engine] = None) -> None:
    """建表，表已存在时不做任何操作"""
    bind = engine or default_engine
    ddl = CREATE_TABLE_SQL.get(bind.dialect.name)
    if ddl is None:
        raise ValueError(f"不支持的数据库类型: {bind.dialect.name}")
    with bind.begin() as conn:
        conn.execute(text(ddl))


def insert_employee(employee: Employee, engine: Optional[Engine] = None) -> Employee:
    """
    插入一名员工

    employee.id 会被忽略，返回带有数据库分配 id 的新记录
    """
    bind = engine or default_engine
    with bind.begin() as conn:
        result = conn.execute(
            INSERT_SQL,
            {"name": employee.name, "email": employee.email, "salary": employee.salary},
        )
        new_id = result.lastrowid
    logger.info(f"员工已插入: id={new_id}")
    return employee.model_copy(update={"id": new_id})


def get_all_employees(engine: Optional[Engine] = None) -> List[Employee]:
    bind = engine or default_engine
    with bind.connect() as conn:
        rows = conn.execute(SELECT_ALL_SQL).fetchall()
    return [_row_to_employee(row) for row in rows]


def get_employee_by_id(employee_id: int, engine: Optional[Engine] = None) -> Optional[Employee]:
    """按 id 查询，不存在时返回 None"""
    bind = engine or default_engine
    with bind.connect() as conn:
        row = conn.execute(SELECT_BY_ID_SQL, {"id": employee_id}).fetchone()
    if row is None:
        return None
    return _row_to_employee(row)


def update_employee(employee: Employee, engine: Optional[Engine] = None) -> bool:
    """
    按 employee.id 整体替换姓名、邮箱和薪资

    返回是否有记录被更新
    """
    if employee.id is None:
        raise ValueError("更新员工时 id 不能为空")
    bind = engine or default_engine
    with bind.begin() as conn:
        result = conn.execute(
            UPDATE_SQL,
            {
                "id": employee.id,
                "name": employee.name,
                "email": employee.email,
                "salary": employee.salary,
            },
        )
        updated = result.rowcount > 0
    if not updated:
        logger.warning(f"员工不存在，未更新: id={employee.id}")
    return updated


def delete_employee(employee_id: int, engine: Optional[Engine] = None) -> bool:
    """按 id 删除，返回是否有记录被删除"""
    bind = engine or default_engine
    with bind.begin() as conn:
        deleted = conn.execute(DELETE_SQL, {"id": employee_id}).rowcount > 0
    if deleted:
        logger.info(f"员工已删除: id={employee_id}")
    return deleted
