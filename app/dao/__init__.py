"""
Direct Access Layer

Hand-written parameterized SQL over plain connections, one connection per call.
"""

from app.dao.employee_dao import (
    create_employee_table,
    insert_employee,
    get_all_employees,
    get_employee_by_id,
    update_employee,
    delete_employee,
)

__all__ = [
    "create_employee_table",
    "insert_employee",
    "get_all_employees",
    "get_employee_by_id",
    "update_employee",
    "delete_employee",
]
