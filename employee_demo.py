#!/usr/bin/env python3
"""
员工数据访问层演示脚本

依次执行建表、插入、查询、更新、删除，数据库连接使用 .env / 环境变量中的配置
"""
import logging

from app.dao.employee_dao import (
    create_employee_table,
    insert_employee,
    get_all_employees,
    get_employee_by_id,
    update_employee,
    delete_employee,
)
from app.schemas.employee import Employee

logger = logging.getLogger(__name__)


def run_demo():
    create_employee_table()

    alice = insert_employee(Employee(name="Alice", email="alice@example.com", salary=75000))
    bob = insert_employee(Employee(name="Bob", email="bob@example.com", salary=62000))
    print(f"Inserted: {alice.id}, {bob.id}")

    print("All employees:")
    for employee in get_all_employees():
        print(f"  {employee.id}: {employee.name} <{employee.email}> {employee.salary}")

    print(f"Fetched: {get_employee_by_id(alice.id)}")

    alice.salary = 80000
    alice.email = "alice.smith@example.com"
    update_employee(alice)
    print(f"Updated: {get_employee_by_id(alice.id)}")

    delete_employee(bob.id)
    print(f"After delete: {get_employee_by_id(bob.id)}")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        run_demo()
    except Exception as e:
        logger.error(f"演示运行失败: {str(e)}")
        raise
