from typing import Optional

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """
    员工记录

    直接访问层使用的内存表示，id 在插入前为 None，由数据库分配
    """
    id: Optional[int] = Field(default=None, description="员工ID")
    name: str = Field(..., description="姓名")
    email: str = Field(..., description="邮箱")
    salary: float = Field(..., description="薪资")
