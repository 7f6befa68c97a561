from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookBase(BaseModel):
    """
    图书请求体基础模型

    JSON 中年份字段使用 publicationYear，也接受 publication_year
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str
    publication_year: int = Field(..., alias="publicationYear")


class BookCreate(BookBase):
    """创建图书请求模型，请求体中的 id 会被忽略"""
    id: Optional[int] = None


class BookUpdate(BookBase):
    """更新图书请求模型，全部字段整体替换"""
    id: Optional[int] = None
