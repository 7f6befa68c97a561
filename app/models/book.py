from typing import Dict, Any

from sqlalchemy import Column, INT, VARCHAR

from app.db.base import Base


class Book(Base):
    """
    图书数据库模型

    id 由数据库自增生成，其余字段均不可为空
    """
    __tablename__ = "t_book"

    id = Column(INT, primary_key=True, index=True, autoincrement=True)
    title = Column(VARCHAR(255), nullable=False)
    author = Column(VARCHAR(255), nullable=False)
    publication_year = Column(INT, nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """将图书转换为字典表示形式"""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "publicationYear": self.publication_year,
        }

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r}>"
