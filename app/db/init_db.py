import logging
from typing import Optional

from sqlalchemy.engine import Engine

from app.db.base import Base, engine as default_engine
# 注册模型到 Base.metadata
from app.models import book  # noqa: F401


# 创建所有表
def create_tables(engine: Optional[Engine] = None) -> None:
    Base.metadata.create_all(bind=engine or default_engine)


# 清空数据库
def reset_db(engine: Optional[Engine] = None) -> None:
    bind = engine or default_engine
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    logging.info("数据库表已创建")
