import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(uri: str, echo: bool = False) -> Engine:
    """
    按连接串创建数据库引擎

    SQLite 不支持连接池参数，只对服务端数据库设置连接池
    """
    if make_url(uri).get_backend_name() == "sqlite":
        return create_engine(uri, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(
        uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=echo
    )


# 创建数据库引擎
engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.SQL_ECHO)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database() -> None:
    """MySQL 下数据库不存在时先建库"""
    url = make_url(settings.SQLALCHEMY_DATABASE_URI)
    if url.get_backend_name() != "mysql":
        return

    db_name = url.database
    # 创建一个不指定数据库的临时引擎来执行建库操作
    temp_engine = create_engine(url.set(database=None))
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(
                text("SELECT SCHEMA_NAME FROM INFORMATION_SCHEMA.SCHEMATA WHERE SCHEMA_NAME = :name"),
                {"name": db_name}
            )
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


# 创建数据库和表
def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 注册模型到 Base.metadata
    import app.models.book  # noqa: F401

    try:
        _ensure_mysql_database()
        Base.metadata.create_all(bind=engine)
        logger.info("所有表已创建或已存在")
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise  # 重新抛出异常，以便在应用启动时捕获
