#!/usr/bin/env python3
import logging
import os
from datetime import datetime

import uvicorn

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: str = settings.LOG_DIR, level: str = settings.LOG_LEVEL) -> str:
    """
    根日志同时输出到控制台和按启动时间命名的日志文件

    返回日志文件路径
    """
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(), logging.FileHandler(log_filename, encoding='utf-8')]

    root = logging.getLogger()
    root.setLevel(level)
    # 替换掉已存在的处理器，避免重复输出
    root.handlers = []
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_filename


if __name__ == "__main__":
    log_file = setup_logging()
    logger = logging.getLogger(__name__)
    logger.info(f"启动图书API服务 - 监听 {settings.HOST}:{settings.PORT}，API前缀 {settings.API_V1_STR}")
    logger.info(f"日志文件路径: {log_file}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
