"""
图书相关API接口模块

提供图书资源的增删改查接口，请求直接转交给图书服务，由 ORM 生成对应的 SQL。
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.dependencies import get_db, get_book_service
from app.infrastructure.response import error_response, to_json_response
from app.schemas.book import BookCreate, BookUpdate
from app.services.core import BookService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 创建图书接口
@router.post("", status_code=201)
async def create_book(
        book_data: BookCreate,  # 图书创建请求体数据
        db: Session = Depends(get_db),  # 数据库会话依赖注入
        service: BookService = Depends(get_book_service),
):
    """
    创建新的图书

    Args:
        book_data (BookCreate): 图书标题、作者、出版年份
        db (Session): 数据库会话对象，通过依赖注入自动获取

    Returns:
        JSONResponse: 201，data 为带有数据库分配 id 的图书
    """
    try:
        return to_json_response(await service.create_book(book_data, db))
    except Exception as e:
        logger.exception("创建图书失败")
        return to_json_response(error_response(msg=f"创建图书失败: {str(e)}", code=500))


# 获取图书列表接口
@router.get("")
async def get_books(
        db: Session = Depends(get_db),
        service: BookService = Depends(get_book_service),
):
    """
    获取全部图书，不分页
    """
    try:
        return to_json_response(await service.get_books(db))
    except Exception as e:
        logger.exception("获取图书列表失败")
        return to_json_response(error_response(msg=f"获取图书列表失败: {str(e)}", code=500))


# 获取图书详情接口
@router.get("/{book_id}")
async def get_book(
        book_id: int,  # 图书ID参数，从URL路径中提取
        db: Session = Depends(get_db),
        service: BookService = Depends(get_book_service),
):
    """
    根据ID获取图书详情

    Returns:
        JSONResponse: 200 图书详情；404 图书不存在
    """
    try:
        return to_json_response(await service.get_book_by_id(book_id, db))
    except Exception as e:
        logger.exception("获取图书详情失败")
        return to_json_response(error_response(msg=f"获取图书详情失败: {str(e)}", code=500))


# 更新图书接口
@router.put("/{book_id}")
async def update_book(
        book_id: int,
        book_data: BookUpdate,
        db: Session = Depends(get_db),
        service: BookService = Depends(get_book_service),
):
    """
    根据ID整体更新图书，不支持部分更新

    Returns:
        JSONResponse: 200 更新后的图书；404 图书不存在
    """
    try:
        return to_json_response(await service.update_book(book_id, book_data, db))
    except Exception as e:
        logger.exception("更新图书失败")
        return to_json_response(error_response(msg=f"更新图书失败: {str(e)}", code=500))


# 删除图书接口
@router.delete("/{book_id}")
async def delete_book(
        book_id: int,
        db: Session = Depends(get_db),
        service: BookService = Depends(get_book_service),
):
    """
    根据ID删除图书

    Returns:
        JSONResponse: 200 删除成功（id 不存在时同样成功）；任何错误一律返回 500
    """
    try:
        return to_json_response(await service.delete_book(book_id, db))
    except Exception as e:
        logger.exception("删除图书失败")
        return to_json_response(error_response(msg=f"删除图书失败: {str(e)}", code=500))
