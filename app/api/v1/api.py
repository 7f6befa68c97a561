from fastapi import APIRouter

from app.api.v1.endpoints import book


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(book.router, prefix="/books", tags=["图书"])
