import logging

from sqlalchemy.orm import Session

from app.infrastructure.exceptions import RecordNotFoundError
from app.infrastructure.response import success_response, created_response, not_found_response
from app.models.book import Book as BookModel
from app.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """
    图书增删改查服务

    每个方法对应一次 ORM 操作，数据库异常回滚后向上抛出，由接口层统一处理
    """

    @staticmethod
    def _get_or_raise(book_id: int, db: Session) -> BookModel:
        book = db.get(BookModel, book_id)
        if book is None:
            raise RecordNotFoundError("book", book_id)
        return book

    @staticmethod
    async def get_books(db: Session):
        """
        获取全部图书，按 id 排序
        """
        books = db.query(BookModel).order_by(BookModel.id).all()
        return success_response(
            data=[book.to_dict() for book in books],
            msg="获取图书列表成功"
        )

    @staticmethod
    async def get_book_by_id(book_id: int, db: Session):
        """
        获取图书详情
        """
        try:
            book = BookService._get_or_raise(book_id, db)
        except RecordNotFoundError as e:
            logger.warning(str(e))
            return not_found_response(entity="图书")

        return success_response(
            data=book.to_dict(),
            msg="获取图书详情成功"
        )

    @staticmethod
    async def create_book(book_data: BookCreate, db: Session):
        """
        创建图书，id 由数据库分配
        """
        try:
            new_book = BookModel(
                title=book_data.title,
                author=book_data.author,
                publication_year=book_data.publication_year,
            )
            db.add(new_book)
            db.commit()
            db.refresh(new_book)
        except Exception:
            db.rollback()
            raise

        logger.info(f"图书已创建: id={new_book.id}")
        return created_response(
            data=new_book.to_dict(),
            msg="创建图书成功"
        )

    @staticmethod
    async def update_book(book_id: int, book_data: BookUpdate, db: Session):
        """
        整体替换图书的全部字段
        """
        try:
            book = BookService._get_or_raise(book_id, db)
        except RecordNotFoundError as e:
            logger.warning(str(e))
            return not_found_response(entity="图书")

        try:
            book.title = book_data.title
            book.author = book_data.author
            book.publication_year = book_data.publication_year
            db.commit()
            db.refresh(book)
        except Exception:
            db.rollback()
            raise

        logger.info(f"图书已更新: id={book_id}")
        return success_response(
            data=book.to_dict(),
            msg="更新图书成功"
        )

    @staticmethod
    async def delete_book(book_id: int, db: Session):
        """
        删除图书，id 不存在时同样返回成功
        """
        book = db.get(BookModel, book_id)
        if book is None:
            logger.info(f"图书不存在，无需删除: id={book_id}")
            return success_response(msg="删除图书成功")

        try:
            db.delete(book)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"图书已删除: id={book_id}")
        return success_response(msg="删除图书成功")


book_service = BookService()
