"""
Book repository backed by SQLAlchemy.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.errors import BookStoreError
from domain.models import Book
from repositories.models import BookORM


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        isbn=orm.isbn or "",
        title=orm.title or "",
        authors=list(orm.authors or []),
        price=orm.price or "",
    )


def _update_orm_from_book(orm: BookORM, book: Book) -> None:
    # An empty ISBN is stored as NULL so it stays outside the unique index.
    orm.isbn = book.isbn or None
    orm.title = book.title
    orm.authors = list(book.authors)
    orm.price = book.price


@contextmanager
def _classified(session: Session, isbn: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into BookStoreError, once."""
    try:
        yield
    except BookStoreError:
        raise
    except IntegrityError as exc:
        session.rollback()
        raise BookStoreError.conflict(isbn, exc) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise BookStoreError.infrastructure(exc) from exc


class BooksRepository:
    """CRUD operations for books."""

    def _find(self, session: Session, isbn: str) -> Optional[BookORM]:
        return session.query(BookORM).filter(BookORM.isbn == isbn).first()

    def list_books(self, session: Session) -> List[Book]:
        with _classified(session, ""):
            books = session.query(BookORM).all()
        return [_book_from_orm(b) for b in books]

    def count_books(self, session: Session) -> int:
        with _classified(session, ""):
            return session.query(BookORM).count()

    def get_book(self, session: Session, isbn: str) -> Book:
        with _classified(session, isbn):
            orm = self._find(session, isbn)
        if orm is None:
            raise BookStoreError.not_found(isbn)
        return _book_from_orm(orm)

    def create_book(self, session: Session, book: Book) -> Book:
        with _classified(session, book.isbn):
            orm = BookORM()
            _update_orm_from_book(orm, book)
            session.add(orm)
            session.commit()
            session.refresh(orm)
        return _book_from_orm(orm)

    def replace_book(self, session: Session, isbn: str, book: Book) -> Book:
        """Replace the whole document stored under ``isbn`` with ``book``.

        The stored key afterwards is ``book.isbn``, not ``isbn``.
        """
        with _classified(session, book.isbn):
            orm = self._find(session, isbn)
            if orm is None:
                raise BookStoreError.not_found(isbn)
            _update_orm_from_book(orm, book)
            session.commit()
            session.refresh(orm)
        return _book_from_orm(orm)

    def delete_book(self, session: Session, isbn: str) -> None:
        with _classified(session, isbn):
            orm = self._find(session, isbn)
            if orm is None:
                raise BookStoreError.not_found(isbn)
            session.delete(orm)
            session.commit()
