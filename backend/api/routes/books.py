"""
Books API routes.
"""
import logging
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field, field_validator

from api.responses import IndentedJSONResponse, empty_response, error_response
from db import Database
from domain.errors import BookStoreError, StoreErrorKind
from domain.models import Book
from repositories import BooksRepository

router = APIRouter()
books_repo = BooksRepository()
logger = logging.getLogger(__name__)

DUPLICATE_ISBN_MESSAGE = "a book with this ISBN already exists in the database"

_RESPONSE_BY_KIND = {
    StoreErrorKind.NOT_FOUND: (404, "book not found"),
    StoreErrorKind.CONFLICT: (400, DUPLICATE_ISBN_MESSAGE),
    StoreErrorKind.INFRASTRUCTURE: (500, "database error"),
}


class BookPayload(BaseModel):
    isbn: str = ""
    title: str = ""
    authors: List[str] = Field(default_factory=list)
    price: str = ""

    @field_validator("isbn", "title", "price", "authors", mode="before")
    @classmethod
    def _null_as_zero_value(cls, value, info):
        # JSON null decodes to the field's zero value
        if value is None:
            return [] if info.field_name == "authors" else ""
        return value

    @field_validator("isbn", "title", "price", "authors")
    @classmethod
    def _utf8_encodable(cls, value):
        for text in value if isinstance(value, list) else [value]:
            try:
                text.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError("text is not valid UTF-8")
        return value

    def to_domain(self) -> Book:
        return Book(isbn=self.isbn, title=self.title, authors=list(self.authors), price=self.price)


def get_database(request: Request) -> Database:
    return request.app.state.database


def store_error_response(exc: BookStoreError, action: str) -> Response:
    """Turn a classified store error into the terminal HTTP response."""
    status_code, message = _RESPONSE_BY_KIND[exc.kind]
    if exc.kind is StoreErrorKind.INFRASTRUCTURE:
        logger.error("%s: %s", action, exc.detail, exc_info=exc.cause)
    return error_response(message, status_code)


@router.get("")
def list_books(database: Database = Depends(get_database)):
    """List all books, in whatever order the store returns them."""
    with database.session() as session:
        try:
            books = books_repo.list_books(session)
        except BookStoreError as exc:
            return store_error_response(exc, "failed to get all books")
    return IndentedJSONResponse([book.to_dict() for book in books], status_code=200)


@router.put("")
def create_book(payload: BookPayload, request: Request, database: Database = Depends(get_database)):
    """Create a book; the Location header points at its ISBN path."""
    book = payload.to_domain()
    with database.session() as session:
        try:
            books_repo.create_book(session, book)
        except BookStoreError as exc:
            return store_error_response(exc, "failed to insert book")
    return empty_response(201, headers={"Location": f"{request.url.path}/{quote(book.isbn, safe='')}"})


@router.get("/{isbn}")
def get_book(isbn: str, database: Database = Depends(get_database)):
    """Get a book by ISBN."""
    with database.session() as session:
        try:
            book = books_repo.get_book(session, isbn)
        except BookStoreError as exc:
            return store_error_response(exc, "failed to find book")
    if not book.isbn:
        return error_response("book not found", 404)
    return IndentedJSONResponse(book.to_dict(), status_code=200)


@router.put("/{isbn}")
def update_book(isbn: str, payload: BookPayload, database: Database = Depends(get_database)):
    """Replace the book stored under ``isbn`` with the request body.

    The body's own ``isbn`` becomes the stored key, so a body without one
    leaves the record unreachable by key.
    """
    with database.session() as session:
        try:
            books_repo.replace_book(session, isbn, payload.to_domain())
        except BookStoreError as exc:
            return store_error_response(exc, "update book failed")
    return empty_response(204)


@router.delete("/{isbn}")
def delete_book(isbn: str, database: Database = Depends(get_database)):
    """Delete a book by ISBN."""
    with database.session() as session:
        try:
            books_repo.delete_book(session, isbn)
        except BookStoreError as exc:
            return store_error_response(exc, "failed to delete book")
    return empty_response(204)
