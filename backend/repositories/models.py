"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, Index, Integer, JSON, String

from db import Base


class BookORM(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # NULL when the book has no ISBN; NULLs are exempt from the unique index.
    isbn = Column(String, nullable=True)
    title = Column(String, nullable=False, default="")
    authors = Column(JSON, nullable=False, default=list)
    price = Column(String, nullable=False, default="")

    __table_args__ = (Index("ix_books_isbn", "isbn", unique=True),)
