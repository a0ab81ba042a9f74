# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Book Store backed by Flask-SQLAlchemy """
import logging
from datetime import datetime, timezone
from typing import List, Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Configure logger
logger = logging.getLogger(__name__)

db = SQLAlchemy()

BOOK_FIELDS = ("title", "author", "release_date", "page_count", "publisher")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(db.Model):
    """
    A catalog entry. ``id`` is assigned by the database and never changes.
    """
    __tablename__ = "books"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(100), nullable=False)
    release_date = db.Column(db.Date, nullable=False)
    page_count = db.Column(db.Integer, nullable=False)
    publisher = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow,
                           onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Book {self.id} {self.title!r}>"


def _apply_fields(book: Book, fields: dict) -> None:
    for name in BOOK_FIELDS:
        if name in fields:
            setattr(book, name, fields[name])


def _commit() -> None:
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def find_all() -> List[Book]:
    """Returns every book ordered by title ascending."""
    stmt = db.select(Book).order_by(Book.title.asc(), Book.id.asc())
    return list(db.session.execute(stmt).scalars())


def find_by_id(book_id: int) -> Optional[Book]:
    """Returns the book with ``book_id`` or None when it does not exist."""
    return db.session.get(Book, book_id)


def create(fields: dict) -> Book:
    """
    Persist a new book.

    Args:
        fields (dict): Validated values keyed by ``BOOK_FIELDS``.

    Returns:
        Book: The stored book with its assigned id.
    """
    book = Book()
    _apply_fields(book, fields)
    db.session.add(book)
    _commit()
    logger.info("Created book %s (%s)", book.id, book.title)
    return book


def update(book_id: int, fields: dict) -> Optional[Book]:
    """
    Update a book in place. Returns None when the book does not exist.
    """
    book = find_by_id(book_id)
    if book is None:
        return None
    _apply_fields(book, fields)
    _commit()
    logger.info("Updated book %s", book_id)
    return book


def delete(book_id: int) -> bool:
    """
    Delete a book. Returns False when the book does not exist.
    """
    book = find_by_id(book_id)
    if book is None:
        return False
    db.session.delete(book)
    _commit()
    logger.info("Deleted book %s", book_id)
    return True
