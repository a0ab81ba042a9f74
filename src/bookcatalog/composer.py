# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Book detail composition: book record plus rating aggregate """
import logging
from sqlalchemy.exc import SQLAlchemyError

from . import store
from .utils.models import BookDetail, RatingAggregate

# Configure logger
logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors raised by the catalog."""


class BookNotFoundError(CatalogError):
    """The requested book id does not exist."""

    def __init__(self, book_id):
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


class CatalogServerError(CatalogError):
    """The book store failed while serving a request."""


def compose_book_detail(book_id: int, ratings_client) -> BookDetail:
    """
    Load a book and merge it with its rating aggregate.

    The ratings client is only called for books that exist, and its
    failures never reach the caller: they surface as the default
    aggregate.

    Args:
        book_id (int): Book Store id.
        ratings_client: Object exposing ``fetch_aggregate(book_id)``.

    Returns:
        BookDetail: The book and its ratings.

    Raises:
        BookNotFoundError: If no book has this id.
        CatalogServerError: If the book store could not be read.
    """
    try:
        book = store.find_by_id(book_id)
    except SQLAlchemyError as e:
        raise CatalogServerError(f"Failed to load book {book_id}") from e

    if book is None:
        raise BookNotFoundError(book_id)

    try:
        ratings = ratings_client.fetch_aggregate(book_id)
    except Exception as e:
        logger.error("Ratings client failed for book %s: %s", book_id, e)
        ratings = RatingAggregate.default(degraded=True)
    if ratings.degraded:
        logger.warning(
            "Ratings unavailable for book %s, rendering default aggregate.",
            book_id)

    return BookDetail(book=book, ratings=ratings)
