from __future__ import annotations

import logging
from typing import Tuple

from models.author import Author
from models.author_repository import AuthorRepository
from models.book_repository import BookRepository

logger = logging.getLogger(__name__)


class CascadeCoordinator:
    """
    Deletes an Author together with every Book that references it.

    Both tables are locked for the whole operation (Authors first, then
    Books). Books go before the Author so the Book table never references
    a missing Author, not even between two steps.
    """

    def __init__(self, authors: AuthorRepository, books: BookRepository):
        self.authors = authors
        self.books = books
        authors.cascade = self

    def delete_author_cascade(self, author_id: int) -> Tuple[Author, int]:
        with self.authors.lock, self.books.lock:
            # raises NotFound before anything is touched
            self.authors.get(author_id)
            removed_books = self.books.remove_by_author(author_id)
            author = self.authors.store.remove(author_id)

        logger.info("Deleted %s with %d book(s)", author, len(removed_books))
        return author, len(removed_books)
