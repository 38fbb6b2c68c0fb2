from __future__ import annotations

from typing import List, Optional

from models.author_repository import AuthorRepository
from models.book import Book
from models.entity_store import EntityStore
from models.errors import DuplicateBook, InvalidAuthorRef, NotFound


class BookRepository:
    """
    Owns the Book table.

    Invariants:
    - ``author_id`` references an existing Author at write time
    - (lowercased title, author_id) is unique across the table

    Writes hold the Author table lock first, then the Book table lock, which
    is the same order the cascade uses.
    """

    def __init__(self, authors: AuthorRepository, store: Optional[EntityStore[Book]] = None):
        self.authors = authors
        self.store: EntityStore[Book] = store if store is not None else EntityStore()

    @property
    def lock(self):
        return self.store.lock

    def _check_author(self, author_id: int) -> None:
        if not self.authors.exists(author_id):
            raise InvalidAuthorRef(
                "Book validation failed: referenced authorId does not exist.",
                author_id=author_id,
            )

    def _find_duplicate(self, title: str, author_id: int, exclude_id: int | None = None) -> Optional[Book]:
        key = (title.strip().lower(), author_id)
        for book in self.store.all():
            if book.id != exclude_id and book.natural_key() == key:
                return book
        return None

    def create(self, title: str, author_id: int, year: int | None = None) -> Book:
        title = title.strip()
        with self.authors.lock, self.lock:
            self._check_author(author_id)
            if self._find_duplicate(title, author_id):
                raise DuplicateBook(
                    "Duplicate book for this author.", title=title, author_id=author_id
                )
            book = Book(id=self.store.next_id(), title=title, year=year, author_id=author_id)
            return self.store.insert(book)

    def update(self, book_id: int, title: str, author_id: int, year: int | None = None) -> Book:
        title = title.strip()
        with self.authors.lock, self.lock:
            book = self.get(book_id)
            self._check_author(author_id)
            if self._find_duplicate(title, author_id, exclude_id=book_id):
                raise DuplicateBook(
                    "Another book with same title & author exists.",
                    id=book_id,
                    title=title,
                    author_id=author_id,
                )
            book.title = title
            book.year = year
            book.author_id = author_id
            return book

    def delete(self, book_id: int) -> Book:
        with self.lock:
            removed = self.store.remove(book_id)
        if removed is None:
            raise NotFound("Book not found.", id=book_id)
        return removed

    def remove_by_author(self, author_id: int) -> List[Book]:
        """Drop every Book owned by ``author_id``; used by the cascade."""
        with self.lock:
            owned = [b for b in self.store.all() if b.author_id == author_id]
            for book in owned:
                self.store.remove(book.id)
        return owned

    def get(self, book_id: int) -> Book:
        book = self.store.find_by_id(book_id)
        if book is None:
            raise NotFound("Book not found.", id=book_id)
        return book

    def list_by_author(self, author_id: int) -> List[Book]:
        # a missing author is a NotFound, never an empty list
        self.authors.get(author_id)
        return [b for b in self.store.all() if b.author_id == author_id]

    def all(self) -> List[Book]:
        return self.store.all()
