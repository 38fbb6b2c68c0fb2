from __future__ import annotations

from typing import List, Optional

from models.author import Author
from models.entity_store import EntityStore
from models.errors import DuplicateName, LibraryError, NotFound


class AuthorRepository:
    """
    Owns the Author table and enforces case-insensitive name uniqueness.

    Deletion is delegated to the CascadeCoordinator bound to this repository,
    so an Author never disappears while Books still point at it.
    """

    def __init__(self, store: Optional[EntityStore[Author]] = None):
        self.store: EntityStore[Author] = store if store is not None else EntityStore()
        self.cascade = None  # set by CascadeCoordinator

    @property
    def lock(self):
        return self.store.lock

    def _name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        wanted = name.strip().lower()
        return any(
            a.normalized_name() == wanted and a.id != exclude_id
            for a in self.store.all()
        )

    def create(self, name: str, bio=None) -> Author:
        name = name.strip()
        with self.lock:
            if self._name_taken(name):
                raise DuplicateName("Author already exists.", name=name)
            author = Author(id=self.store.next_id(), name=name, bio=bio)
            return self.store.insert(author)

    def update(self, author_id: int, name: str, bio=None) -> Author:
        name = name.strip()
        with self.lock:
            author = self.get(author_id)
            if self._name_taken(name, exclude_id=author_id):
                raise DuplicateName(
                    "Another author with the same name exists.", id=author_id, name=name
                )
            author.name = name
            author.bio = bio
            return author

    def delete(self, author_id: int) -> Author:
        if self.cascade is None:
            raise LibraryError("Author deletion needs a cascade coordinator.", id=author_id)
        author, _ = self.cascade.delete_author_cascade(author_id)
        return author

    def find(self, author_id: int) -> Optional[Author]:
        return self.store.find_by_id(author_id)

    def exists(self, author_id: int) -> bool:
        return self.find(author_id) is not None

    def get(self, author_id: int) -> Author:
        author = self.find(author_id)
        if author is None:
            raise NotFound("Author not found.", id=author_id)
        return author

    def list(self) -> List[Author]:
        return self.store.all()
