from models.author_repository import AuthorRepository
from models.book_repository import BookRepository
from models.cascade import CascadeCoordinator


class MemoryStorage:
    """
    Process-wide state of the service: both tables and the cascade that
    ties them together. Starts empty; nothing survives a restart.
    """

    def __init__(self):
        self.authors = AuthorRepository()
        self.books = BookRepository(self.authors)
        self.cascade = CascadeCoordinator(self.authors, self.books)
