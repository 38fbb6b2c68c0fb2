from models.author import Author
from models.book import Book
from models.errors import (
    DuplicateBook,
    DuplicateName,
    ErrorKind,
    InvalidAuthorRef,
    InvalidPayload,
    LibraryError,
    NotFound,
)
from models.memory_storage import MemoryStorage
