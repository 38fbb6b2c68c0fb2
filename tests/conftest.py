"""
Shared fixtures: an isolated app (and therefore isolated tables) per test.
"""
import pytest

from api import create_app
from models import MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def app(storage):
    return create_app("testing", storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(storage):
    """
    Two authors and five books:

    id  title                   year  author
    1   The Left Hand           1969  Ursula
    2   A Wizard of Earthsea    1968  Ursula
    3   Dune                    1965  Frank
    4   Children of Dune        None  Frank
    5   The Dispossessed        1974  Ursula
    """
    ursula = storage.authors.create("Ursula K. Le Guin", "Earthsea")
    frank = storage.authors.create("Frank Herbert")
    storage.books.create("The Left Hand", ursula.id, 1969)
    storage.books.create("A Wizard of Earthsea", ursula.id, 1968)
    storage.books.create("Dune", frank.id, 1965)
    storage.books.create("Children of Dune", frank.id)
    storage.books.create("The Dispossessed", ursula.id, 1974)
    return storage
