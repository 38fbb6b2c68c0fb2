from models.base_model import BaseModel


class Book(BaseModel):
    # (title.lower(), author_id) is unique across the table; see BookRepository
    __fields__ = ("id", "title", "year", "author_id")

    def natural_key(self) -> tuple:
        return (self.title.strip().lower(), self.author_id)
