from models.base_model import BaseModel


class Author(BaseModel):
    # name is stored trimmed; uniqueness (case-insensitive) lives in AuthorRepository
    __fields__ = ("id", "name", "bio")

    def normalized_name(self) -> str:
        return self.name.strip().lower()
