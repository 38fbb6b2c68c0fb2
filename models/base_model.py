#!/usr/bin/env python3
"""
Shared base for the in-memory records of the Library API.

- integer ``id`` assigned by the owning table (see models/entity_store.py)
- kwargs constructor, like a declarative model
- to_dict() for debugging and logging; HTTP bodies go through the
  marshmallow out-schemas in models/schemas/
"""

from __future__ import annotations


class BaseModel:
    """
    Base for all stored records.

    Subclasses list their attribute names in ``__fields__``; anything not
    passed to the constructor starts as None. Records are the canonical
    mutable objects: repositories update them in place.
    """

    __fields__: tuple = ("id",)

    def __init__(self, **kwargs):
        for key in self.__fields__:
            setattr(self, key, None)
        for key, value in kwargs.items():
            if key not in self.__fields__:
                raise TypeError(f"{self.__class__.__name__} has no field {key!r}")
            setattr(self, key, value)

    def __str__(self) -> str:
        """Human-friendly representation including id and fields."""
        return f"[{self.__class__.__name__}] ({self.id}) {self.to_dict()}"

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={getattr(self, k)!r}" for k in self.__fields__)
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self) -> dict:
        """Plain dict of the record's fields, None values included."""
        return {key: getattr(self, key) for key in self.__fields__}
