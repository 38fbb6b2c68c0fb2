from marshmallow import fields

from models.errors import InvalidAuthorRef
from models.schemas.common import (
    OutSchema,
    PayloadSchema,
    WholeNumber,
    first_failure,
    load_payload,
    not_blank,
)

TITLE_REQUIRED = 'Book validation failed: "title" is required (non-empty string).'
AUTHOR_ID_REQUIRED = 'Book validation failed: "authorId" is required (number).'
AUTHOR_MISSING = "Book validation failed: referenced authorId does not exist."
YEAR_NOT_NUMBER = 'Book validation failed: "year" must be a number if provided.'


class BookPayloadSchema(PayloadSchema):
    title = fields.String(required=True, validate=not_blank)
    author_id = WholeNumber(required=True, data_key="authorId")
    year = WholeNumber(allow_none=True, load_default=None)


class BookOutSchema(OutSchema):
    id = fields.Integer()
    title = fields.String()
    year = fields.Integer()
    author_id = fields.Integer(data_key="authorId")


payload_schema = BookPayloadSchema()


def validate_book_payload(payload, authors) -> dict:
    """
    Check a Book create/update body against the Author table.

    Checks run in a fixed order and the first failure wins:
    title, authorId shape, authorId existence, year.
    ``authors`` is anything with an ``exists(author_id)`` method.
    """
    data, errors = load_payload(payload_schema, payload)
    first_failure(errors, [("title", TITLE_REQUIRED), ("authorId", AUTHOR_ID_REQUIRED)])

    if not authors.exists(data["author_id"]):
        raise InvalidAuthorRef(AUTHOR_MISSING, author_id=data["author_id"])

    first_failure(errors, [("year", YEAR_NOT_NUMBER)])
    data["title"] = data["title"].strip()
    return data
