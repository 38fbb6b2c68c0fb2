from marshmallow import fields

from models.schemas.common import (
    OutSchema,
    PayloadSchema,
    first_failure,
    load_payload,
    not_blank,
)

NAME_REQUIRED = 'Author validation failed: "name" is required (non-empty string).'


class AuthorPayloadSchema(PayloadSchema):
    name = fields.String(required=True, validate=not_blank)
    bio = fields.Raw(allow_none=True, load_default=None)


class AuthorOutSchema(OutSchema):
    id = fields.Integer()
    name = fields.String()
    bio = fields.Raw()


payload_schema = AuthorPayloadSchema()


def validate_author_payload(payload) -> dict:
    """
    Check an Author create/update body.

    Returns ``{"name": <trimmed>, "bio": <as given>}`` or raises
    InvalidPayload. ``bio`` is not constrained.
    """
    data, errors = load_payload(payload_schema, payload)
    first_failure(errors, [("name", NAME_REQUIRED)])
    data["name"] = data["name"].strip()
    return data
