from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_dump

from models.errors import InvalidPayload


def not_blank(value: str) -> None:
    if not value.strip():
        raise ValidationError("Must not be blank.")


class WholeNumber(fields.Integer):
    """
    Strict integer that also takes whole-number floats (2000.0 -> 2000).
    Booleans, strings and fractional numbers are still rejected.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("strict", True)
        super().__init__(**kwargs)

    def _validated(self, value):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return super()._validated(value)


class PayloadSchema(Schema):
    """Request bodies: unknown keys are ignored, like a loose JSON client."""

    class Meta:
        unknown = EXCLUDE


class OutSchema(Schema):
    """Response bodies: optional attributes that are None are left out."""

    @post_dump
    def _drop_missing(self, data, **kwargs):
        return {k: v for k, v in data.items() if v is not None}


def load_payload(schema: Schema, payload) -> tuple[dict, dict]:
    """
    Load ``payload`` and return (data, field errors) instead of raising,
    so callers can report the first failure in their own field order.
    Non-object payloads (missing or malformed JSON) load as ``{}``.
    """
    if not isinstance(payload, dict):
        payload = {}
    try:
        return schema.load(payload), {}
    except ValidationError as err:
        return err.valid_data or {}, err.messages


def first_failure(errors: dict, checks) -> None:
    """Raise InvalidPayload for the first field in ``checks`` that failed."""
    for field, message in checks:
        if field in errors:
            raise InvalidPayload(message, field=field, details=errors[field])
