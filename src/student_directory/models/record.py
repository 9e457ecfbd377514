"""A single entry of the students directory and its wire decoding"""

from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
)


def _scalar_or_none(value: Any) -> str | None:
    """Keep strings, stringify numbers, and drop anything else"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


# A wrongly typed optional field is read as missing instead of rejecting the record
OptionalText = Annotated[str | None, BeforeValidator(_scalar_or_none)]


class Record(BaseModel):
    """One directory entry, as returned by the remote collection.

    Only `id` is required. Every other field may be missing or malformed on
    the wire, so they are all optional strings and anything that is not a
    string or a number is read as missing.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        populate_by_name=True,
    )

    id: str
    name: OptionalText = None
    email: OptionalText = None
    major: OptionalText = None
    stage: OptionalText = None
    level: OptionalText = None
    avatar_url: OptionalText = Field(
        default=None, validation_alias=AliasChoices("avatar", "avatarUrl", "avatar_url")
    )
    created_at: OptionalText = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class RecordDecodeError(ValueError):
    """Raised when a payload is not a list of Record-shaped objects"""


def parse_records(payload: Any) -> tuple[Record, ...]:
    """
    Convert a decoded JSON payload into an immutable tuple of records.

    Args:
        payload: The result of decoding the response body

    Returns:
        The records in payload order

    Raises:
        RecordDecodeError: If the payload is not an array of objects, an
            element has no usable `id`, or two elements share an `id`
    """
    if not isinstance(payload, list):
        raise RecordDecodeError(
            f"expected a JSON array, got {type(payload).__name__}"
        )

    records: list[Record] = []
    seen: set[str] = set()
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise RecordDecodeError(
                f"element {position} is a {type(item).__name__}, not an object"
            )
        try:
            record = Record.model_validate(item)
        except ValidationError as e:
            raise RecordDecodeError(
                f"element {position} is not a valid record: {e.error_count()} error(s)"
            ) from e
        if record.id in seen:
            raise RecordDecodeError(f"duplicate record id {record.id!r}")
        seen.add(record.id)
        records.append(record)

    return tuple(records)
