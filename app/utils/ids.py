from uuid import UUID

from app.core.errors import InvalidRequestError


def parse_uuid(value: str, label: str) -> UUID:
    """Parse a path identifier, raising InvalidRequestError("invalid <label>") when malformed."""
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidRequestError(f"invalid {label}") from None
