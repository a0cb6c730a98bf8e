"""Parsing of record identifiers taken from paths and request bodies."""

from uuid import UUID

from bloglist.errors.identifier import MalformedIdentifierError


def parse_identifier(value: str | UUID) -> UUID:
    """
    Parse a record identifier.

    Args:
        value: Identifier as received from the client.

    Returns:
        UUID: Parsed identifier.

    Raises:
        MalformedIdentifierError: If the value is not a valid UUID.

    Example:
        >>> parse_identifier("0b6c5a1e-3d1b-4a55-9d5e-7f1c2b3a4d5e")
        UUID('0b6c5a1e-3d1b-4a55-9d5e-7f1c2b3a4d5e')
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise MalformedIdentifierError(str(value)) from e
