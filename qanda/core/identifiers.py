"""Identifier Codec — parses externally supplied identifiers into UUIDs.

Invariants:
    - Only the 8-4-4-4-12 hyphenated hex form is accepted (case-insensitive)
    - Anything else raises InvalidIdentifierError carrying the raw value
    - Pure: no IO, no logging, never touches storage
"""

import re
from uuid import UUID

from qanda.core.errors import InvalidIdentifierError

_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
)


def parse_identifier(raw: str) -> UUID:
    """Parse a canonical identifier string, or raise InvalidIdentifierError."""
    # uuid.UUID() alone also accepts braces, urn: prefixes and bare hex
    if not isinstance(raw, str) or not _CANONICAL_UUID.fullmatch(raw):
        raise InvalidIdentifierError(raw)
    return UUID(raw)


def format_identifier(value: UUID) -> str:
    """Render a UUID in canonical lowercase form."""
    return str(value)
