import re
import uuid

from errors import InvalidIdentifierError

uuid_splitter = re.compile(
    r"""^\s*(urn:uuid:)?         # optional URN prefix
    (?P<brace>\{)?
    (?P<hex>[0-9a-f]{8}
        (?P<sep>-?)[0-9a-f]{4}    # either all four dashes or none
        (?P=sep)[0-9a-f]{4}
        (?P=sep)[0-9a-f]{4}
        (?P=sep)[0-9a-f]{12})
    (?(brace)\})\s*$
    """, flags=re.X | re.I)


def parse_identifier(text: str) -> uuid.UUID:
    """
    Parses an identifier written as the canonical hyphenated string or as 32 hex
    digits, optionally in braces and/or with the `urn:uuid:` prefix.

    :raises InvalidIdentifierError: if the text is none of the accepted forms
    """
    match = uuid_splitter.match(text)
    if not match:
        raise InvalidIdentifierError(f"Invalid UUID: `{text}` is not a parsable identifier")
    return uuid.UUID(hex=match.group("hex").replace("-", ""))


def format_identifier(identifier: bytes) -> str:
    """Canonical hyphenated lower-case form of 16 identifier bytes."""
    return str(uuid.UUID(bytes=bytes(identifier)))
