"""Base45 (RFC 9285) text form of the compact payload.

The Base45 alphabet is the QR code alphanumeric character set, so the encoded
text fits the densest QR encoding mode.
"""
import base45

from errors import InvalidCompactTextError


def encode(data: bytes) -> str:
    return base45.b45encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """
    :raises InvalidCompactTextError: on a character outside the alphabet, a dangling
        trailing character or a character group whose value overflows
    """
    try:
        return base45.b45decode(text)
    except ValueError as e:
        raise InvalidCompactTextError(f"Invalid Base45: `{text}` ({e})") from e
