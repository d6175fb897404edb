"""
Compact Base45 codec for version 4 UUIDs.

A UUID v4 has 6 fixed bits (version and variant). They are stripped, the remaining
122 bits are packed into 16 bytes and the result is written in Base45, which makes
a 24 character string suitable for QR codes and short URLs. Decoding reverses the
transform and restores the fixed bits.

    >>> s = encode("550e8400-e29b-41d4-a716-446655440000")
    >>> decode_to_string(s)
    '550e8400-e29b-41d4-a716-446655440000'
"""
import uuid
from typing import Union

import text_codec
from compact import pack, unpack
from identifier import format_identifier, parse_identifier
from policy import FixedBitPolicy

IdentifierInput = Union[uuid.UUID, bytes, bytearray, memoryview, str]


def encode_bytes(identifier: Union[bytes, bytearray, memoryview],
                 policy: FixedBitPolicy = FixedBitPolicy.LENIENT) -> str:
    """Encodes 16 raw identifier bytes into the compact text."""
    return text_codec.encode(pack(identifier, policy=policy))


def encode_uuid(identifier: uuid.UUID, policy: FixedBitPolicy = FixedBitPolicy.LENIENT) -> str:
    return encode_bytes(identifier.bytes, policy=policy)


def encode_str(text: str, policy: FixedBitPolicy = FixedBitPolicy.LENIENT) -> str:
    """
    :raises InvalidIdentifierError: if `text` is not a recognised identifier string
    """
    return encode_uuid(parse_identifier(text), policy=policy)


def encode(identifier: IdentifierInput, policy: FixedBitPolicy = FixedBitPolicy.LENIENT) -> str:
    if isinstance(identifier, uuid.UUID):
        return encode_uuid(identifier, policy=policy)
    if isinstance(identifier, str):
        return encode_str(identifier, policy=policy)
    if isinstance(identifier, (bytes, bytearray, memoryview)):
        return encode_bytes(identifier, policy=policy)
    raise TypeError(f"Cannot encode identifier of type {type(identifier).__name__}")


def decode_to_bytes(text: str) -> bytes:
    """
    Decodes the compact text back into the 16 canonical identifier bytes.

    :raises InvalidCompactTextError: the text is not valid Base45
    :raises InvalidLengthError: the decoded payload is not 16 bytes long
    :raises NonZeroPaddingError: the decoded payload has padding bits set
    """
    return unpack(text_codec.decode(text))


def decode_to_uuid(text: str) -> uuid.UUID:
    return uuid.UUID(bytes=decode_to_bytes(text))


def decode_to_string(text: str) -> str:
    return format_identifier(decode_to_bytes(text))


def generate_v4() -> uuid.UUID:
    return uuid.uuid4()
