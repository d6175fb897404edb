import os
import uuid

import pytest

import text_codec
from errors import (FixedBitMismatchError, InvalidCompactTextError, InvalidIdentifierError,
                    InvalidLengthError, NonZeroPaddingError)
from policy import FixedBitPolicy
from uuid45 import (decode_to_bytes, decode_to_string, decode_to_uuid, encode, encode_bytes,
                    encode_str, encode_uuid, generate_v4)


@pytest.mark.parametrize("text", [
    "550e8400-e29b-41d4-a716-446655440000",
    "00000000-0000-4000-8000-000000000000",
    "ffffffff-ffff-4fff-bfff-ffffffffffff",
])
def test_known_identifiers_round_trip(text):
    compact = encode(text)
    assert len(compact) == 24
    assert decode_to_string(compact) == text
    assert decode_to_uuid(compact) == uuid.UUID(text)
    assert decode_to_bytes(compact) == uuid.UUID(text).bytes


def test_zero_free_bits_encode_to_zeros():
    assert encode("00000000-0000-4000-8000-000000000000") == "0" * 24


def test_input_shapes_agree():
    u = uuid.UUID("550e8400-e29b-41d4-a716-446655440000")
    expected = encode_uuid(u)
    assert encode(u) == expected
    assert encode(u.bytes) == expected
    assert encode(bytearray(u.bytes)) == expected
    assert encode(str(u)) == expected
    assert encode_str(u.hex) == expected
    assert encode_bytes(u.bytes) == expected


def test_encode_rejects_other_types():
    with pytest.raises(TypeError):
        encode(12345)


def test_encode_rejects_bad_text():
    with pytest.raises(InvalidIdentifierError):
        encode_str("not-a-uuid")


def test_strict_policy_through_api():
    with pytest.raises(FixedBitMismatchError):
        encode("c232ab00-9414-11ec-b3c8-9f6bdeced846", policy=FixedBitPolicy.STRICT)


def test_random_round_trip_and_invariants():
    for _ in range(200):
        u = generate_v4()
        s = encode(u)
        d = decode_to_uuid(s)
        assert d == u
        assert d.version == 4
        assert d.variant == uuid.RFC_4122


def test_reencode_stability():
    for _ in range(50):
        s1 = encode(generate_v4())
        assert encode(decode_to_uuid(s1)) == s1

    for _ in range(50):
        payload = bytearray(os.urandom(16))
        payload[15] &= 0b11
        s = text_codec.encode(payload)
        assert encode(decode_to_bytes(s)) == s


@pytest.mark.parametrize("text", ["a", "A\U0001F600", "A", ":::"])
def test_decode_rejects_invalid_text(text):
    with pytest.raises(InvalidCompactTextError):
        decode_to_uuid(text)


@pytest.mark.parametrize("length", [15, 17])
def test_decode_rejects_wrong_length(length):
    with pytest.raises(InvalidLengthError) as excinfo:
        decode_to_uuid(text_codec.encode(bytes(length)))
    assert excinfo.value.expected == 16
    assert excinfo.value.actual == length


def test_decode_rejects_padding():
    with pytest.raises(NonZeroPaddingError):
        decode_to_uuid(text_codec.encode(bytes(15) + b"\x04"))


def test_generate_v4():
    u = generate_v4()
    assert u.version == 4
    assert u.variant == uuid.RFC_4122
