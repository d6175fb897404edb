import uuid

import pytest

from fixed_bits import (V4_RFC4122, FixedBit, fixed_bit_at, fixed_bit_count,
                        free_bit_count, mismatched, padding_mask)


@pytest.mark.parametrize("position, expected", [
    (48, 0), (49, 1), (50, 0), (51, 0),  # version nibble 0100
    (64, 1), (65, 0),                    # variant 10
])
def test_fixed_positions_carry_canonical_values(position, expected):
    assert fixed_bit_at(position) == expected


@pytest.mark.parametrize("position", [0, 7, 47, 52, 55, 63, 66, 127])
def test_other_positions_are_free(position):
    assert fixed_bit_at(position) is None


def test_bit_counts_and_padding():
    assert fixed_bit_count() == 6
    assert free_bit_count() == 122
    assert padding_mask() == 0b1111_1100


def test_table_drives_padding():
    # only the version nibble fixed -> 124 free bits, 4 of them in the last byte
    table = (FixedBit(6, 0b1111_0000, 0b0100_0000),)
    assert free_bit_count(table) == 124
    assert padding_mask(table) == 0b1111_0000


def test_mismatched():
    assert mismatched(uuid.UUID("550e8400-e29b-41d4-a716-446655440000").bytes) == []
    assert mismatched(bytes(16)) == list(V4_RFC4122)
    v1 = uuid.UUID("c232ab00-9414-11ec-b3c8-9f6bdeced846").bytes
    assert mismatched(v1) == [V4_RFC4122[0]]
