from typing import List, NamedTuple, Optional, Sequence

IDENTIFIER_LENGTH = 16
PAYLOAD_LENGTH = 16


class FixedBit(NamedTuple):
    """
    One structurally fixed field of the identifier.

    :param byte_index: index of the byte holding the field (big-endian, byte 0 first)
    :param mask: bits of that byte occupied by the field
    :param value: required pattern of the masked bits
    """
    byte_index: int
    mask: int
    value: int


FixedTable = Sequence[FixedBit]

V4_RFC4122: FixedTable = (
    FixedBit(6, 0b1111_0000, 0b0100_0000),  # version nibble = 4
    FixedBit(8, 0b1100_0000, 0b1000_0000),  # variant = 10 (RFC 4122)
)


def fixed_bit_at(position: int, table: FixedTable = V4_RFC4122) -> Optional[int]:
    """
    Returns the required value (0 or 1) of the bit at absolute position `position`
    of the identifier, counted most-significant-bit first from byte 0,
    or None if the position carries payload.
    """
    byte_index, offset = divmod(position, 8)
    shift = 7 - offset
    for fixed in table:
        if fixed.byte_index == byte_index and (fixed.mask >> shift) & 1:
            return (fixed.value >> shift) & 1
    return None


def fixed_bit_count(table: FixedTable = V4_RFC4122) -> int:
    return sum(bin(fixed.mask).count("1") for fixed in table)


def free_bit_count(table: FixedTable = V4_RFC4122) -> int:
    return IDENTIFIER_LENGTH * 8 - fixed_bit_count(table)


def padding_mask(table: FixedTable = V4_RFC4122) -> int:
    """Mask of the unused high bits of the last payload byte."""
    used = free_bit_count(table) - 8 * (PAYLOAD_LENGTH - 1)
    return (0xFF << used) & 0xFF


def mismatched(identifier: bytes, table: FixedTable = V4_RFC4122) -> List[FixedBit]:
    return [fixed for fixed in table
            if identifier[fixed.byte_index] & fixed.mask != fixed.value]
