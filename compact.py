"""
Lossless transform between a canonical 16-byte version 4 / RFC 4122 identifier
and its 16-byte compact payload.

The 6 fixed bits (version nibble and variant) carry no information, so the packer
drops them and repacks the remaining 122 bits least-significant-bit first. The top
6 bits of the last payload byte are padding and must stay zero.
"""
import logging
from typing import Union

from bitio import BitOrder, BitReader, BitWriter
from errors import FixedBitMismatchError, InvalidLengthError, NonZeroPaddingError
from fixed_bits import (IDENTIFIER_LENGTH, PAYLOAD_LENGTH, V4_RFC4122, FixedTable,
                        fixed_bit_at, free_bit_count, mismatched, padding_mask)
from policy import FixedBitPolicy

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def check_fixed_bits(identifier: bytes, table: FixedTable, policy: FixedBitPolicy) -> None:
    if policy is FixedBitPolicy.LENIENT:
        return
    wrong = mismatched(identifier, table)
    if not wrong:
        return
    details = ", ".join(
        f"byte {fixed.byte_index}: {identifier[fixed.byte_index] & fixed.mask:#010b} "
        f"instead of {fixed.value:#010b}"
        for fixed in wrong)
    message = f"Identifier {identifier.hex()} does not carry the expected fixed bits ({details})"
    if policy is FixedBitPolicy.STRICT:
        raise FixedBitMismatchError(message)
    logger.warning("%s; they are discarded and restored on decode", message)


def pack(identifier: BytesLike,
         table: FixedTable = V4_RFC4122,
         policy: FixedBitPolicy = FixedBitPolicy.LENIENT) -> bytes:
    """
    Converts a canonical identifier into the compact payload.

    Bits at the fixed positions are skipped whatever their value. With the default
    LENIENT policy they are not inspected at all; WARNING and STRICT check them first.

    :param identifier: 16 bytes, big-endian
    :param table: fixed-bit table describing the identifier layout
    :param policy: handling of identifiers whose fixed bits are not canonical
    :return: 16 bytes holding the free bits LSB first, padding bits zero
    :raises InvalidLengthError: if the identifier is not 16 bytes long
    :raises FixedBitMismatchError: STRICT policy only
    """
    identifier = bytes(identifier)
    if len(identifier) != IDENTIFIER_LENGTH:
        raise InvalidLengthError(IDENTIFIER_LENGTH, len(identifier))
    check_fixed_bits(identifier, table, policy)

    writer = BitWriter(BitOrder.LSB_FIRST)
    writer.write_bits(bit for position, bit in enumerate(BitReader(identifier, BitOrder.MSB_FIRST))
                      if fixed_bit_at(position, table) is None)
    assert writer.bits_written == free_bit_count(table)
    writer.flush(PAYLOAD_LENGTH)
    return writer.get_bytes()


def unpack(payload: BytesLike, table: FixedTable = V4_RFC4122) -> bytes:
    """
    Reconstructs the canonical identifier from a compact payload.

    Checked in order: the payload length, then the padding bits. Only then are
    the free bits read back; the fixed bits are always written with their
    canonical value from `table`.

    :raises InvalidLengthError: payload is not 16 bytes long
    :raises NonZeroPaddingError: any of the reserved high bits of the last byte is set
    """
    payload = bytes(payload)
    if len(payload) != PAYLOAD_LENGTH:
        raise InvalidLengthError(PAYLOAD_LENGTH, len(payload))
    padding = payload[-1] & padding_mask(table)
    if padding:
        raise NonZeroPaddingError(padding)

    free_bits = BitReader(payload, BitOrder.LSB_FIRST, limit=free_bit_count(table))
    writer = BitWriter(BitOrder.MSB_FIRST)
    for position in range(IDENTIFIER_LENGTH * 8):
        required = fixed_bit_at(position, table)
        writer.write_bit(free_bits.read_bit() if required is None else required)
    identifier = writer.get_bytes()
    logger.debug("unpacked %s -> %s", payload.hex(), identifier.hex())
    return identifier
