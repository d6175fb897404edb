from enum import Enum
from typing import Iterable, Iterator, Optional


class BitOrder(Enum):
    """Order of bits inside a byte. Bytes themselves are always taken from index 0."""
    MSB_FIRST = "msb"
    LSB_FIRST = "lsb"


def _shift(order: BitOrder, offset: int) -> int:
    return 7 - offset if order is BitOrder.MSB_FIRST else offset


class BitWriter:
    def __init__(self, order: BitOrder = BitOrder.MSB_FIRST):
        self.order = order
        self.bit_buffer = 0
        self.bit_count = 0
        self.output_bytes = bytearray()

    def write_bit(self, bit: int):
        """Appends one bit to the pending byte; a full byte is moved to the output."""
        self.bit_buffer |= (bit & 1) << _shift(self.order, self.bit_count)
        self.bit_count += 1
        if self.bit_count == 8:
            self.output_bytes.append(self.bit_buffer)
            self.bit_buffer = 0
            self.bit_count = 0

    def write_bits(self, bits: Iterable[int]):
        for bit in bits:
            self.write_bit(bit)

    @property
    def bits_written(self) -> int:
        return len(self.output_bytes) * 8 + self.bit_count

    def flush(self, length: Optional[int] = None):
        """
        Pads the pending byte with zero bits and moves it to the output.
        If `length` is given, the output is further padded with zero bytes up to that length.
        """
        if self.bit_count > 0:
            self.output_bytes.append(self.bit_buffer)
            self.bit_buffer = 0
            self.bit_count = 0
        if length is not None and len(self.output_bytes) < length:
            self.output_bytes.extend(bytes(length - len(self.output_bytes)))

    def get_bytes(self) -> bytes:
        return bytes(self.output_bytes)


class BitReader:
    def __init__(self, data: bytes, order: BitOrder = BitOrder.MSB_FIRST, limit: Optional[int] = None):
        self.data = data
        self.order = order
        self.position = 0
        total = len(data) * 8
        self.limit = total if limit is None else min(limit, total)

    def bits_remaining(self) -> int:
        return self.limit - self.position

    def read_bit(self) -> int:
        if self.position >= self.limit:
            raise ValueError("Not enough data left in the bit stream.")
        byte_index, offset = divmod(self.position, 8)
        self.position += 1
        return (self.data[byte_index] >> _shift(self.order, offset)) & 1

    def __iter__(self) -> Iterator[int]:
        while self.bits_remaining() > 0:
            yield self.read_bit()
