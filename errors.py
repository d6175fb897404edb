class Uuid45Error(Exception):
    """Base class of every failure raised by the compact identifier codec."""


class InvalidIdentifierError(Uuid45Error):
    pass


class InvalidCompactTextError(Uuid45Error):
    pass


class InvalidLengthError(Uuid45Error):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Invalid length: expected {expected} got {actual}")
        self.expected = expected
        self.actual = actual


class NonZeroPaddingError(Uuid45Error):
    def __init__(self, padding: int):
        super().__init__(f"Non-zero padding bits in compact payload ({padding:#010b})")
        self.padding = padding


class FixedBitMismatchError(Uuid45Error):
    pass
