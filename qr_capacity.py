from enum import Enum
from typing import Dict, List, Optional


class ErrorCorrection(Enum):
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"


# Alphanumeric-mode character capacity of QR versions 1..40 (index 0 = version 1).
# Values include all overhead: mode indicator, character count, terminator and padding.
CAP_ALNUM_CHARS: Dict[ErrorCorrection, List[int]] = {
    ErrorCorrection.L: [17, 32, 53, 78, 106, 134, 154, 192, 230, 271, 321, 367, 425, 458, 520, 586, 644, 718, 792,
                        858, 929, 1003, 1091, 1171, 1273, 1367, 1465, 1528, 1628, 1732, 1840, 1952, 2068, 2188,
                        2303, 2431, 2563, 2699, 2809, 2953],
    ErrorCorrection.M: [14, 26, 42, 62, 84, 106, 122, 152, 180, 213, 251, 287, 331, 362, 412, 450, 504, 560, 624,
                        666, 711, 779, 857, 911, 997, 1059, 1125, 1190, 1264, 1370, 1452, 1538, 1628, 1722, 1809,
                        1911, 1989, 2099, 2213, 2331],
    ErrorCorrection.Q: [11, 20, 32, 46, 60, 74, 86, 108, 130, 151, 177, 203, 241, 258, 292, 322, 364, 394, 442,
                        482, 509, 565, 611, 661, 715, 751, 805, 868, 908, 982, 1030, 1112, 1168, 1228, 1283, 1351,
                        1423, 1499, 1579, 1663],
    ErrorCorrection.H: [7, 14, 24, 34, 44, 58, 64, 84, 98, 119, 137, 155, 177, 194, 220, 250, 280, 310, 338, 382,
                        403, 439, 461, 511, 535, 593, 625, 658, 698, 742, 790, 842, 898, 958, 983, 1051, 1093,
                        1139, 1219, 1273],
}


def alnum_bits(length: int, version: int) -> int:
    """
    Data bits used by `length` characters in alphanumeric mode:
    4 bit mode indicator, 9/11/13 bit character count (versions 1-9/10-26/27-40),
    11 bits per character pair and 6 bits for a trailing single character.
    """
    count_indicator = 9 if version <= 9 else (11 if version <= 26 else 13)
    pairs, single = divmod(length, 2)
    return 4 + count_indicator + pairs * 11 + single * 6


def minimal_version(length: int, level: ErrorCorrection = ErrorCorrection.M) -> Optional[int]:
    """Smallest QR version holding `length` alphanumeric characters, None if it exceeds version 40."""
    for version, capacity in enumerate(CAP_ALNUM_CHARS[level], start=1):
        if length <= capacity:
            return version
    return None
