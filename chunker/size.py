from .common import (
    MAX_BYTE_COUNT,
    UNIT_MULTIPLIERS,
    ByteCount,
    InvalidFormat,
    InvalidMagnitude,
)


def parse_size(size_str: str) -> ByteCount:
    """
    Convert a human readable size such as ``5MB``, ``5 m`` or ``10`` into bytes.

    The accepted shape is ``<digits>[spaces][K|M|G|B][B]``, case-insensitive.
    A missing unit means bytes.

    Raises:
        InvalidFormat: the string does not have the accepted shape
        InvalidMagnitude: the value does not fit in a signed 64-bit integer
    """
    s = size_str.upper()

    # magnitude
    i = 0
    while i < len(s) and s[i] in "0123456789":
        i += 1
    digits = s[:i]
    if not digits:
        raise InvalidFormat(f"invalid size format: {size_str!r}")

    # spaces or tabs between the magnitude and the unit
    while i < len(s) and s[i] in " \t":
        i += 1

    unit = ""
    if i < len(s) and s[i] in "KMGB":
        unit = s[i]
        i += 1

    # optional trailing "B", as in "KB" or "MB"
    if i < len(s) and s[i] == "B":
        i += 1

    if i != len(s):
        raise InvalidFormat(f"invalid size format: {size_str!r}")

    # int() refuses very long digit strings, so check the length first
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_BYTE_COUNT)):
        raise InvalidMagnitude(f"invalid size value: {size_str!r} is out of range")

    value = int(digits)
    if value > MAX_BYTE_COUNT:
        raise InvalidMagnitude(f"invalid size value: {size_str!r} is out of range")

    size = value * UNIT_MULTIPLIERS[unit]
    if size > MAX_BYTE_COUNT:
        raise InvalidMagnitude(f"invalid size value: {size_str!r} is out of range")

    return size
