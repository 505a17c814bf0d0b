"""Bit-level helpers."""


def bit_width(value: int) -> int:
    """Return the number of bits required to store the non-negative integer ``value``."""
    if value < 0:
        raise ValueError(f"bit_width() requires a non-negative value, got {value}")
    return int(value).bit_length()