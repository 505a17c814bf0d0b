"""String helpers."""

from typing import Iterable


def join_values(values: Iterable[object]) -> str:
    """Render each value with ``str`` and join them with ", "."""
    return ", ".join(str(value) for value in values)