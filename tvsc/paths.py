"""Random file-system path generation, mainly for tests."""

import random
import string
from os import PathLike
from pathlib import Path
from typing import Union

_CHARACTERS = string.digits + string.ascii_uppercase + string.ascii_lowercase
_RNG = random.Random()


def random_string(length: int) -> str:
    """Return a random string of ``length`` characters drawn from [0-9A-Za-z]."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return "".join(_RNG.choice(_CHARACTERS) for _ in range(length))


def generate_random_path(
    base_dir: Union[str, PathLike], prefix: str = "", suffix: str = ""
) -> Path:
    """Return a random path under ``base_dir`` whose name starts with ``prefix`` and ends with ``suffix``.

    The path may or may not already exist. Not suitable where security matters.
    """
    return Path(base_dir) / f"{prefix}{random_string(10)}{suffix}"