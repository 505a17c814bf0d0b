"""Process start-up: choose a log directory and attach file logging."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

DEFAULT_LOG_DIR = "/var/log/tvsc"
FALLBACK_LOG_DIR = Path("/tmp/tvsc")

_file_handler: Optional[logging.Handler] = None


@dataclass(frozen=True)
class Initialization:
    """What ``initialize`` set up."""

    program: str
    log_dir: Path
    log_file: Path
    args: List[str] = field(default_factory=list)


def _ensure_directory(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return True


def initialize(
    argv: Optional[Sequence[str]] = None, log_dir: str = DEFAULT_LOG_DIR
) -> Initialization:
    """Set up logging for an executable.

    The requested log directory is created if needed. If that fails, a fallback
    directory is tried; if that fails too, the requested directory is used anyway
    so that the resulting error names the directory the caller asked for.
    """
    global _file_handler

    arguments = list(sys.argv if argv is None else argv)
    if not arguments:
        raise ValueError("argv must hold at least the program name")

    requested = Path(log_dir)
    log_path = requested
    if not _ensure_directory(requested):
        fallback = Path(FALLBACK_LOG_DIR)
        log_path = fallback if _ensure_directory(fallback) else requested

    program = Path(arguments[0]).name or "program"
    log_file = log_path / f"{program}.log"
    handler = logging.FileHandler(log_file)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d] %(message)s")
    )

    root = logging.getLogger()
    if _file_handler is not None:
        root.removeHandler(_file_handler)
        _file_handler.close()
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    _file_handler = handler

    return Initialization(program=program, log_dir=log_path, log_file=log_file, args=arguments[1:])