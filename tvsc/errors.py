"""Raise exceptions after logging where they came from."""

import logging
import os
from typing import NoReturn, Optional, Type

_LOG = logging.getLogger(__name__)


def raise_error(
    exception_type: Type[BaseException], message: str, error_code: Optional[int] = None
) -> NoReturn:
    """Log ``message`` at error level and raise ``exception_type``.

    Without an error code the exception is built from the message alone. With an
    error code (an ``errno`` value) the exception is built as
    ``exception_type(error_code, message)``, matching the signature of ``OSError``.
    """
    if error_code is None:
        _LOG.error("%s", message, stacklevel=2)
        raise exception_type(message)
    _LOG.error("%s (%s)", message, os.strerror(error_code), stacklevel=2)
    raise exception_type(error_code, message)