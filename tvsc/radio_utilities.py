"""Blocking helpers for sending and receiving fragments over a half-duplex radio."""

import logging
import time
from typing import Callable, Optional

from tvsc.fragment import Fragment
from tvsc.half_duplex_radio import HalfDuplexRadio

_LOG = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 150
DEFAULT_POLL_DELAY_MS = 1


def _time_millis() -> float:
    return time.monotonic() * 1000.0


def _block_while(condition: Callable[[], bool], timeout_ms: int, poll_delay_ms: int) -> bool:
    """Poll ``condition`` until it is false; False if that takes longer than ``timeout_ms``."""
    start = _time_millis()
    while condition():
        if _time_millis() - start > timeout_ms:
            return False
        time.sleep(poll_delay_ms / 1000.0 if poll_delay_ms > 0 else 0)
    return True


def block_until_fragment_available(
    radio: HalfDuplexRadio, timeout_ms: int, poll_delay_ms: int = DEFAULT_POLL_DELAY_MS
) -> bool:
    """Wait until the radio has a received fragment; False on timeout."""
    return _block_while(lambda: not radio.has_fragment_available(), timeout_ms, poll_delay_ms)


def block_until_channel_activity_clear(
    radio: HalfDuplexRadio, timeout_ms: int, poll_delay_ms: int = DEFAULT_POLL_DELAY_MS
) -> bool:
    """Wait until the channel is quiet; False on timeout."""
    return _block_while(radio.channel_activity_detected, timeout_ms, poll_delay_ms)


def block_until_transmission_complete(
    radio: HalfDuplexRadio, timeout_ms: int, poll_delay_ms: int = DEFAULT_POLL_DELAY_MS
) -> bool:
    """Wait until the radio finishes its current transmission; False on timeout."""
    return _block_while(radio.is_transmitting_fragment, timeout_ms, poll_delay_ms)


def recv(radio: HalfDuplexRadio, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> Optional[Fragment]:
    """Wait for and return a received fragment, or None if none arrives in time."""
    if not block_until_fragment_available(radio, timeout_ms):
        _LOG.warning("recv() -- Receive timed out. No fragments available.")
        return None
    return radio.read_received_fragment()


def send(
    radio: HalfDuplexRadio, fragment: Fragment, timeout_ms: int = DEFAULT_TIMEOUT_MS
) -> bool:
    """Transmit ``fragment`` once the channel is clear and wait for the transmission to end.

    Returns False if the channel stays busy, a previous transmission does not end,
    the radio refuses the fragment, or the transmission does not finish in time.
    """
    if not block_until_channel_activity_clear(radio, timeout_ms):
        _LOG.warning("send() -- Failed due to channel activity.")
        return False

    if not block_until_transmission_complete(radio, timeout_ms):
        _LOG.warning("send() -- Failed due to ongoing transmission.")
        return False

    if not radio.transmit_fragment(fragment):
        _LOG.warning("send() -- Failed in transmit_fragment().")
        return False

    if not block_until_transmission_complete(radio, timeout_ms):
        _LOG.warning("send() -- Failed due to block_until_transmission_complete() timeout.")
        return False
    return True