"""A simulated half-duplex radio driven by a controllable clock, for tests."""

import logging
from enum import Enum
from typing import Dict, List, Protocol

from tvsc.fragment import Fragment
from tvsc.half_duplex_radio import HalfDuplexRadio

_LOG = logging.getLogger(__name__)


class _Clock(Protocol):
    """What ``MockRadio`` needs from a clock.

    The clock must report the current time in microseconds and, once a radio has
    registered with it, call ``radio.update(time_us)`` whenever its time changes.
    """

    def current_time_micros(self) -> int: ...

    def register(self, clockable) -> None: ...


class _Mode(Enum):
    STANDBY = "standby"
    RX = "rx"
    TX = "tx"


class MockRadio(HalfDuplexRadio):
    """Simulates a radio with storage for a single fragment.

    Fragments to be received are scheduled by timestamp. Fragments arriving while
    the radio is not receiving are dropped, as are fragments overtaken by newer ones
    before being read. A transmission must stay in TX mode for
    ``FRAGMENT_TRANSMIT_TIME_US`` or it is counted as corrupted.
    """

    FRAGMENT_TRANSMIT_TIME_US = 700
    RSSI_MEASUREMENT_TIME_US = 500

    def __init__(self, clock: _Clock, mtu: int = 256) -> None:
        super().__init__(mtu)
        self._clock = clock
        self._mode = _Mode.STANDBY
        self._rx_fragments: Dict[int, Fragment] = {}
        self._sent_fragments: List[Fragment] = []
        self._dropped = 0
        self._corrupted = 0
        self._buffered_fragment = Fragment(mtu)
        self._have_fragment_for_tx = False
        self._last_switch_to_tx_mode_us = 0
        clock.register(self)

    def _check_mtu(self, fragment: Fragment) -> None:
        if fragment.mtu != self.max_mtu():
            raise ValueError(
                f"fragment MTU {fragment.mtu} does not match radio MTU {self.max_mtu()}"
            )

    def _process_reception(self, current_time_us: int) -> None:
        """Drop fragments that arrived while the radio was not receiving."""
        if self._mode is _Mode.RX:
            return
        missed = [ts for ts in self._rx_fragments if ts < current_time_us]
        for ts in missed:
            del self._rx_fragments[ts]
        self._dropped += len(missed)

    def _process_ongoing_transmission(self, current_time_us: int) -> None:
        if not self._have_fragment_for_tx:
            return
        elapsed = current_time_us - self._last_switch_to_tx_mode_us
        if self._mode is _Mode.TX and elapsed >= self.FRAGMENT_TRANSMIT_TIME_US:
            self._sent_fragments.append(self._buffered_fragment.copy())
            self._finish_transmission()
            self._mode = _Mode.STANDBY
        elif self._mode is not _Mode.TX:
            self._corrupted += 1
            self._finish_transmission()

    def _finish_transmission(self) -> None:
        self._have_fragment_for_tx = False
        self._buffered_fragment.clear()
        self._last_switch_to_tx_mode_us = 0

    def update(self, current_time_us: int) -> None:
        """Advance the simulation to ``current_time_us``; called by the clock."""
        self._process_reception(current_time_us)
        self._process_ongoing_transmission(current_time_us)

    def _set_tx_mode(self) -> None:
        self._mode = _Mode.TX
        now = self._clock.current_time_micros()
        self._last_switch_to_tx_mode_us = now
        self.update(now)

    def add_rx_fragment(self, rx_timestamp_us: int, fragment: Fragment) -> None:
        """Schedule ``fragment`` to be received at ``rx_timestamp_us``.

        A fragment already scheduled at the same timestamp is kept.
        """
        self._check_mtu(fragment)
        self._rx_fragments.setdefault(rx_timestamp_us, fragment.copy())

    def remaining_rx_fragment_count(self) -> int:
        return len(self._rx_fragments)

    def sent_fragments(self) -> List[Fragment]:
        """Fragments that were transmitted successfully, oldest first."""
        return [fragment.copy() for fragment in self._sent_fragments]

    def count_dropped_fragments(self) -> int:
        return self._dropped

    def count_corrupted_fragments(self) -> int:
        return self._corrupted

    def in_standby_mode(self) -> bool:
        return self._mode is _Mode.STANDBY

    def in_rx_mode(self) -> bool:
        return self._mode is _Mode.RX

    def in_tx_mode(self) -> bool:
        return self._mode is _Mode.TX

    def reset(self) -> None:
        self._buffered_fragment.clear()
        self.set_standby_mode()

    def read_rssi_dbm(self) -> float:
        self.set_standby_mode()
        return -85.0

    def rssi_measurement_time_us(self) -> int:
        return self.RSSI_MEASUREMENT_TIME_US

    def fragment_transmit_time_us(self) -> int:
        return self.FRAGMENT_TRANSMIT_TIME_US

    def set_standby_mode(self) -> None:
        self._mode = _Mode.STANDBY
        self.update(self._clock.current_time_micros())

    def set_receive_mode(self) -> None:
        self._mode = _Mode.RX
        self.update(self._clock.current_time_micros())

    def has_fragment_available(self) -> bool:
        if not self._rx_fragments:
            return False
        return min(self._rx_fragments) <= self._clock.current_time_micros()

    def read_received_fragment(self) -> Fragment:
        """Return the newest fragment due by now; older due fragments count as dropped.

        With nothing due, an empty fragment is returned.
        """
        now = self._clock.current_time_micros()
        due = sorted(ts for ts in self._rx_fragments if ts <= now)
        if not due:
            return self.new_fragment()
        chosen = self._rx_fragments[due[-1]]
        for ts in due:
            del self._rx_fragments[ts]
        self._dropped += len(due) - 1
        return chosen.copy()

    def channel_activity_detected(self) -> bool:
        return False

    def is_transmitting_fragment(self) -> bool:
        return self._have_fragment_for_tx

    def transmit_fragment(self, fragment: Fragment) -> bool:
        self._check_mtu(fragment)
        if fragment.total_length() == 0:
            _LOG.warning("fragment.length is zero.")
            return False
        self.set_standby_mode()
        self._buffered_fragment = fragment.copy()
        self._have_fragment_for_tx = True
        self._set_tx_mode()
        return True


def small_buffer_mock_radio(clock: _Clock) -> MockRadio:
    """A mock radio with the MTU of cheap hobbyist radios."""
    return MockRadio(clock, 65)


def standard_mock_radio(clock: _Clock) -> MockRadio:
    """A mock radio with a 256-byte MTU."""
    return MockRadio(clock, 256)


def large_buffer_mock_radio(clock: _Clock) -> MockRadio:
    """A mock radio with the MTU of most ethernet devices."""
    return MockRadio(clock, 1500)


def jumbo_buffer_mock_radio(clock: _Clock) -> MockRadio:
    """A mock radio with an MTU sized for jumbo ethernet frames."""
    return MockRadio(clock, 9000)