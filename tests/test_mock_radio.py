import pytest

from tvsc.fragment import Fragment
from tvsc.mock_radio import (
    MockRadio,
    jumbo_buffer_mock_radio,
    large_buffer_mock_radio,
    small_buffer_mock_radio,
    standard_mock_radio,
)


class FakeClock:
    def __init__(self):
        self._now = 0
        self._clockables = []

    def register(self, clockable):
        self._clockables.append(clockable)

    def current_time_micros(self):
        return self._now

    def set_current_time_micros(self, value):
        self._now = value
        for clockable in self._clockables:
            clockable.update(value)

    def increment_current_time_micros(self, delta):
        self.set_current_time_micros(self._now + delta)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def radio(clock):
    return small_buffer_mock_radio(clock)


def make_fragment(radio, sender_id):
    fragment = radio.new_fragment()
    fragment.sender_id = sender_id
    return fragment


def test_fragments_available_at_designated_time(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.set_receive_mode()
    assert not radio.has_fragment_available()
    clock.set_current_time_micros(1)
    assert radio.has_fragment_available()


def test_can_receive_fragment(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.set_receive_mode()
    assert not radio.has_fragment_available()
    clock.set_current_time_micros(1)
    assert radio.has_fragment_available()
    received = radio.read_received_fragment()
    assert received.sender_id == 1


def test_can_receive_multiple_fragments(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.add_rx_fragment(2, make_fragment(radio, 2))
    radio.set_receive_mode()
    clock.set_current_time_micros(1)
    assert radio.has_fragment_available()
    assert radio.read_received_fragment().sender_id == 1

    clock.set_current_time_micros(2)
    assert radio.has_fragment_available()
    assert radio.read_received_fragment().sender_id == 2

    clock.set_current_time_micros(3)
    assert not radio.has_fragment_available()


def test_leaving_receive_mode_before_receipt_drops_fragment(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.add_rx_fragment(2, make_fragment(radio, 2))
    radio.set_receive_mode()
    clock.set_current_time_micros(1)
    assert radio.has_fragment_available()
    assert radio.read_received_fragment().sender_id == 1

    radio.set_standby_mode()
    clock.set_current_time_micros(3)

    assert not radio.has_fragment_available()
    assert radio.count_dropped_fragments() == 1


def test_returning_to_receive_mode_still_drops_fragment(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.add_rx_fragment(2, make_fragment(radio, 2))
    radio.set_receive_mode()
    clock.set_current_time_micros(1)
    assert radio.has_fragment_available()
    assert radio.read_received_fragment().sender_id == 1

    radio.set_standby_mode()
    clock.set_current_time_micros(3)
    radio.set_receive_mode()

    assert not radio.has_fragment_available()
    assert radio.count_dropped_fragments() == 1


def test_can_transmit_fragment(clock, radio):
    fragment = make_fragment(radio, 1)
    clock.set_current_time_micros(1)
    assert radio.transmit_fragment(fragment)
    clock.set_current_time_micros(clock.current_time_micros() + radio.fragment_transmit_time_us())

    sent = radio.sent_fragments()
    assert len(sent) == 1
    assert all(f.sender_id == 1 for f in sent)


def test_switches_to_standby_after_transmitting(clock, radio):
    clock.set_current_time_micros(1)
    assert radio.transmit_fragment(make_fragment(radio, 1))
    assert radio.in_tx_mode()
    assert radio.is_transmitting_fragment()

    clock.increment_current_time_micros(radio.fragment_transmit_time_us())

    assert len(radio.sent_fragments()) == 1
    assert radio.in_standby_mode()
    assert not radio.is_transmitting_fragment()


def test_transmitting_while_transmitting_corrupts(clock, radio):
    fragment = make_fragment(radio, 1)
    clock.set_current_time_micros(1)
    assert radio.transmit_fragment(fragment)

    clock.set_current_time_micros(
        clock.current_time_micros() + radio.fragment_transmit_time_us() - 1
    )
    fragment.sender_id = 2
    assert radio.transmit_fragment(fragment)

    clock.set_current_time_micros(clock.current_time_micros() + radio.fragment_transmit_time_us())

    sent = radio.sent_fragments()
    assert len(sent) == 1
    assert radio.count_corrupted_fragments() == 1
    assert all(f.sender_id == 2 for f in sent)


def test_leaving_tx_mode_early_corrupts(clock, radio):
    clock.set_current_time_micros(1)
    assert radio.transmit_fragment(make_fragment(radio, 1))
    radio.set_receive_mode()
    clock.increment_current_time_micros(radio.fragment_transmit_time_us())
    assert radio.sent_fragments() == []
    assert radio.count_corrupted_fragments() == 1


def test_reading_with_nothing_due_returns_empty_fragment(clock, radio):
    radio.add_rx_fragment(5, make_fragment(radio, 7))
    radio.set_receive_mode()
    received = radio.read_received_fragment()
    assert received == Fragment(radio.max_mtu())
    assert radio.remaining_rx_fragment_count() == 1


def test_reading_skips_older_due_fragments(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.add_rx_fragment(2, make_fragment(radio, 2))
    radio.set_receive_mode()
    clock.set_current_time_micros(2)
    assert radio.read_received_fragment().sender_id == 2
    assert radio.count_dropped_fragments() == 1
    assert radio.remaining_rx_fragment_count() == 0


def test_duplicate_timestamp_keeps_first_fragment(clock, radio):
    radio.add_rx_fragment(1, make_fragment(radio, 1))
    radio.add_rx_fragment(1, make_fragment(radio, 2))
    assert radio.remaining_rx_fragment_count() == 1
    radio.set_receive_mode()
    clock.set_current_time_micros(1)
    assert radio.read_received_fragment().sender_id == 1


def test_scheduled_fragment_is_independent_of_caller_copy(clock, radio):
    fragment = make_fragment(radio, 1)
    radio.add_rx_fragment(1, fragment)
    fragment.sender_id = 9
    radio.set_receive_mode()
    clock.set_current_time_micros(1)
    assert radio.read_received_fragment().sender_id == 1


def test_mismatched_mtu_is_rejected(radio):
    with pytest.raises(ValueError):
        radio.add_rx_fragment(1, Fragment(256))
    with pytest.raises(ValueError):
        radio.transmit_fragment(Fragment(256))


def test_read_rssi_puts_radio_in_standby(radio):
    radio.set_receive_mode()
    assert radio.read_rssi_dbm() == -85.0
    assert radio.in_standby_mode()


def test_reset_returns_to_standby(radio):
    radio.set_receive_mode()
    assert radio.in_rx_mode()
    radio.reset()
    assert radio.in_standby_mode()
    assert not radio.channel_activity_detected()


def test_timing_constants(radio):
    assert radio.fragment_transmit_time_us() == 700
    assert radio.rssi_measurement_time_us() == 500


@pytest.mark.parametrize(
    "factory, mtu",
    [
        (small_buffer_mock_radio, 65),
        (standard_mock_radio, 256),
        (large_buffer_mock_radio, 1500),
        (jumbo_buffer_mock_radio, 9000),
    ],
)
def test_factories_set_mtu(clock, factory, mtu):
    radio = factory(clock)
    assert isinstance(radio, MockRadio)
    assert radio.max_mtu() == mtu
    assert radio.mtu() == mtu
    assert radio.new_fragment().mtu == mtu