"""Interface for the transactional states of a half-duplex radio."""

from abc import ABC, abstractmethod

from tvsc.fragment import Fragment


class HalfDuplexRadio(ABC):
    """A radio that is either idle, receiving or transmitting, never both at once.

    Frequency, modulation and similar configuration are outside this interface.
    """

    def __init__(self, max_mtu: int) -> None:
        self._max_mtu = max_mtu

    def max_mtu(self) -> int:
        """Largest fragment the radio can ever handle."""
        return self._max_mtu

    def mtu(self) -> int:
        """Current MTU; by default the maximum."""
        return self.max_mtu()

    def new_fragment(self) -> Fragment:
        """An empty fragment sized for this radio."""
        return Fragment(self.max_mtu())

    @abstractmethod
    def reset(self) -> None:
        """Return the radio to its default state in standby mode. Idempotent."""

    @abstractmethod
    def read_rssi_dbm(self) -> float:
        """Measure the received signal strength in dBm; may interrupt rx or tx."""

    @abstractmethod
    def rssi_measurement_time_us(self) -> int:
        """Upper bound on the time to measure RSSI, in microseconds."""

    @abstractmethod
    def fragment_transmit_time_us(self) -> int:
        """Upper bound on the time to transmit a fragment, in microseconds."""

    @abstractmethod
    def set_standby_mode(self) -> None:
        """Stop receiving and transmitting. Idempotent."""

    @abstractmethod
    def set_receive_mode(self) -> None:
        """Start receiving. Idempotent."""

    @abstractmethod
    def in_standby_mode(self) -> bool:
        """Whether the radio is in standby."""

    @abstractmethod
    def in_rx_mode(self) -> bool:
        """Whether the radio is receiving."""

    @abstractmethod
    def in_tx_mode(self) -> bool:
        """Whether the radio is transmitting; entered only through ``transmit_fragment``."""

    @abstractmethod
    def has_fragment_available(self) -> bool:
        """Whether a received fragment is waiting to be read."""

    @abstractmethod
    def read_received_fragment(self) -> Fragment:
        """Return the received fragment; the radio then discards it."""

    @abstractmethod
    def channel_activity_detected(self) -> bool:
        """Whether the channel is busy; transmitting should wait until it clears."""

    @abstractmethod
    def transmit_fragment(self, fragment: Fragment) -> bool:
        """Start transmitting ``fragment``; False if the transmission could not start."""

    def is_transmitting_fragment(self) -> bool:
        """Whether a transmission is in progress; by default, being in TX mode."""
        return self.in_tx_mode()