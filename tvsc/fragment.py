"""Fragments: the unit of data a radio receives and transmits."""

from tvsc.bits import bit_width

_SENDER_ID_OFFSET = 0
_DESTINATION_ID_OFFSET = 1
_FRAGMENT_INDEX_OFFSET = 2
_SEQUENCE_NUMBER_OFFSET = 3
HEADER_SIZE = 5
_PAYLOAD_SIZE_OFFSET = HEADER_SIZE

_CONTINUATION_FLAG = 0x80
_INDEX_MASK = 0x7F


def payload_size_bytes_required(mtu: int) -> int:
    """Number of bytes used to encode the payload size in a fragment of the given MTU."""
    if mtu < HEADER_SIZE + 2:
        raise ValueError(
            f"MTU {mtu} is too small: need space for the header plus one size byte "
            "plus one payload byte"
        )
    width = bit_width(mtu - HEADER_SIZE)
    for limit, size_bytes in ((8, 1), (16, 2), (24, 3), (32, 4)):
        if width < limit:
            return size_bytes
    return 8


class Fragment:
    """A header plus payload laid out in a fixed-size byte buffer of ``mtu`` bytes.

    A fragment may hold all of a packet or part of one, but never parts of
    several packets.
    """

    def __init__(self, mtu: int) -> None:
        self._size_bytes = payload_size_bytes_required(mtu)
        self.mtu = mtu
        self.data = bytearray(mtu)

    @property
    def _payload_data_offset(self) -> int:
        return _PAYLOAD_SIZE_OFFSET + self._size_bytes

    def header_size(self) -> int:
        return HEADER_SIZE

    def max_payload_size(self) -> int:
        return self.mtu - HEADER_SIZE - self._size_bytes

    def is_valid(self) -> bool:
        """Whether the encoded length fits in the MTU."""
        return self.total_length() <= self.mtu

    @property
    def sender_id(self) -> int:
        return self.data[_SENDER_ID_OFFSET]

    @sender_id.setter
    def sender_id(self, value: int) -> None:
        self.data[_SENDER_ID_OFFSET] = value

    @property
    def destination_id(self) -> int:
        return self.data[_DESTINATION_ID_OFFSET]

    @destination_id.setter
    def destination_id(self, value: int) -> None:
        self.data[_DESTINATION_ID_OFFSET] = value

    @property
    def sequence_number(self) -> int:
        start = _SEQUENCE_NUMBER_OFFSET
        return int.from_bytes(self.data[start : start + 2], "big")

    @sequence_number.setter
    def sequence_number(self, value: int) -> None:
        start = _SEQUENCE_NUMBER_OFFSET
        self.data[start : start + 2] = (value & 0xFFFF).to_bytes(2, "big")

    @property
    def fragment_index(self) -> int:
        return self.data[_FRAGMENT_INDEX_OFFSET] & _INDEX_MASK

    @fragment_index.setter
    def fragment_index(self, index: int) -> None:
        if not 0 <= index <= _INDEX_MASK:
            raise ValueError(f"fragment index must be in [0, {_INDEX_MASK}], got {index}")
        flag = self.data[_FRAGMENT_INDEX_OFFSET] & _CONTINUATION_FLAG
        self.data[_FRAGMENT_INDEX_OFFSET] = index | flag

    def is_continued(self) -> bool:
        return bool(self.data[_FRAGMENT_INDEX_OFFSET] & _CONTINUATION_FLAG)

    def set_continuation_flag(self) -> None:
        self.data[_FRAGMENT_INDEX_OFFSET] |= _CONTINUATION_FLAG

    def clear_continuation_flag(self) -> None:
        self.data[_FRAGMENT_INDEX_OFFSET] &= _INDEX_MASK

    @property
    def payload_size(self) -> int:
        start = _PAYLOAD_SIZE_OFFSET
        return int.from_bytes(self.data[start : start + self._size_bytes], "big")

    @payload_size.setter
    def payload_size(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"payload size must be non-negative, got {size}")
        mask = (1 << (8 * self._size_bytes)) - 1
        start = _PAYLOAD_SIZE_OFFSET
        self.data[start : start + self._size_bytes] = (size & mask).to_bytes(
            self._size_bytes, "big"
        )

    def payload(self) -> bytes:
        """The payload bytes, as many as the encoded size says (bounded by the buffer)."""
        start = self._payload_data_offset
        end = min(start + self.payload_size, self.mtu)
        return bytes(self.data[start:end])

    def set_payload(self, payload: bytes) -> None:
        """Store ``payload`` and set the payload size to its length."""
        payload = bytes(payload)
        if len(payload) > self.max_payload_size():
            raise ValueError(
                f"payload of {len(payload)} bytes exceeds the maximum of "
                f"{self.max_payload_size()}"
            )
        start = self._payload_data_offset
        self.data[start : start + len(payload)] = payload
        self.payload_size = len(payload)

    def total_length(self) -> int:
        return HEADER_SIZE + self._size_bytes + self.payload_size

    def clear(self) -> None:
        self.data[:] = bytes(self.mtu)

    def copy(self) -> "Fragment":
        result = Fragment(self.mtu)
        result.data[:] = self.data
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.mtu == other.mtu and self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Fragment(mtu={self.mtu}, sender_id={self.sender_id}, "
            f"destination_id={self.destination_id}, sequence_number={self.sequence_number}, "
            f"payload_size={self.payload_size})"
        )

    def __str__(self) -> str:
        return (
            "Raw fragment:\n"
            f"length: {self.total_length()}\n"
            f"data:\n{self.data.hex(' ')}\n"
        )