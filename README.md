# tvsc

tvsc provides building blocks for small half-duplex radio links. It includes a fragment format, an abstract radio interface, a simulated radio for tests, and blocking send and receive helpers. It also has a few support utilities.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

### Fragments: `tvsc.fragment`

`Fragment(mtu)` is a fixed-size `bytearray` of `mtu` bytes. It has a 5-byte header, followed by a big-endian payload length and then the payload.

The header carries:
- the sender id
- the destination id
- a 7-bit fragment index plus a continuation flag
- a 16-bit sequence number

The payload length prefix is 1, 2, 3, 4 or 8 bytes wide, depending on the MTU; see `payload_size_bytes_required(mtu)`. An MTU smaller than 7 raises `ValueError`.

- `sender_id`, `destination_id`, `sequence_number`, `fragment_index` and `payload_size` are read/write properties.
- `set_payload(data)` stores bytes and sets the payload size. It raises `ValueError` if the data exceeds `max_payload_size()`. `payload()` returns the stored bytes.
- Other methods:
  - `is_continued()`
  - `set_continuation_flag()`
  - `clear_continuation_flag()`
  - `total_length()`
  - `is_valid()`
  - `clear()`
  - `copy()`
  - `header_size()`
- Fragments compare equal when their MTU and bytes match.
- `str(fragment)` gives the length and a hex dump of the data.

### Radio interface: `tvsc.half_duplex_radio`

`HalfDuplexRadio` is an abstract base class. Its methods cover the following:

- **Modes:** `set_standby_mode`, `set_receive_mode`, `in_standby_mode`, `in_rx_mode` and `in_tx_mode`.
- **RSSI:** `read_rssi_dbm` and `rssi_measurement_time_us`.
- **Reception:** `has_fragment_available` and `read_received_fragment`, which returns a `Fragment`.
- **Transmission:** `transmit_fragment`, `is_transmitting_fragment` and `fragment_transmit_time_us`.
- **Channel activity:** `channel_activity_detected`.
- **Reset and MTU:** `reset`, `max_mtu` and `mtu`.

`new_fragment()` returns an empty fragment sized for the radio.

### Simulated radio: `tvsc.mock_radio`

`MockRadio(clock, mtu=256)` simulates a radio that has storage for one fragment. The convenience constructors `small_buffer_mock_radio` (65), `standard_mock_radio` (256), `large_buffer_mock_radio` (1500) and `jumbo_buffer_mock_radio` (9000) create radios with those MTUs.

You provide the clock. It needs a `current_time_micros()` method and a `register(radio)` method. Whenever its time changes, it must call `radio.update(time_us)`.

Fragments are scheduled for reception with `add_rx_fragment(timestamp_us, fragment)`. The radio drops a fragment in two cases:
- it arrives while the radio is not in receive mode;
- a newer due fragment is read before it.

Drops are counted by `count_dropped_fragments()`.

A transmission must stay in TX mode for `fragment_transmit_time_us()` microseconds (700). If it does, the fragment is recorded in `sent_fragments()` and the radio returns to standby. If the mode changes earlier, the transmission is counted by `count_corrupted_fragments()`.

`read_rssi_dbm()` switches the radio to standby and returns -85.0. `channel_activity_detected()` is always False. Passing a fragment whose MTU differs from the radio's raises `ValueError`.

### Blocking helpers: `tvsc.radio_utilities`

- `send(radio, fragment, timeout_ms=150)` waits for a clear channel and for any ongoing transmission to end. It then transmits and waits for that transmission to end. It returns True or False.
- `recv(radio, timeout_ms=150)` returns a received `Fragment`, or `None` on timeout.
- `block_until_fragment_available`, `block_until_channel_activity_clear` and `block_until_transmission_complete` each take `(radio, timeout_ms, poll_delay_ms=1)`.

These helpers poll against wall-clock time (`time.monotonic`). A `MockRadio` whose clock is not advanced while they wait will not change state during the wait.

### Radio settings: `tvsc.radio_settings`

`ModulationScheme`, `LineCoding` and `Encryption` are `IntEnum` types.

### Identification and pins

`tvsc.identification.TransceiverIdentification` holds an `expanded_id` (a random 64-bit value) and an `id` (its low byte).
- `initialize()` returns the identification saved earlier in this process. If there is none, it generates one and saves it.
- `load()` and `save()` keep the saved copy in memory only.
- `str()` gives `{expanded_id, id}`.

`tvsc.pin_mapping.pin_mapping_for(board)` returns a frozen `SingleRadioPinMapping` for `"teensy40"` or `"teensy41"`. The board name is matched case-insensitively. The mapping has these fields:
- `board_name`
- `reset_pin`
- `chip_select_pin`
- `interrupt_pin`

Unknown boards raise `ValueError`.

### Parameter domains: `tvsc.parameter_domain`

`configure_categorical_domain()` and `configure_continuous_domain(value_type=int)` return builders. Both builders produce `ParameterDomain` objects with `in_domain(value)` and `size()`.

- For a categorical domain, `size()` is the number of values.
- For an integer range, `size()` is the count of values it contains.
- For a float range, `size()` is `high - low`.

The continuous builder supports `with_range`, `with_precision`, `exclude_low`, `exclude_high`, `include_low` and `include_high`. A later `with_range` replaces an earlier one.

### Utilities

- `tvsc.bits.bit_width(value)`: the number of bits needed to store a non-negative integer.
- `tvsc.units.in_unit(unit, value)`: scales a value by a rational unit. The module defines the constants `NANO` through `GIGA`; for example, `in_unit(MILLI, 1500)` is `1.5`.
- `tvsc.strings.join_values(values)`: joins the `str()` of each value with `", "`.
- `tvsc.paths.random_string(length)` and `generate_random_path(base_dir, prefix="", suffix="")`: random names built from `[0-9A-Za-z]`, for tests. They are not suitable where security matters.
- `tvsc.errors.raise_error(exception_type, message, error_code=None)`: logs the message, then raises. With an errno `error_code`, it raises `exception_type(error_code, message)`.
- `tvsc.initializer.initialize(argv=None, log_dir="/var/log/tvsc")`:
  - It creates the log directory. If that fails it falls back to `/tmp/tvsc`.
  - It attaches a file handler named after the program to the root logger at INFO level.
  - It returns an `Initialization` with `program`, `log_dir`, `log_file` and `args`.
  - It does not parse flags.

## Example: a simulated link

```python
from tvsc.mock_radio import small_buffer_mock_radio


class ManualClock:
    def __init__(self):
        self._now = 0
        self._radios = []

    def current_time_micros(self):
        return self._now

    def register(self, radio):
        self._radios.append(radio)

    def set_current_time_micros(self, now):
        self._now = now
        for radio in self._radios:
            radio.update(now)


clock = ManualClock()
radio = small_buffer_mock_radio(clock)

incoming = radio.new_fragment()
incoming.sender_id = 1
radio.add_rx_fragment(1, incoming)

radio.set_receive_mode()
clock.set_current_time_micros(1)
received = radio.read_received_fragment()
print(received.sender_id)              # 1

outgoing = radio.new_fragment()
outgoing.sequence_number = 1
outgoing.set_payload(b"Hello, world!")
radio.transmit_fragment(outgoing)
clock.set_current_time_micros(1 + radio.fragment_transmit_time_us())
print(len(radio.sent_fragments()))     # 1
print(radio.in_standby_mode())         # True
```

## Example: parameter domains

```python
from tvsc.parameter_domain import configure_categorical_domain, configure_continuous_domain

bands = configure_categorical_domain().with_values(1, 3).create()
bands.in_domain(3)      # True
bands.size()            # 2.0

power = configure_continuous_domain(int).with_range(1, 3).exclude_low().create()
power.in_domain(1)      # False
power.size()            # 2.0
```

## What the package does not do

- It has no driver for real radio hardware. `HalfDuplexRadio` has only the simulated `MockRadio` implementation.
- It provides no clock. A `MockRadio` needs a clock object supplied by the caller, as in the example above.
- There is no command-line program or running echo service; the package is a library only.
- `TransceiverIdentification` does not persist anything across processes. A new process generates a new identification.