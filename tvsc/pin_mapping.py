"""Pin assignments for a single RF69HCW radio on supported boards."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SingleRadioPinMapping:
    """Pins wiring one radio module to a board.

    ``interrupt_pin`` is the pin wired to the module's DIO0 line (marked G0 on the
    breakout board); ``chip_select_pin`` is wired to its NSS line.
    """

    board_name: str
    reset_pin: int
    chip_select_pin: int
    interrupt_pin: int


TEENSY40 = SingleRadioPinMapping(
    board_name="RF69HCW 433MHz Teensy40", reset_pin=9, chip_select_pin=10, interrupt_pin=14
)

TEENSY41 = SingleRadioPinMapping(
    board_name="RF69HCW 433MHz Teensy41", reset_pin=9, chip_select_pin=10, interrupt_pin=24
)

_MAPPINGS: Dict[str, SingleRadioPinMapping] = {
    "teensy40": TEENSY40,
    "teensy41": TEENSY41,
}


def pin_mapping_for(board: str) -> SingleRadioPinMapping:
    """Return the default pin mapping for ``board`` (case-insensitive)."""
    try:
        return _MAPPINGS[board.lower()]
    except KeyError:
        known = ", ".join(sorted(_MAPPINGS))
        raise ValueError(f"unknown board {board!r}; known boards: {known}") from None