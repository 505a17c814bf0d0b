"""Identification of a transceiver."""

import dataclasses
import secrets
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass
class TransceiverIdentification:
    """A transceiver's identity.

    ``expanded_id`` is a random 64-bit value, good for uniqueness. ``id`` is its low
    byte, used in transmissions to save space.
    """

    expanded_id: int = 0
    id: int = 0

    _saved: ClassVar[Optional["TransceiverIdentification"]] = None

    @classmethod
    def initialize(cls) -> "TransceiverIdentification":
        """Load a saved identification, or generate and save a new random one."""
        loaded = cls.load()
        if loaded is not None:
            return loaded
        expanded_id = secrets.randbits(64)
        result = cls(expanded_id=expanded_id, id=expanded_id & 0xFF)
        result.save()
        return result

    @classmethod
    def load(cls) -> Optional["TransceiverIdentification"]:
        """Return a copy of the identification saved in this process, or None."""
        saved = cls._saved
        if saved is None:
            return None
        return dataclasses.replace(saved)

    def save(self) -> None:
        """Keep a copy of this identification for later calls to load()."""
        type(self)._saved = dataclasses.replace(self)

    def __str__(self) -> str:
        return f"{{{self.expanded_id}, {self.id}}}"