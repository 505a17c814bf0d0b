"""Fragment framing, a half-duplex radio interface, a simulated radio, blocking send/receive helpers and small support utilities."""

__version__ = "0.1.0"