"""Express numbers in units described by rational scale factors."""

from fractions import Fraction
from numbers import Rational

NANO = Fraction(1, 1_000_000_000)
MICRO = Fraction(1, 1_000_000)
MILLI = Fraction(1, 1_000)
CENTI = Fraction(1, 100)
DECI = Fraction(1, 10)
UNIT = Fraction(1)
DECA = Fraction(10)
HECTO = Fraction(100)
KILO = Fraction(1_000)
MEGA = Fraction(1_000_000)
GIGA = Fraction(1_000_000_000)


def in_unit(unit: Rational, value: float) -> float:
    """Scale ``value`` by the rational ``unit`` (numerator / denominator)."""
    return value * unit.numerator / float(unit.denominator)