"""Domains of allowed values for tunable parameters."""

import sys
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Type


def default_precision(value_type: Type) -> Any:
    """Smallest meaningful step for ``value_type``: machine epsilon for floats, else 1."""
    if issubclass(value_type, float):
        return sys.float_info.epsilon
    return value_type(1)


def _range_size(low, high, exclude_low: bool, exclude_high: bool) -> float:
    if isinstance(low, float) or isinstance(high, float):
        return float(high - low)
    result = float(high - low + 1)
    if exclude_low:
        result -= 1.0
    if exclude_high:
        result -= 1.0
    return result


class ParameterDomain(ABC):
    """A set of values a parameter may take."""

    @abstractmethod
    def in_domain(self, value) -> bool:
        """Whether ``value`` belongs to the domain."""

    @abstractmethod
    def size(self) -> float:
        """Size of the domain: a count for discrete domains, a length for continuous ones."""


class CategoricalParameterDomain(ParameterDomain):
    """A domain made of an explicit list of values."""

    def __init__(self, values: Iterable) -> None:
        self._values = list(values)

    def in_domain(self, value) -> bool:
        return value in self._values

    def size(self) -> float:
        return float(len(self._values))


class ContinuousParameterDomain(ParameterDomain):
    """A domain made of a range between two bounds, each open or closed."""

    def __init__(self, low, high, precision, exclude_low: bool, exclude_high: bool) -> None:
        self._low = low
        self._high = high
        self._precision = precision
        self._exclude_low = exclude_low
        self._exclude_high = exclude_high

    @property
    def precision(self):
        return self._precision

    def in_domain(self, value) -> bool:
        above_low = self._low < value if self._exclude_low else self._low <= value
        below_high = value < self._high if self._exclude_high else value <= self._high
        return above_low and below_high

    def size(self) -> float:
        return _range_size(self._low, self._high, self._exclude_low, self._exclude_high)


class CategoricalDomainBuilder:
    """Collects values for a categorical domain."""

    def __init__(self) -> None:
        self._values: List = []

    def with_values(self, *args) -> "CategoricalDomainBuilder":
        self._values.extend(args)
        return self

    def create(self) -> ParameterDomain:
        values, self._values = self._values, []
        return CategoricalParameterDomain(values)


class ContinuousDomainBuilder:
    """Configures the bounds of a continuous domain. A later range replaces an earlier one."""

    def __init__(self, value_type: Type = int) -> None:
        self._value_type = value_type
        self._low = value_type()
        self._high = value_type()
        self._precision = default_precision(value_type)
        self._exclude_low = False
        self._exclude_high = False

    def with_range(self, low, high) -> "ContinuousDomainBuilder":
        self._low = self._value_type(low)
        self._high = self._value_type(high)
        return self

    def with_precision(self, precision) -> "ContinuousDomainBuilder":
        self._precision = self._value_type(precision)
        return self

    def exclude_low(self) -> "ContinuousDomainBuilder":
        self._exclude_low = True
        return self

    def exclude_high(self) -> "ContinuousDomainBuilder":
        self._exclude_high = True
        return self

    def include_low(self) -> "ContinuousDomainBuilder":
        self._exclude_low = False
        return self

    def include_high(self) -> "ContinuousDomainBuilder":
        self._exclude_high = False
        return self

    def create(self) -> ParameterDomain:
        return ContinuousParameterDomain(
            self._low, self._high, self._precision, self._exclude_low, self._exclude_high
        )


def configure_categorical_domain() -> CategoricalDomainBuilder:
    """Start configuring a categorical domain."""
    return CategoricalDomainBuilder()


def configure_continuous_domain(value_type: Type = int) -> ContinuousDomainBuilder:
    """Start configuring a continuous domain over ``value_type``."""
    return ContinuousDomainBuilder(value_type)