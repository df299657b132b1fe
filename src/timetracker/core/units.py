"""
Time unit registry.

Every unit is defined by a single arithmetic rule relative to seconds,
the pivot unit. Seconds itself has no rule: it is always supported and
never stored as a definition.
"""

import operator as _op
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional, Union

from loguru import logger

from .errors import DivisionByZero, InvalidUnitName, UnsupportedLogic, UnsupportedOperator

Number = Union[int, float]

BASE_UNIT = "s"

SUPPORTED_OPERATORS = ("+", "-", "*", "/")

# seconds -> unit
_FORWARD: dict[str, Callable[[Number, Number], Number]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}

# unit -> seconds
_REVERSE: dict[str, Callable[[Number, Number], Number]] = {
    "+": _op.sub,
    "-": _op.add,
    "*": _op.truediv,
    "/": _op.mul,
}


def apply_rule(value: Number, factor: Number, operator: str, reverse: bool = False) -> Number:
    """
    Apply a unit's conversion rule to a value.

    Args:
        value: The value to convert
        factor: The unit's conversion factor
        operator: One of '+', '-', '*', '/'
        reverse: Undo the rule (unit -> seconds) instead of applying it

    Raises:
        UnsupportedLogic: If the operator is not one of the supported four
    """
    table = _REVERSE if reverse else _FORWARD
    try:
        fn = table[operator]
    except KeyError:
        raise UnsupportedLogic(
            f"Unsupported operator '{operator}' in unit definition."
        ) from None
    return fn(value, factor)


@dataclass(frozen=True)
class UnitDefinition:
    """Conversion rule of one unit relative to seconds."""

    name: str
    operator: str
    value: Number

    def from_seconds(self, seconds: Number) -> Number:
        return apply_rule(seconds, self.value, self.operator)

    def to_seconds(self, amount: Number) -> Number:
        return apply_rule(amount, self.value, self.operator, reverse=True)


_BUILTIN_DEFINITIONS = (
    UnitDefinition("m", "/", 60),
    UnitDefinition("ms", "*", 1_000),
    UnitDefinition("us", "*", 1_000_000),
    UnitDefinition("ns", "*", 1_000_000_000),
)


class Unit:
    """
    Registry of the units a Result can be converted to.

    Built-in units (m, s, ms, us, ns) live for the whole life of the
    registry and cannot be overridden. Custom units are appended with
    add() and cannot be removed.
    """

    def __init__(self):
        self._supported: list[str] = ["m", BASE_UNIT, "ms", "us", "ns"]
        self._definitions: dict[str, UnitDefinition] = {
            d.name: d for d in _BUILTIN_DEFINITIONS
        }
        self._custom: list[str] = []

    def add(self, name: str, operator: str, value: Number) -> UnitDefinition:
        """
        Register a custom unit based on seconds.

        The value is the conversion factor from seconds, e.g. a
        millisecond-like unit is ("*", 1000) since 1 s = 1000 ms.

        Raises:
            InvalidUnitName: If the name is empty or already supported
            UnsupportedOperator: If the operator is not '+', '-', '*' or '/'
            DivisionByZero: If the value is zero
            TypeError: If the value is not a real number
        """
        if not name:
            raise InvalidUnitName("")
        if name in self._supported:
            raise InvalidUnitName(name)
        if operator not in SUPPORTED_OPERATORS:
            raise UnsupportedOperator(operator)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Unit value must be a real number, got {type(value).__name__}")
        if value == 0:
            raise DivisionByZero()

        definition = UnitDefinition(name, operator, value)
        self._supported.append(name)
        self._definitions[name] = definition
        self._custom.append(name)
        logger.debug("Registered unit {!r} as seconds {} {}", name, operator, value)
        return definition

    def supported_units(self) -> list[str]:
        """Return every known unit name, including 's', in registration order."""
        return list(self._supported)

    def custom_units(self) -> list[str]:
        """Return user-added unit names in the order they were added."""
        return list(self._custom)

    def definition(self, name: str) -> Optional[UnitDefinition]:
        """Return the rule for a non-base unit, or None for 's' and unknown names."""
        return self._definitions.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._supported
