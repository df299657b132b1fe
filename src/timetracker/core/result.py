"""
Duration value bound to a unit registry.

A Result never changes after construction: convert() and format()
always return a new instance.
"""

from numbers import Real
from typing import Optional, Union

from .errors import UnknownUnit
from .units import BASE_UNIT, Unit

Value = Optional[Union[int, float, str]]


class Result:
    """
    A measured (or formatted) duration and the unit it is expressed in.

    Conversions always pivot through seconds, so chaining
    convert("ms").convert("us") gives the same number as convert("us").
    """

    __slots__ = ("_unit", "_value", "_label")

    def __init__(self, unit: Unit, value: Value, label: str = BASE_UNIT):
        """
        Args:
            unit: Registry used to resolve unit labels
            value: Number, formatted string, or None when not calculated
            label: Unit the value is expressed in
        """
        self._unit = unit
        self._value = value
        self._label = label

    @property
    def unit(self) -> str:
        """Return the current unit label."""
        return self._label

    @property
    def registry(self) -> Unit:
        return self._unit

    def get(self) -> Value:
        """Return the stored value as is."""
        return self._value

    def format(self, pattern: str = "%s %s") -> "Result":
        """
        Render the value and unit label into a printf-style pattern.

        A pattern with a single placeholder renders the value alone.

        Example:
            Result(unit, 123.456, "ms").format("%s %s").get() == "123.456 ms"
        """
        try:
            rendered = pattern % (self._value, self._label)
        except TypeError:
            # pattern only renders the value
            rendered = pattern % (self._value,)
        return Result(self._unit, rendered, self._label)

    def convert(self, target: str) -> "Result":
        """
        Return the value expressed in another unit.

        Raises:
            UnknownUnit: If the target (or the current unit) is not registered
            UnsupportedLogic: If a unit rule uses an unsupported operator
            TypeError: If the value is not a number, e.g. after format()
        """
        if target not in self._unit:
            raise UnknownUnit(target, self._unit.supported_units())

        if self._value is None:
            return Result(self._unit, None, target)

        if isinstance(self._value, bool) or not isinstance(self._value, Real):
            raise TypeError(
                f"Cannot convert non-numeric value {self._value!r}; convert before format()"
            )

        seconds = self._to_seconds()
        if target == BASE_UNIT:
            return Result(self._unit, seconds, target)

        return Result(self._unit, self._unit.definition(target).from_seconds(seconds), target)

    def _to_seconds(self):
        if self._label == BASE_UNIT:
            return self._value
        definition = self._unit.definition(self._label)
        if definition is None:
            raise UnknownUnit(self._label, self._unit.supported_units())
        return definition.to_seconds(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Result({self._value!r}, {self._label!r})"
