"""Fixed-size arithmetic vectors and colour helpers."""

import math

_ALIASES = {
    "x": 0, "y": 1, "z": 2, "w": 3,
    "r": 0, "g": 1, "b": 2, "a": 3,
    "u": 0, "v": 1,
}


def _truncating_div(a, b):
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


def _truncating_mod(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return a - b * _truncating_div(a, b)
    return math.fmod(a, b)


def _format_component(value):
    if isinstance(value, float):
        return f"{value:f}"
    return str(int(value))


def _alias_property(index):
    def getter(self):
        if index >= len(self._values):
            raise AttributeError(f"vector of size {len(self._values)} has no component {index}")
        return self._values[index]

    def setter(self, value):
        if index >= len(self._values):
            raise AttributeError(f"vector of size {len(self._values)} has no component {index}")
        self._values[index] = value

    return property(getter, setter)


class Vector:
    """A mutable vector of numbers with component-wise arithmetic."""

    __hash__ = None

    def __init__(self, *args):
        if not args:
            raise ValueError("a vector needs at least one component")
        for value in args:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"vector components must be numbers, not {type(value).__name__}")
        self._values = list(args)

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index, value):
        self._values[index] = value

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return f"Vector({', '.join(repr(v) for v in self._values)})"

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def _combine(self, other, op):
        if not isinstance(other, Vector):
            return NotImplemented
        if len(other) > len(self):
            raise ValueError(
                "left vector must be at least as large as the right vector"
            )
        result = list(self._values)
        for index, value in enumerate(other):
            result[index] = op(result[index], value)
        return Vector(*result)

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._combine(other, _truncating_div)

    def __mod__(self, other):
        return self._combine(other, _truncating_mod)

    def __str__(self):
        return "{" + ",".join(_format_component(v) for v in self._values) + "}"

    def as_tuple(self):
        """Return the components as a tuple."""
        return tuple(self._values)

    def resized(self, size):
        """Return a copy with ``size`` components, padding with zeros."""
        if size < 1:
            raise ValueError("a vector needs at least one component")
        values = self._values[:size]
        values.extend(0 for _ in range(size - len(values)))
        return Vector(*values)


for _name, _index in _ALIASES.items():
    setattr(Vector, _name, _alias_property(_index))


def _channel(value):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"colour channel must be an integer in 0..255, got {value!r}")
    return value


def color3(r, g, b):
    """Create an RGB colour vector of unsigned bytes."""
    return Vector(_channel(r), _channel(g), _channel(b))


def color4(r, g, b, a):
    """Create an RGBA colour vector of unsigned bytes."""
    return Vector(_channel(r), _channel(g), _channel(b), _channel(a))