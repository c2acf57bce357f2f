import re
from dataclasses import dataclass
from numbers import Number
from typing import Self

from vec2.exceptions import InvalidVectorError

_SCALAR = r"([^,\s()]+)"
_PAIR = rf"{_SCALAR}\s*(?:,\s*|\s+){_SCALAR}"
# parentheses are optional but must come as a pair
_VEC_PATTERN = re.compile(rf"^\s*(?:\(\s*{_PAIR}\s*\)|{_PAIR})\s*$")

type Scalar = int | float


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable pair of numeric components.

    Every operation returns a new instance; neither operand is ever modified.
    """

    x: Scalar
    y: Scalar

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Number):
                msg = f"Component {name} must be a number, got {value!r}"
                raise InvalidVectorError(msg)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse `(3, 4)`, `3,4` or `3 4` into a vector."""
        match = _VEC_PATTERN.match(text)
        if match is None:
            msg = f"Expected two numbers like '(3, 4)', got {text!r}"
            raise InvalidVectorError(msg)

        return cls(*(_parse_scalar(component) for component in match.groups() if component is not None))

    def add(self, other: "Vec2") -> "Vec2":
        _check_operand(other)
        return Vec2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vec2") -> "Vec2":
        _check_operand(other)
        return Vec2(self.x - other.x, self.y - other.y)

    def multiply(self, other: "Vec2") -> "Vec2":
        """Component-wise product (not dot or cross)."""
        _check_operand(other)
        return Vec2(self.x * other.x, self.y * other.y)

    def __add__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.multiply(other)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _check_operand(other: object) -> None:
    if not isinstance(other, Vec2):
        msg = f"Expected a Vec2 operand, got {type(other).__name__}"
        raise TypeError(msg)


def _parse_scalar(text: str) -> Scalar:
    try:
        return int(text)
    except ValueError:
        pass

    try:
        return float(text)
    except ValueError as e:
        msg = f"Not a number: {text!r}"
        raise InvalidVectorError(msg) from e
