"""Fixed-point decimal attribute type and serializer."""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Dict

from ..core.attribute import AttributeType, Serializer
from ..core.errors import ConfigurationError


def _check_precision(precision: Any) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigurationError(f"Fixnum precision must be a non-negative integer, got {precision!r}")
    return precision


def to_decimal(value: Any) -> Decimal:
    """Convert a Decimal, int, float or numeric string to a finite Decimal.

    Raises:
        TypeError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise TypeError(f"{value!r} is not a fixed-point number")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            raise TypeError(f"{value!r} is not a fixed-point number")
    except InvalidOperation:
        raise TypeError(f"{value!r} is not a fixed-point number") from None
    if not result.is_finite():
        raise TypeError(f"{value!r} is not a finite number")
    return result


def decimal_places(value: Decimal) -> int:
    exponent = value.as_tuple().exponent
    return max(0, -exponent)


def quantize(value: Decimal, places: int) -> Decimal:
    """Set a value to exactly ``places`` decimal places, however many digits it has."""
    sign, digits, exponent = value.as_tuple()
    with localcontext() as ctx:
        if value.adjusted() > ctx.Emax:
            raise TypeError(f"{value!r} is too large for a fixed-point number")
        ctx.prec = max(ctx.prec, len(digits) + abs(exponent) + places + 1)
        return value.quantize(Decimal(1).scaleb(-places))


class FixnumType(AttributeType):
    """Numbers with at most ``precision`` digits after the decimal point."""

    def __init__(self, precision: int):
        self.precision = _check_precision(precision)
        self.name = f"fixnum({precision})"

    def check(self, value: Any) -> bool:
        return decimal_places(to_decimal(value)) <= self.precision

    def to_ref(self) -> Dict[str, Any]:
        return {"name": "fixnum", "params": {"precision": self.precision}}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixnumType) and self.precision == other.precision

    def __hash__(self) -> int:
        return hash(("fixnum", self.precision))


class FixnumSerializer(Serializer):
    """Reads numbers and numeric strings as Decimals, writes fixed-point strings.

    ``read`` pads values to ``precision`` places but never rounds; a value
    with more places is left for the type to reject.
    """

    def __init__(self, precision: int):
        self.precision = _check_precision(precision)

    def read(self, value: Any, type_: AttributeType) -> Decimal:
        number = to_decimal(value)
        if decimal_places(number) < self.precision:
            number = quantize(number, self.precision)
        return number

    def write(self, value: Any, type_: AttributeType) -> str:
        return format(quantize(to_decimal(value), self.precision), "f")

    def to_ref(self) -> Dict[str, Any]:
        return {"name": "fixnum", "params": {"precision": self.precision}}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixnumSerializer) and self.precision == other.precision

    def __hash__(self) -> int:
        return hash(("fixnum", self.precision))

    def __repr__(self) -> str:
        return f"FixnumSerializer({self.precision})"


def is_fixnum(precision: int) -> FixnumType:
    """Type accepting numbers with at most ``precision`` decimal places."""
    return FixnumType(precision)


def serialize_fixnum(precision: int) -> FixnumSerializer:
    """Serializer pairing with :func:`is_fixnum` for the same precision."""
    return FixnumSerializer(precision)
