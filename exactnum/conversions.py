"""
Named conversions across the exactnum tower and Python's own numbers.

Each function accepts any of:
    int, float, decimal.Decimal, numeric str,
    HybridFixedFloat, Rational, RationalOperation, IntegerOrFloat, GeneralNumber
and raises ConversionTypeError for anything else.

Inputs go through GeneralNumber, the most exact representation,
so nothing is lost on the way in.  Only the target type can lose information.
Narrowing to an integer truncates toward zero.  Fixed-width integers raise OverflowError when it doesn't fit.
"""

from exactnum import fixedpoint
from exactnum.fixedpoint import type_name
from exactnum.general import GeneralNumber
from exactnum.hybrid import HybridFixedFloat
from exactnum.intfloat import IntegerOrFloat
from exactnum.rational import Rational, RationalOperation
from exactnum.unsigned import UnsignedBigInt


class ConversionTypeError(TypeError):
    """e.g. to_rational(None) or to_float([1.5])"""


def to_general_number(x):
    if isinstance(x, GeneralNumber):
        return x
    try:
        return GeneralNumber(x)
    except GeneralNumber.ConstructorTypeError:
        raise ConversionTypeError("Cannot convert a {} to a number.".format(type_name(x))) from None


def to_integer(x):
    """Python int, truncated toward zero.  NaN, Undefined, and infinity raise as int(float('nan')) does."""
    if isinstance(x, int):
        return int(x)
    return to_general_number(x).to_integer()


def to_unsigned(x):
    """UnsignedBigInt of the truncated magnitude, so the sign is dropped."""
    return UnsignedBigInt(to_integer(x))


def _fixed_width_converter(width):
    def converter(x):
        return fixedpoint.narrow_integer(to_integer(x), width)
    converter.__name__ = 'to_' + width
    converter.__doc__ = "Truncate toward zero.  OverflowError unless it fits in {}.".format(width)
    return converter


to_int8 = _fixed_width_converter('int8')
to_int16 = _fixed_width_converter('int16')
to_int32 = _fixed_width_converter('int32')
to_int64 = _fixed_width_converter('int64')
to_uint8 = _fixed_width_converter('uint8')
to_uint16 = _fixed_width_converter('uint16')
to_uint32 = _fixed_width_converter('uint32')
to_uint64 = _fixed_width_converter('uint64')


def to_float(x):
    """Nearest double.  Too big for a double becomes a signed infinity."""
    if isinstance(x, float):
        return x
    return to_general_number(x).to_float()


def to_single(x):
    """Nearest IEEE single precision value, as a Python float."""
    return fixedpoint.round_to_single(to_float(x))


def to_fixed(x):
    """Fixed-point decimal.Decimal, rounded to 28 places.  FixedPointOverflow if out of range."""
    return to_general_number(x).to_fixed()


def to_hybrid(x):
    if isinstance(x, HybridFixedFloat):
        return x
    return to_general_number(x).to_hybrid()


def to_rational(x):
    """Exact, except a binary float is read as its shortest decimal (0.1 is 1/10)."""
    if isinstance(x, Rational):
        return x
    if isinstance(x, RationalOperation):
        return x.materialize()
    return to_general_number(x).to_rational()


def to_integer_or_float(x):
    """Integer for an exact whole value, otherwise the float side.  A float input stays a float."""
    if isinstance(x, IntegerOrFloat):
        return x
    return to_general_number(x).to_integer_or_float()
