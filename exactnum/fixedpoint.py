"""
Fixed-point decimal primitive and IEEE-safe float helpers shared by the exactnum tower.

A fixed-point value is a decimal.Decimal kept inside a bounded range:
    coefficient - unsigned, at most 96 bits (FIXED_MAX = 2**96 - 1)
    scale       - number of fractional digits, 0 to 28 (FIXED_MAX_SCALE)
That is the classic 128-bit "decimal" of financial code:  exact for decimal fractions,
about 28-29 significant digits, no infinities, no NaN.

Every function here that produces a fixed-point value runs it through to_fixed(),
so leaving the range always shows up as FixedPointOverflow.
"""

import decimal
import math
import struct
import sys


FIXED_COEFFICIENT_BITS = 96
FIXED_MAX_SCALE = 28
FIXED_COEFFICIENT_MAX = 2 ** FIXED_COEFFICIENT_BITS - 1
FIXED_MAX = decimal.Decimal(FIXED_COEFFICIENT_MAX)    # 79228162514264337593543950335
FIXED_MIN = FIXED_MAX.copy_negate()
# NOTE:  Not -FIXED_MAX, which would round to the thread's context precision.

FLOAT_FRACTION_DIGITS = sys.float_info.mant_dig - sys.float_info.min_exp   # 1074
# NOTE:  Decimal digits after the point needed to write any double exactly.
#        The smallest subnormal is 2**-1074, and 2**-n takes exactly n digits after the point.
FIXED_FRACTION_DIGITS = FIXED_MAX_SCALE

EXPONENT_LIMIT = 2 ** 31 - 1
# NOTE:  Largest exponent handed to exact (integer or rational) exponentiation.
#        Beyond it results are infinite or degenerate anyway.
POWER_BITS_LIMIT = 2 ** 24
# NOTE:  Largest integer result, in bits, of exact exponentiation.  About 5 million decimal digits.

WORK_CONTEXT = decimal.Context(
    prec=64,
    rounding=decimal.ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)
# NOTE:  Wide enough that sums, differences and products of two fixed values are exact.
#        Quotients are rounded here, then again by to_fixed().
#        Passed explicitly everywhere so the thread's current decimal context never matters.

_QUANTA = [decimal.Decimal((0, (1,), -scale)) for scale in range(FIXED_MAX_SCALE + 1)]
_ONE = _QUANTA[0]


class FixedPointError(ArithmeticError):
    """A value has no fixed-point representation."""


class FixedPointOverflow(FixedPointError, OverflowError):
    """e.g. to_fixed(Decimal('1e30')) or to_fixed(Decimal('Infinity'))"""


class FixedPointInexact(FixedPointError, ValueError):
    """e.g. fixed_from_float_strictly(1e-30), which would round to zero"""


def to_fixed(value):
    """
    Normalize a Decimal (or an int or numeric string) into the fixed-point range.

    Rounds half-even to at most 28 fractional digits, and fewer if the coefficient
    would not fit in 96 bits.  Positive exponents become plain integers, so
    Decimal('1E+5') becomes Decimal('100000').  Negative zero becomes zero.
    """
    if not isinstance(value, decimal.Decimal):
        value = WORK_CONTEXT.create_decimal(value)
    if not value.is_finite():
        raise FixedPointOverflow("{} has no fixed-point representation".format(value))
    if value.copy_abs() > FIXED_MAX:
        raise FixedPointOverflow("{} is outside the fixed-point range".format(value))
    exponent = value.as_tuple().exponent
    if exponent > 0:
        value = value.quantize(_ONE, context=WORK_CONTEXT)
    else:
        scale = min(-exponent, FIXED_MAX_SCALE)
        value = value.quantize(_QUANTA[scale], context=WORK_CONTEXT)
        while scale > 0 and _coefficient(value, scale) > FIXED_COEFFICIENT_MAX:
            scale -= 1
            value = value.quantize(_QUANTA[scale], context=WORK_CONTEXT)
    if value.is_zero() and value.is_signed():
        value = value.copy_abs()
    return value


def _coefficient(value, scale):
    return int(value.copy_abs().scaleb(scale, context=WORK_CONTEXT))


assert decimal.Decimal('100000') == to_fixed(decimal.Decimal('1E+5'))
assert '0.1000000000000000000000000000' == str(to_fixed(decimal.Decimal('0.1').quantize(_QUANTA[28])))
assert '0.3333333333333333333333333333' == str(to_fixed(decimal.Decimal(1) / decimal.Decimal(3)))


def is_fixed_range(value):
    """Could this int, float or Decimal be stored in fixed point (possibly rounded)?"""
    try:
        return FIXED_MIN <= value <= FIXED_MAX
    except (TypeError, decimal.InvalidOperation):
        return False


def fixed_from_float_strictly(x):
    """
    Convert a float to fixed point only if nothing is lost.

    The float goes through its shortest round-trip text, so 0.1 becomes Decimal('0.1'),
    not the 55-digit binary value.  The result is kept only if it converts back to
    exactly the same float.
    """
    if math.isnan(x) or math.isinf(x):
        raise FixedPointOverflow("{!r} has no fixed-point representation".format(x))
    fixed = to_fixed(decimal.Decimal(repr(x)))
    if float(fixed) != x:
        raise FixedPointInexact("{!r} would become {} in fixed point".format(x, fixed))
    return fixed
assert decimal.Decimal('0.1') == fixed_from_float_strictly(0.1)


def fixed_from_float(x):
    """Convert a float to fixed point, rounding if necessary.  Only the range can fail."""
    if math.isnan(x) or math.isinf(x):
        raise FixedPointOverflow("{!r} has no fixed-point representation".format(x))
    return to_fixed(decimal.Decimal(repr(x)))


def fixed_add(a, b):
    return to_fixed(WORK_CONTEXT.add(a, b))


def fixed_subtract(a, b):
    return to_fixed(WORK_CONTEXT.subtract(a, b))


def fixed_multiply(a, b):
    return to_fixed(WORK_CONTEXT.multiply(a, b))


def fixed_divide(a, b):
    if b.is_zero():
        raise ZeroDivisionError("Fixed-point division by zero.")
    return to_fixed(WORK_CONTEXT.divide(a, b))


def fixed_remainder(a, b):
    """Truncating remainder, the sign follows the dividend, e.g. -5 % 3 == -2."""
    if b.is_zero():
        raise ZeroDivisionError("Fixed-point remainder by zero.")
    return to_fixed(WORK_CONTEXT.remainder(a, b))
assert decimal.Decimal('-2') == fixed_remainder(decimal.Decimal(-5), decimal.Decimal(3))


def fixed_power(base, exponent):
    """Raise a fixed-point value to an integer power."""
    if exponent == 0:
        return _ONE
    try:
        result = WORK_CONTEXT.power(base, exponent)
    except decimal.Overflow as e:
        raise FixedPointOverflow("{} ** {} is outside the fixed-point range".format(base, exponent)) from e
    return to_fixed(result)


def fixed_text(value):
    """Positional notation, never an exponent, trailing zeros of the scale kept."""
    return format(value, 'f')
assert '0.0000001' == fixed_text(decimal.Decimal('1E-7'))
assert '1.10' == fixed_text(decimal.Decimal('1.10'))


def float_divide(x, y):
    """IEEE division:  x/0 is a signed infinity, 0/0 is NaN."""
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
assert math.inf == float_divide(1.0, 0.0)
assert -math.inf == float_divide(1.0, -0.0)


def float_remainder(x, y):
    """Truncating remainder like C fmod(), NaN where fmod() has no answer."""
    try:
        return math.fmod(x, y)
    except ValueError:
        return math.nan
assert -5.0 == float_remainder(-50.0, 9.0)


def float_power(x, y):
    """IEEE pow():  overflow is a signed infinity, a domain error is NaN."""
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0:
            # NOTE:  0 ** negative
            return math.copysign(math.inf, x) if _is_odd(y) else math.inf
        return math.nan


def _is_odd(y):
    return float(y).is_integer() and math.fmod(y, 2.0) != 0
assert -math.inf == float_power(-10.0, 1001.0)
assert math.inf == float_power(0.0, -1.0)


def round_to_single(x):
    """Round a float to IEEE single precision, overflow becomes a signed infinity."""
    try:
        return struct.unpack('>f', struct.pack('>f', x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)
assert 0.5 == round_to_single(0.5)
assert 0.1 != round_to_single(0.1)


def truncating_divmod(a, b):
    """Integer quotient rounded toward zero, and a remainder that follows the dividend's sign."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b
assert (5, 5) == truncating_divmod(50, 9)
assert (-5, -5) == truncating_divmod(-50, 9)
assert (-5, 5) == truncating_divmod(50, -9)


def is_power_computable(base, exponent):
    """Is int base ** int exponent small enough to compute exactly?  Within EXPONENT_LIMIT and POWER_BITS_LIMIT."""
    if abs(exponent) > EXPONENT_LIMIT:
        return False
    if abs(base) <= 1:
        return True
    return abs(exponent) * abs(base).bit_length() <= POWER_BITS_LIMIT
assert is_power_computable(2, 600)
assert not is_power_computable(10, EXPONENT_LIMIT)
assert is_power_computable(-1, EXPONENT_LIMIT)


def sign(x):
    """-1, 0, or +1.  NaN gives 0."""
    return (x > 0) - (x < 0)


def is_nan(x):
    """For an int, float or Decimal."""
    if isinstance(x, float):
        return math.isnan(x)
    if isinstance(x, decimal.Decimal):
        return x.is_nan()
    return False


def _infinity_sign(x):
    if isinstance(x, float) and math.isinf(x):
        return 1 if x > 0 else -1
    if isinstance(x, decimal.Decimal) and x.is_infinite():
        return -1 if x.is_signed() else 1
    return 0


def exact_compare(x, y):
    """
    -1, 0, or +1 for two ints, floats or Decimals, compared by their exact values.

    The binary value of a float counts, so exact_compare(0.1, Decimal('0.1')) == 1.
    Neither may be NaN.  No decimal context is involved.
    """
    x_infinity = _infinity_sign(x)
    y_infinity = _infinity_sign(y)
    if x_infinity or y_infinity:
        return sign(x_infinity - y_infinity)
    x_numerator, x_denominator = x.as_integer_ratio()
    y_numerator, y_denominator = y.as_integer_ratio()
    return sign(x_numerator * y_denominator - y_numerator * x_denominator)
assert 1 == exact_compare(0.1, decimal.Decimal('0.1'))
assert 0 == exact_compare(0.5, decimal.Decimal('0.50'))
assert -1 == exact_compare(2**96 - 1, float(2**96))


def exact_ordered(op, x, y):
    """op(x, y), e.g. operator.lt, on exact values.  Anything compared with NaN is False."""
    if is_nan(x) or is_nan(y):
        return False
    return op(exact_compare(x, y), 0)


def _integer_bounds(bits, signed):
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


INTEGER_BOUNDS = {
    '{}int{}'.format('' if signed else 'u', bits): _integer_bounds(bits, signed)
    for bits in (8, 16, 32, 64)
    for signed in (True, False)
}
assert (-128, 127) == INTEGER_BOUNDS['int8']
assert (0, 2**64 - 1) == INTEGER_BOUNDS['uint64']


def narrow_integer(value, width):
    """Check that an int fits a fixed-width integer type, e.g. narrow_integer(300, 'uint8') raises."""
    low, high = INTEGER_BOUNDS[width]
    if not low <= value <= high:
        raise OverflowError("{} does not fit in {} ({} to {})".format(value, width, low, high))
    return value


def type_name(x):
    """
    Describe (very briefly) what type of object this is.

    THANKS:  http://stackoverflow.com/a/5008854/673991
    """
    return type(x).__name__
assert 'int' == type_name(3)
assert 'Decimal' == type_name(_ONE)
