"""
HybridFixedFloat - a decimal fixed-point number that becomes a binary float only when it must.

    assert HybridFixedFloat(0.1) + HybridFixedFloat(0.2) == HybridFixedFloat(0.3)

Fixed point is exact for decimal fractions but has a bounded range (about 7.9e28)
and at most 28 fractional digits.  Floating point has range (and NaN, infinities)
but rounding error.  A HybridFixedFloat holds exactly one of the two:
    fixed - a decimal.Decimal normalized by fixedpoint.to_fixed()
    float - a Python float
A float is stored as fixed whenever that conversion survives the round trip back to float.
"""

import decimal
import enum
import logging
import math
import numbers
import operator
import sys

from exactnum import fixedpoint
from exactnum.fixedpoint import FixedPointError, FixedPointInexact, FixedPointOverflow, type_name


LOG = logging.getLogger(__name__)


class HybridFixedFloat(numbers.Real):
    """
    Fixed-point decimal or binary floating point, whichever represents the value exactly.

    content - the type can be:
        int                 42                 fixed, or float beyond the fixed range
        float               0.1                fixed if the conversion is lossless
        decimal.Decimal     Decimal('0.1')     fixed, rounded to 28 places
        str                 '0.1'              see parse()
        HybridFixedFloat    copy
    """
    __slots__ = ('_kind', '_value')

    class Kind(enum.Enum):
        FIXED = 'fixed'
        FLOAT = 'float'

    def __init__(self, content=0):
        if isinstance(content, HybridFixedFloat):
            self._set(content._kind, content._value)
        elif isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, float):
            self._from_float(content)
        elif isinstance(content, decimal.Decimal):
            self._from_decimal(content)
        elif isinstance(content, str):
            parsed = self.parse(content)
            self._set(parsed._kind, parsed._value)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. HybridFixedFloat(object) or HybridFixedFloat([])"""

    class ParseError(ValueError):
        """e.g. HybridFixedFloat.parse('alpha string')"""

    class CompareError(TypeError):
        """e.g. HybridFixedFloat.NAN.compare(1)"""

    def _set(self, kind, value):
        self._kind = kind
        self._value = value

    @classmethod
    def _make(cls, kind, value):
        """Construct from a payload that is already valid for its kind."""
        hybrid = cls.__new__(cls)
        hybrid._set(kind, value)
        return hybrid

    def _from_int(self, i):
        try:
            self._set(self.Kind.FIXED, fixedpoint.to_fixed(i))
        except FixedPointOverflow:
            try:
                self._set(self.Kind.FLOAT, float(i))
            except OverflowError:
                self._set(self.Kind.FLOAT, math.copysign(math.inf, fixedpoint.sign(i)))

    def _from_float(self, x):
        try:
            self._set(self.Kind.FIXED, fixedpoint.fixed_from_float_strictly(x))
        except FixedPointInexact:
            LOG.debug("%r is not exact in fixed point, keeping the float.", x)
            self._set(self.Kind.FLOAT, x)
        except FixedPointOverflow:
            self._set(self.Kind.FLOAT, x)

    def _from_decimal(self, d):
        try:
            self._set(self.Kind.FIXED, fixedpoint.to_fixed(d))
        except FixedPointOverflow:
            self._set(self.Kind.FLOAT, float(d))

    @classmethod
    def from_float(cls, x):
        hybrid = cls.__new__(cls)
        hybrid._from_float(x)
        return hybrid

    @classmethod
    def from_fixed(cls, d):
        hybrid = cls.__new__(cls)
        hybrid._from_decimal(d)
        return hybrid

    @classmethod
    def from_integer(cls, i):
        hybrid = cls.__new__(cls)
        hybrid._from_int(i)
        return hybrid

    @classmethod
    def parse(cls, text):
        ok, hybrid = cls.try_parse(text)
        if not ok:
            raise cls.ParseError("Not a fixed-point or floating-point number: " + repr(text))
        return hybrid

    @classmethod
    def try_parse(cls, text):
        """
        Parse as both fixed point and floating point.  Return (ok, value), never raise.

        If both parses succeed and agree, the fixed point value wins.
        If they disagree, e.g. '1e-30' which is zero in fixed point, the float wins.
        """
        if not isinstance(text, str):
            return False, None
        fixed = None
        floating = None
        try:
            fixed = fixedpoint.to_fixed(fixedpoint.WORK_CONTEXT.create_decimal(text.strip()))
        except (decimal.InvalidOperation, FixedPointError):
            pass
        try:
            floating = float(text)
        except ValueError:
            pass

        if fixed is not None and (floating is None or float(fixed) == floating):
            return True, cls._make(cls.Kind.FIXED, fixed)
        elif floating is not None:
            return True, cls._make(cls.Kind.FLOAT, floating)
        else:
            return False, None

    @property
    def kind(self):
        return self._kind

    @property
    def is_fixed(self):
        return self._kind is self.Kind.FIXED

    @property
    def is_float(self):
        return self._kind is self.Kind.FLOAT

    @property
    def value(self):
        """The payload, a decimal.Decimal or a float."""
        return self._value

    def as_float(self):
        if self.is_fixed:
            return float(self._value)
        return self._value

    def as_fixed(self):
        """The value as a decimal.Decimal, rounded if it was a float.  FixedPointOverflow if out of range."""
        if self.is_fixed:
            return self._value
        return fixedpoint.fixed_from_float(self._value)

    def __repr__(self):
        """Handle repr(HybridFixedFloat(x))"""
        return "HybridFixedFloat('{}')".format(self)
        # EXAMPLE:  HybridFixedFloat('0.1')
        # EXAMPLE:  HybridFixedFloat('1e-30')

    def __str__(self):
        if self.is_fixed:
            return fixedpoint.fixed_text(self._value)
        return repr(self._value)

    # Predicates
    # ----------
    def is_nan(self):
        return self.is_float and math.isnan(self._value)

    def is_infinite(self):
        return self.is_float and math.isinf(self._value)

    def is_finite(self):
        return self.is_fixed or math.isfinite(self._value)

    def is_positive_infinity(self):
        return self.is_infinite() and self._value > 0

    def is_negative_infinity(self):
        return self.is_infinite() and self._value < 0

    def is_negative(self):
        return self._value < 0

    def is_zero(self):
        return self._value == 0

    def is_whole(self):
        if self.is_fixed:
            return self._value == self._value.to_integral_value(context=fixedpoint.WORK_CONTEXT)
        return math.isfinite(self._value) and self._value.is_integer()

    def sign(self):
        """-1, 0, or +1.  NaN gives 0."""
        return fixedpoint.sign(self._value)

    def __bool__(self):
        return not self.is_zero()

    # Comparison
    # ----------
    @classmethod
    def _coerce(cls, x):
        if isinstance(x, HybridFixedFloat):
            return x
        if isinstance(x, (int, float, decimal.Decimal)):
            return cls(x)
        raise cls.ConstructorTypeError("{} cannot be a {}".format(type_name(x), cls.__name__))

    @staticmethod
    def _comparable(x):
        """The exact value to compare with, an int, float or Decimal.  None for a type we don't compare with."""
        if isinstance(x, HybridFixedFloat):
            return x._value
        if isinstance(x, (int, float, decimal.Decimal)):
            return x
        return None

    def _ordered(self, op, other):
        """
        Compare exact values.

        A float compares by its binary value, as Decimal does, so HybridFixedFloat('0.1') != 0.1,
        although HybridFixedFloat(0.1) == HybridFixedFloat('0.1').
        """
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return fixedpoint.exact_ordered(op, self._value, other_value)

    def __eq__(self, other):
        """Handle HybridFixedFloat(x) == something"""
        return self._ordered(operator.eq, other)

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other): return self._ordered(operator.lt, other)
    def __le__(self, other): return self._ordered(operator.le, other)
    def __gt__(self, other): return self._ordered(operator.gt, other)
    def __ge__(self, other): return self._ordered(operator.ge, other)

    def compare(self, other):
        """-1, 0, or +1.  CompareError for NaN or an incomparable type."""
        other_value = self._comparable(other)
        if other_value is None:
            raise self.CompareError("HybridFixedFloat cannot be compared with a " + type_name(other))
        if fixedpoint.is_nan(self._value) or fixedpoint.is_nan(other_value):
            raise self.CompareError("NaN is unordered.")
        return fixedpoint.exact_compare(self._value, other_value)

    def __hash__(self):
        return hash(self._value)
        # NOTE:  Decimal and float both hash by exact value, like int and fractions.Fraction.

    @staticmethod
    def min(a, b):
        """The lesser, or a if they are equal."""
        return b if b < a else a

    @staticmethod
    def max(a, b):
        """The greater, or a if they are equal."""
        return b if b > a else a

    # Arithmetic
    # ----------
    def _arithmetic(self, other, fixed_op, float_op):
        """
        Compute in fixed point if both operands are fixed, otherwise in floating point.

        Leaving the fixed-point range falls back on floating point.
        So does fixed-point division by zero, so that 1/0 is infinity either way.
        """
        other = self._coerce(other)
        if self.is_fixed and other.is_fixed:
            try:
                return self._make(self.Kind.FIXED, fixed_op(self._value, other._value))
            except FixedPointOverflow:
                LOG.debug("%s(%s, %s) overflowed fixed point, computing in floating point.",
                          fixed_op.__name__, self, other)
            except ZeroDivisionError:
                pass
        return self.from_float(float_op(self.as_float(), other.as_float()))

    def add(self, other):
        return self._arithmetic(other, fixedpoint.fixed_add, operator.add)

    def subtract(self, other):
        return self._arithmetic(other, fixedpoint.fixed_subtract, operator.sub)

    def multiply(self, other):
        return self._arithmetic(other, fixedpoint.fixed_multiply, operator.mul)

    def divide(self, other):
        return self._arithmetic(other, fixedpoint.fixed_divide, fixedpoint.float_divide)

    def remainder(self, other):
        """Truncating remainder, the sign follows the dividend."""
        return self._arithmetic(other, fixedpoint.fixed_remainder, fixedpoint.float_remainder)

    def floor_divide(self, other):
        return self._arithmetic(other, _fixed_floor_divide, _float_floor_divide)

    def power(self, exponent):
        """
        Fixed point for a whole exponent on a fixed base, otherwise floating point.

        So HybridFixedFloat('0.1').power(2) is exactly 0.01.
        """
        exponent = self._coerce(exponent)
        if (
            self.is_fixed and
            exponent.is_fixed and
            exponent.is_whole() and
            abs(exponent._value) <= fixedpoint.EXPONENT_LIMIT
        ):
            try:
                return self._make(self.Kind.FIXED, fixedpoint.fixed_power(self._value, int(exponent._value)))
            except FixedPointOverflow:
                LOG.debug("%s ** %s overflowed fixed point, computing in floating point.", self, exponent)
            except ZeroDivisionError:
                pass
        return self.from_float(fixedpoint.float_power(self.as_float(), exponent.as_float()))

    def increment(self):
        return self.add(1)

    def decrement(self):
        return self.subtract(1)

    def negate(self):
        if self.is_fixed:
            return self._make(self.Kind.FIXED, fixedpoint.to_fixed(self._value.copy_negate()))
        return self._make(self.Kind.FLOAT, -self._value)

    def abs(self):
        if self.is_fixed:
            return self._make(self.Kind.FIXED, self._value.copy_abs())
        return self._make(self.Kind.FLOAT, abs(self._value))

    def _integral(self, rounding, float_function):
        if self.is_fixed:
            integral = self._value.to_integral_value(rounding=rounding, context=fixedpoint.WORK_CONTEXT)
            return self._make(self.Kind.FIXED, fixedpoint.to_fixed(integral))
        if not math.isfinite(self._value):
            return self
        return self.from_float(float(float_function(self._value)))

    def floor(self):
        return self._integral(decimal.ROUND_FLOOR, math.floor)

    def ceiling(self):
        return self._integral(decimal.ROUND_CEILING, math.ceil)

    def truncate(self):
        return self._integral(decimal.ROUND_DOWN, math.trunc)

    def log(self, base=None):
        """Logarithm as a float.  Natural unless a base is given."""
        if base is None:
            return self._logarithm(math.log)
        return self._logarithm(lambda x: math.log(x, base))

    def log10(self):
        return self._logarithm(math.log10)

    def _logarithm(self, log_function):
        x = self.as_float()
        if math.isnan(x) or x < 0:
            return math.nan
        if x == 0:
            return -math.inf
        return log_function(x)

    # Operators
    # ---------
    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        try:
            left = cls._coerce(input_left)
            right = cls._coerce(input_right)
        except cls.ConstructorTypeError:
            return NotImplemented
        return method(left, right)

    def __add__(self, other): return self._binary_op(HybridFixedFloat.add, self, other)
    def __radd__(self, other): return self._binary_op(HybridFixedFloat.add, other, self)
    def __sub__(self, other): return self._binary_op(HybridFixedFloat.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(HybridFixedFloat.subtract, other, self)
    def __mul__(self, other): return self._binary_op(HybridFixedFloat.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(HybridFixedFloat.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(HybridFixedFloat.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(HybridFixedFloat.divide, other, self)
    def __floordiv__( self, other): return self._binary_op(HybridFixedFloat.floor_divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(HybridFixedFloat.floor_divide, other, self)
    def __mod__( self, other): return self._binary_op(HybridFixedFloat.remainder, self, other)
    def __rmod__(self, other): return self._binary_op(HybridFixedFloat.remainder, other, self)
    def __pow__( self, other): return self._binary_op(HybridFixedFloat.power, self, other)
    def __rpow__(self, other): return self._binary_op(HybridFixedFloat.power, other, self)

    def __divmod__(self, other):
        """Truncated quotient and truncating remainder, consistent with %."""
        quotient = self._binary_op(HybridFixedFloat.divide, self, other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), self % other

    def __rdivmod__(self, other):
        quotient = self._binary_op(HybridFixedFloat.divide, other, self)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), other % self

    def __neg__(self): return self.negate()
    def __pos__(self): return self
    def __abs__(self): return self.abs()

    # Python numeric protocol
    # -----------------------
    def __float__(self):
        return self.as_float()

    def __int__(self):
        """Truncate toward zero.  NaN and infinity raise, as int(float) does."""
        return int(self._value)

    def __trunc__(self):
        return int(self)

    def __floor__(self):
        return int(self.floor())

    def __ceil__(self):
        return int(self.ceiling())

    def __round__(self, ndigits=None):
        if ndigits is None:
            if self.is_fixed:
                return int(self._value.to_integral_value(rounding=decimal.ROUND_HALF_EVEN,
                                                         context=fixedpoint.WORK_CONTEXT))
            return round(self._value)
        if self.is_fixed:
            quantum = decimal.Decimal((0, (1,), -ndigits))
            return self._make(self.Kind.FIXED, fixedpoint.to_fixed(
                self._value.quantize(quantum, context=fixedpoint.WORK_CONTEXT)
            ))
        return self.from_float(round(self._value, ndigits))

    ZERO = None
    ONE = None
    NAN = None
    POSITIVE_INFINITY = None
    NEGATIVE_INFINITY = None
    EPSILON = None

    @classmethod
    def internal_setup(cls):
        """Initialize HybridFixedFloat constants after the class is defined."""
        cls.ZERO = cls(0)
        cls.ONE = cls(1)
        cls.NAN = cls._make(cls.Kind.FLOAT, math.nan)
        cls.POSITIVE_INFINITY = cls._make(cls.Kind.FLOAT, math.inf)
        cls.NEGATIVE_INFINITY = cls._make(cls.Kind.FLOAT, -math.inf)
        cls.EPSILON = cls._make(cls.Kind.FLOAT, sys.float_info.min * sys.float_info.epsilon)
        # NOTE:  EPSILON is the smallest positive subnormal double, 2**-1074, not machine epsilon.


def _fixed_floor_divide(a, b):
    if b.is_zero():
        raise ZeroDivisionError("Fixed-point floor division by zero.")
    quotient = fixedpoint.WORK_CONTEXT.divide_int(a, b)
    if (a < 0) != (b < 0) and not fixedpoint.WORK_CONTEXT.remainder(a, b).is_zero():
        quotient = fixedpoint.WORK_CONTEXT.subtract(quotient, 1)
    return fixedpoint.to_fixed(quotient)


def _float_floor_divide(x, y):
    try:
        return x // y
    except ZeroDivisionError:
        return fixedpoint.float_divide(x, y)


# noinspection PyProtectedMember
HybridFixedFloat.internal_setup()
assert HybridFixedFloat.ZERO.is_fixed
assert HybridFixedFloat.NAN.is_float
assert 5e-324 == HybridFixedFloat.EPSILON.value
