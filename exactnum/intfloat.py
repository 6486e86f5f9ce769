"""
IntegerOrFloat - an arbitrary-precision integer, or a HybridFixedFloat when the value is not whole.

Integer arithmetic stays integer.  Dividing integers that don't divide evenly
gives up on exactness and goes to the float side:

    assert IntegerOrFloat(6) / IntegerOrFloat(3) == IntegerOrFloat(2)          # integer
    assert (IntegerOrFloat(1) / IntegerOrFloat(4)).is_float                    # 0.25

For exact division see GeneralNumber, which goes to Rational instead.
"""

import decimal
import enum
import logging
import math
import numbers
import operator

from exactnum import fixedpoint
from exactnum.fixedpoint import type_name
from exactnum.hybrid import HybridFixedFloat
from exactnum.rational import Rational, RationalOperation


LOG = logging.getLogger(__name__)


class IntegerOrFloat(numbers.Real):
    """
    content - the type can be:
        int                 integer
        float, Decimal      float side (a HybridFixedFloat, so possibly fixed point)
        HybridFixedFloat    float side
        Rational            integer if whole, see from_rational()
        str                 see parse()
        IntegerOrFloat      copy
    """
    __slots__ = ('_kind', '_value')

    class Kind(enum.Enum):
        INTEGER = 'integer'
        FLOAT = 'float'

    def __init__(self, content=0):
        if isinstance(content, IntegerOrFloat):
            self._set(content._kind, content._value)
        elif isinstance(content, int):
            self._set(self.Kind.INTEGER, int(content))
        elif isinstance(content, HybridFixedFloat):
            self._set(self.Kind.FLOAT, content)
        elif isinstance(content, (float, decimal.Decimal)):
            self._set(self.Kind.FLOAT, HybridFixedFloat(content))
        elif isinstance(content, (Rational, RationalOperation)):
            converted = self.from_rational(content)
            self._set(converted._kind, converted._value)
        elif isinstance(content, str):
            parsed = self.parse(content)
            self._set(parsed._kind, parsed._value)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. IntegerOrFloat(object) or IntegerOrFloat(1j)"""

    class ParseError(ValueError):
        """e.g. IntegerOrFloat.parse('one')"""

    class CompareError(TypeError):
        """e.g. IntegerOrFloat.NAN.compare(0)"""

    def _set(self, kind, value):
        self._kind = kind
        self._value = value

    @classmethod
    def _make(cls, kind, value):
        number = cls.__new__(cls)
        number._set(kind, value)
        return number

    @classmethod
    def _integer(cls, i):
        return cls._make(cls.Kind.INTEGER, i)

    @classmethod
    def _float(cls, hybrid):
        return cls._make(cls.Kind.FLOAT, hybrid)

    @classmethod
    def parse(cls, text):
        ok, number = cls.try_parse(text)
        if not ok:
            raise cls.ParseError("Not an integer or a floating point number: " + repr(text))
        return number

    @classmethod
    def try_parse(cls, text):
        """Integer if possible, otherwise HybridFixedFloat.try_parse().  Return (ok, value), never raise."""
        if not isinstance(text, str):
            return False, None
        try:
            return True, cls._integer(int(text))
        except ValueError:
            pass
        ok, hybrid = HybridFixedFloat.try_parse(text)
        if ok:
            return True, cls._float(hybrid)
        return False, None

    @property
    def kind(self):
        return self._kind

    @property
    def is_integer(self):
        return self._kind is self.Kind.INTEGER

    @property
    def is_float(self):
        return self._kind is self.Kind.FLOAT

    @property
    def value(self):
        """The payload, an int or a HybridFixedFloat."""
        return self._value

    def __repr__(self):
        """Handle repr(IntegerOrFloat(x))"""
        return "IntegerOrFloat({!r})".format(self._value)
        # EXAMPLE:  IntegerOrFloat(42)
        # EXAMPLE:  IntegerOrFloat(HybridFixedFloat('0.25'))

    def __str__(self):
        return str(self._value)

    # Predicates
    # ----------
    def is_nan(self):
        return self.is_float and self._value.is_nan()

    def is_infinite(self):
        return self.is_float and self._value.is_infinite()

    def is_finite(self):
        return self.is_integer or self._value.is_finite()

    def is_negative(self):
        return self._value < 0

    def is_zero(self):
        return self._value == 0

    def is_whole(self):
        return self.is_integer or self._value.is_whole()

    def sign(self):
        """-1, 0, or +1.  NaN gives 0."""
        if self.is_integer:
            return fixedpoint.sign(self._value)
        return self._value.sign()

    def __bool__(self):
        return bool(self._value)

    # Conversion
    # ----------
    @classmethod
    def from_rational(cls, r):
        """Integer if whole, otherwise the float side.  Undefined becomes NaN."""
        r = Rational(r)
        if r.is_whole():
            return cls._integer(r.to_integer())
        return cls._float(r.to_hybrid())

    def to_rational(self):
        if self.is_integer:
            return Rational(self._value)
        return Rational.from_hybrid(self._value)

    def to_integer(self):
        """Truncate toward zero.  NaN and infinity raise, as int(float) does."""
        if self.is_integer:
            return self._value
        return int(self._value)

    def to_float(self):
        if self.is_integer:
            try:
                return float(self._value)
            except OverflowError:
                return math.copysign(math.inf, fixedpoint.sign(self._value))
        return self._value.as_float()

    def to_hybrid(self):
        """The floating view:  integers become HybridFixedFloat, fixed point when in range."""
        if self.is_integer:
            return HybridFixedFloat.from_integer(self._value)
        return self._value

    def to_fixed(self):
        if self.is_integer:
            return fixedpoint.to_fixed(self._value)
        return self._value.as_fixed()

    def __float__(self):
        return self.to_float()

    def __int__(self):
        return self.to_integer()

    def __trunc__(self):
        return self.to_integer()

    def __floor__(self):
        return self.floor().to_integer()

    def __ceil__(self):
        return self.ceiling().to_integer()

    def __round__(self, ndigits=None):
        if ndigits is None:
            return round(self._value)
        if self.is_integer:
            return self._integer(round(self._value, ndigits))
        return self._float(round(self._value, ndigits))

    # Comparison
    # ----------
    @classmethod
    def _coerce(cls, x):
        if isinstance(x, IntegerOrFloat):
            return x
        if isinstance(x, (int, float, decimal.Decimal, HybridFixedFloat)):
            return cls(x)
        raise cls.ConstructorTypeError("{} cannot be an {}".format(type_name(x), cls.__name__))

    def _exact_value(self):
        return self._value if self.is_integer else self._value.value

    def _ordered(self, op, other):
        """
        Compare exact values:  int with int, and anything else by the exact value of its payload.

        A float compares by its binary value, so IntegerOrFloat(0.1) != 0.1, as with Decimal.
        A huge integer is never rounded.
        """
        if isinstance(other, (Rational, RationalOperation)):
            return op(self._value, other)
        if isinstance(other, IntegerOrFloat):
            other = other._exact_value()
        elif isinstance(other, HybridFixedFloat):
            other = other.value
        elif not isinstance(other, (int, float, decimal.Decimal)):
            return NotImplemented
        return fixedpoint.exact_ordered(op, self._exact_value(), other)

    def __eq__(self, other): return self._ordered(operator.eq, other)
    def __lt__(self, other): return self._ordered(operator.lt, other)
    def __le__(self, other): return self._ordered(operator.le, other)
    def __gt__(self, other): return self._ordered(operator.gt, other)
    def __ge__(self, other): return self._ordered(operator.ge, other)

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def compare(self, other):
        """-1, 0, or +1.  CompareError for NaN, Undefined, or an incomparable type."""
        less = self._ordered(operator.lt, other)
        if less is NotImplemented:
            raise self.CompareError("IntegerOrFloat cannot be compared with a " + type_name(other))
        greater = self._ordered(operator.gt, other)
        if not (less or greater or self._ordered(operator.eq, other)):
            raise self.CompareError("NaN and Undefined are unordered.")
        return int(greater) - int(less)

    def __hash__(self):
        return hash(self._value)

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
    def _arithmetic(self, other, integer_op, hybrid_method):
        other = self._coerce(other)
        if self.is_integer and other.is_integer:
            return self._integer(integer_op(self._value, other._value))
        return self._float(hybrid_method(self.to_hybrid(), other.to_hybrid()))

    def add(self, other):
        return self._arithmetic(other, operator.add, HybridFixedFloat.add)

    def subtract(self, other):
        return self._arithmetic(other, operator.sub, HybridFixedFloat.subtract)

    def multiply(self, other):
        return self._arithmetic(other, operator.mul, HybridFixedFloat.multiply)

    def divide(self, other):
        """Integer if it divides evenly, otherwise the float side.  x/0 is infinity or NaN."""
        other = self._coerce(other)
        if self.is_integer and other.is_integer and other._value != 0:
            quotient, remainder = divmod(self._value, other._value)
            if remainder == 0:
                return self._integer(quotient)
            return self._float(Rational(self._value, other._value).to_hybrid())
        return self._float(self.to_hybrid().divide(other.to_hybrid()))

    def floor_divide(self, other):
        other = self._coerce(other)
        if self.is_integer and other.is_integer and other._value != 0:
            return self._integer(self._value // other._value)
        return self._whole(self.to_hybrid().floor_divide(other.to_hybrid()))

    def remainder(self, other):
        """Truncating remainder, the sign follows the dividend.  x % 0 is NaN."""
        other = self._coerce(other)
        if self.is_integer and other.is_integer and other._value != 0:
            _, remainder = fixedpoint.truncating_divmod(self._value, other._value)
            return self._integer(remainder)
        return self._float(self.to_hybrid().remainder(other.to_hybrid()))

    def power(self, exponent):
        """
        Integer power for an integer base and a non-negative integer exponent.

        Floating-point power for a float on either side or a negative exponent.
        An integer exponent too big to compute becomes infinity (or 0 or 1 or -1).
        """
        exponent = self._coerce(exponent)
        if self.is_float or exponent.is_float or exponent._value < 0:
            return self._float(self.to_hybrid().power(exponent.to_hybrid()))
        if not fixedpoint.is_power_computable(self._value, exponent._value):
            return self._enormous_power(self._value, exponent._value)
        return self._integer(self._value ** exponent._value)

    @classmethod
    def pow(cls, base, exponent):
        """IntegerOrFloat.pow(2, 600) is exact."""
        return cls._coerce(base).power(exponent)

    @classmethod
    def _enormous_power(cls, base, exponent):
        if base == -1:
            return cls._integer(-1 if exponent % 2 == 1 else 1)
        if base in (0, 1):
            return cls._integer(base)
        LOG.debug("%d ** %d is too big to compute, degenerating to infinity.", base, exponent)
        if base < 0 and exponent % 2 == 1:
            return cls.NEGATIVE_INFINITY
        return cls.POSITIVE_INFINITY

    def increment(self):
        return self.add(1)

    def decrement(self):
        return self.subtract(1)

    def negate(self):
        if self.is_integer:
            return self._integer(-self._value)
        return self._float(self._value.negate())

    def abs(self):
        if self.is_integer:
            return self._integer(abs(self._value))
        return self._float(self._value.abs())

    def _whole(self, hybrid):
        """An integer if the whole hybrid is finite, else the hybrid (NaN or infinity) as is."""
        if hybrid.is_finite():
            return self._integer(int(hybrid))
        return self._float(hybrid)

    def floor(self):
        if self.is_integer:
            return self
        return self._whole(self._value.floor())

    def ceiling(self):
        if self.is_integer:
            return self
        return self._whole(self._value.ceiling())

    def truncate(self):
        if self.is_integer:
            return self
        return self._whole(self._value.truncate())

    def log(self, base=None):
        """Logarithm as a float.  Integers of any size work."""
        if self.is_integer:
            return Rational(self._value).log(base)
        return self._value.log(base)

    def log10(self):
        if self.is_integer:
            return Rational(self._value).log10()
        return self._value.log10()

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

    def __add__(self, other): return self._binary_op(IntegerOrFloat.add, self, other)
    def __radd__(self, other): return self._binary_op(IntegerOrFloat.add, other, self)
    def __sub__(self, other): return self._binary_op(IntegerOrFloat.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(IntegerOrFloat.subtract, other, self)
    def __mul__(self, other): return self._binary_op(IntegerOrFloat.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(IntegerOrFloat.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(IntegerOrFloat.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(IntegerOrFloat.divide, other, self)
    def __floordiv__( self, other): return self._binary_op(IntegerOrFloat.floor_divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(IntegerOrFloat.floor_divide, other, self)
    def __mod__( self, other): return self._binary_op(IntegerOrFloat.remainder, self, other)
    def __rmod__(self, other): return self._binary_op(IntegerOrFloat.remainder, other, self)
    def __pow__( self, other): return self._binary_op(IntegerOrFloat.power, self, other)
    def __rpow__(self, other): return self._binary_op(IntegerOrFloat.power, other, self)

    def __divmod__(self, other):
        """Truncated quotient and truncating remainder, consistent with %."""
        quotient = self._binary_op(IntegerOrFloat.divide, self, other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), self % other

    def __rdivmod__(self, other):
        quotient = self._binary_op(IntegerOrFloat.divide, other, self)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), other % self

    def __neg__(self): return self.negate()
    def __pos__(self): return self
    def __abs__(self): return self.abs()

    ZERO = None
    ONE = None
    NAN = None
    POSITIVE_INFINITY = None
    NEGATIVE_INFINITY = None

    @classmethod
    def internal_setup(cls):
        """Initialize IntegerOrFloat constants after the class is defined."""
        cls.ZERO = cls._integer(0)
        cls.ONE = cls._integer(1)
        cls.NAN = cls._float(HybridFixedFloat.NAN)
        cls.POSITIVE_INFINITY = cls._float(HybridFixedFloat.POSITIVE_INFINITY)
        cls.NEGATIVE_INFINITY = cls._float(HybridFixedFloat.NEGATIVE_INFINITY)


# noinspection PyProtectedMember
IntegerOrFloat.internal_setup()
assert IntegerOrFloat.ZERO.is_integer
assert IntegerOrFloat.NAN.is_nan()
