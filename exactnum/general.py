"""
GeneralNumber - integer, Rational, or float, whichever is the most exact representation available.

The promotion lattice is integer < rational < float:
    integer op integer    integer, except a division that doesn't come out even is Rational
    exact op Rational     Rational, back to integer when the result is whole
    anything op float     float

    assert GeneralNumber(1) / GeneralNumber(3) == Rational(1, 3)
    assert (GeneralNumber(1) / GeneralNumber(3)).is_rational
    assert GeneralNumber(Rational(1, 3)) * 3 == 1

Compare IntegerOrFloat, which skips the Rational step and goes straight to float.
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
from exactnum.intfloat import IntegerOrFloat
from exactnum.rational import Rational, RationalOperation


LOG = logging.getLogger(__name__)


class GeneralNumber(numbers.Real):
    """
    content - the type can be:
        int                          integer
        float                        float
        decimal.Decimal              exact, integer or Rational
        HybridFixedFloat             exact if fixed point, otherwise float
        Rational, RationalOperation  integer if whole, otherwise Rational (simplified)
        IntegerOrFloat               same side
        str                          see parse()
        GeneralNumber                copy
    """
    __slots__ = ('_kind', '_value')

    class Kind(enum.Enum):
        INTEGER_OR_FLOAT = 'integer_or_float'
        RATIONAL = 'rational'

    def __init__(self, content=0):
        if isinstance(content, GeneralNumber):
            self._set(content._kind, content._value)
        elif isinstance(content, IntegerOrFloat):
            self._set(self.Kind.INTEGER_OR_FLOAT, content)
        elif isinstance(content, (int, float)):
            self._set(self.Kind.INTEGER_OR_FLOAT, IntegerOrFloat(content))
        elif isinstance(content, decimal.Decimal):
            self._copy(self.from_fixed(content))
        elif isinstance(content, HybridFixedFloat):
            self._copy(self.from_hybrid(content))
        elif isinstance(content, (Rational, RationalOperation)):
            self._copy(self.from_rational(content))
        elif isinstance(content, str):
            self._copy(self.parse(content))
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. GeneralNumber(None) or GeneralNumber(1j)"""

    class ParseError(ValueError):
        """e.g. GeneralNumber.parse('1/2/3')"""

    class CompareError(TypeError):
        """e.g. GeneralNumber.NAN.compare(0) or GeneralNumber(1).compare('1')"""

    def _set(self, kind, value):
        self._kind = kind
        self._value = value

    def _copy(self, other):
        self._set(other._kind, other._value)

    @classmethod
    def _make(cls, kind, value):
        number = cls.__new__(cls)
        number._set(kind, value)
        return number

    @classmethod
    def _integer(cls, i):
        return cls._make(cls.Kind.INTEGER_OR_FLOAT, IntegerOrFloat(i))

    @classmethod
    def _float(cls, hybrid):
        return cls._make(cls.Kind.INTEGER_OR_FLOAT, IntegerOrFloat(hybrid))

    @classmethod
    def from_rational(cls, r):
        """Integer if whole, otherwise the simplified Rational.  Undefined stays a Rational."""
        r = Rational(r).simplify()
        if r.is_whole():
            return cls._integer(r.to_integer())
        return cls._make(cls.Kind.RATIONAL, r)

    @classmethod
    def from_fixed(cls, d):
        """
        Exact integer or Rational value of a Decimal, however many digits it has.

        Infinities and NaN go to the float side.
        """
        if not d.is_finite():
            return cls._float(HybridFixedFloat(d))
        numerator, denominator = d.as_integer_ratio()
        return cls.from_rational(Rational(numerator, denominator))

    @classmethod
    def from_hybrid(cls, h):
        if h.is_fixed:
            return cls.from_fixed(h.value)
        return cls._float(h)

    @classmethod
    def from_float(cls, x):
        return cls._float(HybridFixedFloat(x))

    @classmethod
    def from_integer(cls, i):
        return cls._integer(operator.index(i))

    @classmethod
    def parse(cls, text):
        ok, number = cls.try_parse(text)
        if not ok:
            raise cls.ParseError("Not an integer, fraction, or floating point number: " + repr(text))
        return number

    @classmethod
    def try_parse(cls, text):
        """
        Integer, then 'N/D' fraction, then floating point.  Return (ok, value), never raise.

            GeneralNumber.parse('3')     integer
            GeneralNumber.parse('-1/2')  Rational
            GeneralNumber.parse('1.3')   float side (a fixed-point HybridFixedFloat)
        """
        if not isinstance(text, str):
            return False, None
        try:
            return True, cls._integer(int(text))
        except ValueError:
            pass
        if '/' in text:
            ok, rational = Rational.try_parse(text)
            if ok:
                return True, cls.from_rational(rational)
            return False, None
        ok, number = IntegerOrFloat.try_parse(text)
        if ok:
            return True, cls._make(cls.Kind.INTEGER_OR_FLOAT, number)
        return False, None

    @property
    def kind(self):
        return self._kind

    @property
    def value(self):
        """The payload, an IntegerOrFloat or a Rational."""
        return self._value

    @property
    def is_rational(self):
        return self._kind is self.Kind.RATIONAL

    @property
    def is_integer_or_float(self):
        return self._kind is self.Kind.INTEGER_OR_FLOAT

    @property
    def is_integer(self):
        return self.is_integer_or_float and self._value.is_integer

    @property
    def is_float(self):
        return self.is_integer_or_float and self._value.is_float

    def __repr__(self):
        """Handle repr(GeneralNumber(x))"""
        return "GeneralNumber({!r})".format(self._value)
        # EXAMPLE:  GeneralNumber(Rational(1, 3))
        # EXAMPLE:  GeneralNumber(IntegerOrFloat(42))

    def __str__(self):
        return str(self._value)

    # Predicates
    # ----------
    def is_undefined(self):
        return self.is_rational and self._value.is_undefined()

    def is_nan(self):
        """NaN, or the NaN-like Undefined fraction."""
        if self.is_rational:
            return self._value.is_undefined()
        return self._value.is_nan()

    def is_infinite(self):
        return self.is_integer_or_float and self._value.is_infinite()

    def is_finite(self):
        if self.is_rational:
            return not self._value.is_undefined()
        return self._value.is_finite()

    def is_negative(self):
        return self._value.is_negative()

    def is_zero(self):
        return self._value.is_zero()

    def is_whole(self):
        return self._value.is_whole()

    def sign(self):
        """-1, 0, or +1.  NaN and Undefined give 0."""
        return self._value.sign()

    def __bool__(self):
        return bool(self._value)

    # Conversion
    # ----------
    def to_integer(self):
        """Truncate toward zero."""
        return self._value.to_integer()

    def to_float(self):
        return self._value.to_float()

    def to_fixed(self):
        return self._value.to_fixed()

    def to_hybrid(self):
        return self._value.to_hybrid()

    def to_rational(self):
        """Exact for integers and fixed point.  Infinity raises OverflowError, NaN becomes Undefined."""
        if self.is_rational:
            return self._value
        return self._value.to_rational()

    def to_integer_or_float(self):
        """A Rational that isn't whole goes to the float side, losing exactness."""
        if self.is_rational:
            return IntegerOrFloat.from_rational(self._value)
        return self._value

    def __float__(self):
        return self.to_float()

    def __int__(self):
        return self.to_integer()

    def __trunc__(self):
        return self.to_integer()

    def __floor__(self):
        return math.floor(self._value)

    def __ceil__(self):
        return math.ceil(self._value)

    def __round__(self, ndigits=None):
        if ndigits is None:
            return round(self._value)
        return GeneralNumber(round(self._value, ndigits))

    # Comparison
    # ----------
    _OTHER_REAL_TYPES = (int, float, decimal.Decimal, HybridFixedFloat, IntegerOrFloat, Rational, RationalOperation)

    @classmethod
    def _coerce(cls, x):
        if isinstance(x, GeneralNumber):
            return x
        if isinstance(x, cls._OTHER_REAL_TYPES):
            return cls(x)
        raise cls.ConstructorTypeError("{} cannot be a {}".format(type_name(x), cls.__name__))

    def _ordered(self, op, other):
        """
        Compare payloads.

        If either side is a Rational the other side converts to a Rational exactly,
        and the two are cross-multiplied.  Otherwise see IntegerOrFloat.
        A float compares by its binary value, so GeneralNumber(Rational(1, 10)) != 0.1.
        """
        if isinstance(other, GeneralNumber):
            other = other._value
        elif not isinstance(other, self._OTHER_REAL_TYPES):
            return NotImplemented
        return op(self._value, other)

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
            raise self.CompareError("GeneralNumber cannot be compared with a " + type_name(other))
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
    def _arithmetic(self, other, integer_method, rational_method, hybrid_method):
        """Float dominates, then Rational, then integer."""
        other = self._coerce(other)
        if self.is_float or other.is_float:
            return self._float(hybrid_method(self.to_hybrid(), other.to_hybrid()))
        if self.is_rational or other.is_rational:
            return self.from_rational(rational_method(self.to_rational(), other.to_rational()))
        return integer_method(self._value.value, other._value.value)

    def add(self, other):
        return self._arithmetic(other, self._integer_add, Rational.add, HybridFixedFloat.add)

    def subtract(self, other):
        return self._arithmetic(other, self._integer_subtract, Rational.subtract, HybridFixedFloat.subtract)

    def multiply(self, other):
        return self._arithmetic(other, self._integer_multiply, Rational.multiply, HybridFixedFloat.multiply)

    def divide(self, other):
        """Two integers divide to an integer if they can, otherwise to a Rational.  x/0 is Undefined."""
        return self._arithmetic(other, self._integer_divide, Rational.divide, HybridFixedFloat.divide)

    def remainder(self, other):
        """Truncating remainder, the sign follows the dividend.  x % 0 is Undefined (or NaN for floats)."""
        return self._arithmetic(other, self._integer_remainder, Rational.remainder, HybridFixedFloat.remainder)

    def floor_divide(self, other):
        return self.divide(other).floor()

    @classmethod
    def _integer_add(cls, a, b):
        return cls._integer(a + b)

    @classmethod
    def _integer_subtract(cls, a, b):
        return cls._integer(a - b)

    @classmethod
    def _integer_multiply(cls, a, b):
        return cls._integer(a * b)

    @classmethod
    def _integer_divide(cls, a, b):
        if b != 0 and a % b == 0:
            return cls._integer(a // b)
        return cls.from_rational(Rational(a, b))

    @classmethod
    def _integer_remainder(cls, a, b):
        if b == 0:
            return cls.from_rational(Rational(a).remainder(Rational.ZERO))
        _, remainder = fixedpoint.truncating_divmod(a, b)
        return cls._integer(remainder)

    def power(self, exponent):
        """
        Exact power for an integer exponent on an integer or Rational base.

        A negative exponent inverts:  GeneralNumber(2) ** -2 == Rational(1, 4).
        A float or fractional exponent, or an integer power too big to compute, uses floating point.
        """
        exponent = self._coerce(exponent)
        if exponent.is_integer:
            n = exponent.to_integer()
            if self.is_float:
                if abs(n) <= fixedpoint.EXPONENT_LIMIT:
                    return self._make(self.Kind.INTEGER_OR_FLOAT, self._value.power(n))
            elif self._is_exact_power_computable(n):
                if self.is_rational or n < 0:
                    return self.from_rational(self.to_rational().power(n))
                return self._integer(self._value.value ** n)
            LOG.debug("%s ** %d is too big for exact power, computing in floating point.", self, n)
        return self._float(self.to_hybrid().power(exponent.to_hybrid()))

    def _is_exact_power_computable(self, n):
        if self.is_rational:
            return self._value.is_power_computable(n)
        return fixedpoint.is_power_computable(self._value.value, n)

    @classmethod
    def pow(cls, base, exponent):
        return cls._coerce(base).power(exponent)

    def increment(self):
        return self.add(1)

    def decrement(self):
        return self.subtract(1)

    def _unary(self, rational_method, integer_or_float_method):
        if self.is_rational:
            return self.from_rational(rational_method(self._value))
        return self._make(self.Kind.INTEGER_OR_FLOAT, integer_or_float_method(self._value))

    def negate(self):
        return self._unary(Rational.negate, IntegerOrFloat.negate)

    def abs(self):
        return self._unary(Rational.abs, IntegerOrFloat.abs)

    def floor(self):
        return self._unary(Rational.floor, IntegerOrFloat.floor)

    def ceiling(self):
        return self._unary(Rational.ceiling, IntegerOrFloat.ceiling)

    def truncate(self):
        return self._unary(Rational.truncate, IntegerOrFloat.truncate)

    def log(self, base=None):
        return self._value.log(base)

    def log10(self):
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

    def __add__(self, other): return self._binary_op(GeneralNumber.add, self, other)
    def __radd__(self, other): return self._binary_op(GeneralNumber.add, other, self)
    def __sub__(self, other): return self._binary_op(GeneralNumber.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(GeneralNumber.subtract, other, self)
    def __mul__(self, other): return self._binary_op(GeneralNumber.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(GeneralNumber.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(GeneralNumber.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(GeneralNumber.divide, other, self)
    def __floordiv__( self, other): return self._binary_op(GeneralNumber.floor_divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(GeneralNumber.floor_divide, other, self)
    def __mod__( self, other): return self._binary_op(GeneralNumber.remainder, self, other)
    def __rmod__(self, other): return self._binary_op(GeneralNumber.remainder, other, self)
    def __pow__( self, other): return self._binary_op(GeneralNumber.power, self, other)
    def __rpow__(self, other): return self._binary_op(GeneralNumber.power, other, self)

    def __divmod__(self, other):
        """Truncated quotient and truncating remainder, consistent with %."""
        quotient = self._binary_op(GeneralNumber.divide, self, other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), self % other

    def __rdivmod__(self, other):
        quotient = self._binary_op(GeneralNumber.divide, other, self)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient.truncate(), other % self

    def __neg__(self): return self.negate()
    def __pos__(self): return self
    def __abs__(self): return self.abs()

    ZERO = None
    ONE = None
    NAN = None
    UNDEFINED = None
    POSITIVE_INFINITY = None
    NEGATIVE_INFINITY = None

    @classmethod
    def internal_setup(cls):
        """Initialize GeneralNumber constants after the class is defined."""
        cls.ZERO = cls._integer(0)
        cls.ONE = cls._integer(1)
        cls.NAN = cls._make(cls.Kind.INTEGER_OR_FLOAT, IntegerOrFloat.NAN)
        cls.UNDEFINED = cls._make(cls.Kind.RATIONAL, Rational.UNDEFINED)
        cls.POSITIVE_INFINITY = cls._make(cls.Kind.INTEGER_OR_FLOAT, IntegerOrFloat.POSITIVE_INFINITY)
        cls.NEGATIVE_INFINITY = cls._make(cls.Kind.INTEGER_OR_FLOAT, IntegerOrFloat.NEGATIVE_INFINITY)


# noinspection PyProtectedMember
GeneralNumber.internal_setup()
assert GeneralNumber.ONE.is_integer
assert GeneralNumber.UNDEFINED.is_rational
