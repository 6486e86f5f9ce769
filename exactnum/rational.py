"""
Rational - an arbitrary-precision fraction.
RationalOperation - a Rational result that has not been simplified yet.

A Rational is a numerator and denominator, both Python ints.  It is NOT kept in lowest terms.
Arithmetic returns unreduced results, and only simplify() pays for the gcd.
Operators return a RationalOperation so a chain like a + b + c + d
simplifies once, when the result is materialized:

    assert Rational(1, 3) == (Rational(1, 2) + Rational(1, 3) - Rational(1, 2)).materialize()

A zero denominator means Undefined, which behaves like NaN:
it propagates through arithmetic, is unequal to everything (itself included) and unordered.
"""

import decimal
import fractions
import logging
import math
import numbers
import operator
import random
import sys

from exactnum import fixedpoint
from exactnum.fixedpoint import FixedPointError, FixedPointOverflow, type_name
from exactnum.hybrid import HybridFixedFloat


LOG = logging.getLogger(__name__)

EXPANSION_CONTEXT = decimal.Context(
    prec=fixedpoint.FLOAT_FRACTION_DIGITS + sys.float_info.max_10_exp + 2,
    traps=[decimal.InvalidOperation, decimal.Inexact],
)
# NOTE:  Enough digits to hold the exact decimal value of any double, so expansion never rounds.

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


class Rational(numbers.Rational):
    """
    Numerator over denominator, arbitrary precision.

    Rational(numerator, denominator) - two ints, the denominator defaults to 1
    Rational(another_rational)       - copy, not simplified
    Rational(rational_operation)     - materialize, simplified
    Rational('3/4') or Rational('3') - see parse()

    Floats and decimals are converted explicitly:  Rational.from_float(0.1) == Rational(1, 10)
    """
    __slots__ = ('_numerator', '_denominator')

    SUM_SIMPLIFY_INTERVAL = 8   # see sum_rationals()

    def __init__(self, numerator=0, denominator=1):
        if isinstance(numerator, RationalOperation) and denominator == 1:
            simplified = numerator.materialize()
            self._set(simplified._numerator, simplified._denominator)
        elif isinstance(numerator, Rational) and denominator == 1:
            self._set(numerator._numerator, numerator._denominator)
        elif isinstance(numerator, str) and denominator == 1:
            parsed = self.parse(numerator)
            self._set(parsed._numerator, parsed._denominator)
        elif isinstance(numerator, int) and isinstance(denominator, int):
            self._set(int(numerator), int(denominator))
        else:
            raise self.ConstructorTypeError("{outer}({numerator}, {denominator}) is not supported".format(
                outer=type_name(self),
                numerator=type_name(numerator),
                denominator=type_name(denominator),
            ))

    class ConstructorTypeError(TypeError):
        """e.g. Rational(0.5) or Rational(1, 2.0)"""

    class ParseError(ValueError):
        """e.g. Rational.parse('1/2/3')"""

    class CompareError(TypeError):
        """e.g. Rational.UNDEFINED.compare(0) or Rational(1).compare('1')"""

    def _set(self, numerator, denominator):
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def _make(cls, numerator, denominator):
        rational = cls.__new__(cls)
        rational._set(numerator, denominator)
        return rational

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def __repr__(self):
        """Handle repr(Rational(n, d))"""
        return "Rational({}, {})".format(self._numerator, self._denominator)

    def __str__(self):
        return "{}/{}".format(self._numerator, self._denominator)
        # EXAMPLE:  2/4 (not simplified unless simplify() came first)

    @classmethod
    def parse(cls, text):
        ok, rational = cls.try_parse(text)
        if not ok:
            raise cls.ParseError("Expecting 'N/D' or 'N', not " + repr(text))
        return rational

    @classmethod
    def try_parse(cls, text):
        """Parse 'N/D' or 'N'.  Return (ok, value), never raise."""
        if not isinstance(text, str):
            return False, None
        numerator_text, slash, denominator_text = text.partition('/')
        try:
            numerator = int(numerator_text)
            denominator = int(denominator_text) if slash else 1
        except ValueError:
            return False, None
        return True, cls._make(numerator, denominator)

    # Canonical form
    # --------------
    def simplify(self):
        """
        Lowest terms, denominator positive.

        Zero becomes 0/1 and any zero denominator becomes 0/0 (Undefined).
        """
        if self._denominator == 0:
            return self.UNDEFINED
        if self._numerator == 0:
            return self.ZERO
        divisor = math.gcd(self._numerator, self._denominator)
        if self._denominator < 0:
            divisor = -divisor
        return self._make(self._numerator // divisor, self._denominator // divisor)

    def simplify_sign(self):
        """Move the sign onto the numerator.  No gcd reduction.  Rational(2, -4) becomes -2/4."""
        if self._denominator < 0:
            return self._make(-self._numerator, -self._denominator)
        return self

    def hard_equals(self, other):
        """Same numerator and same denominator, e.g. Rational(1, 2) is not hard-equal to Rational(2, 4)."""
        other = self._coerce(other)
        return self._numerator == other._numerator and self._denominator == other._denominator

    # Predicates
    # ----------
    def is_undefined(self):
        return self._denominator == 0

    def is_zero(self):
        return self._numerator == 0 and self._denominator != 0

    def is_negative(self):
        return self.sign() < 0

    def is_whole(self):
        return self._denominator != 0 and self._numerator % self._denominator == 0

    def sign(self):
        """-1, 0, or +1.  Undefined gives 0."""
        return fixedpoint.sign(self._numerator) * fixedpoint.sign(self._denominator)

    def __bool__(self):
        return self._numerator != 0 or self._denominator == 0

    # Arithmetic, all unreduced
    # -------------------------
    @classmethod
    def _coerce(cls, x):
        if isinstance(x, Rational):
            return x
        if isinstance(x, RationalOperation):
            return x.unsimplified
        if isinstance(x, int):
            return cls._make(int(x), 1)
        raise cls.ConstructorTypeError("{} cannot be a {}, convert it explicitly".format(
            type_name(x),
            cls.__name__,
        ))

    def add(self, other):
        left = self.simplify_sign()
        right = self._coerce(other).simplify_sign()
        if left._denominator == right._denominator:
            return self._make(left._numerator + right._numerator, left._denominator)
        return self._make(
            left._numerator * right._denominator + right._numerator * left._denominator,
            left._denominator * right._denominator,
        )

    def subtract(self, other):
        left = self.simplify_sign()
        right = self._coerce(other).simplify_sign()
        if left._denominator == right._denominator:
            return self._make(left._numerator - right._numerator, left._denominator)
        return self._make(
            left._numerator * right._denominator - right._numerator * left._denominator,
            left._denominator * right._denominator,
        )

    def multiply(self, other):
        other = self._coerce(other)
        return self._make(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other):
        other = self._coerce(other)
        return self._make(self._numerator * other._denominator, self._denominator * other._numerator)

    def remainder(self, other):
        """
        self - truncate(self / other) * other

        The sign follows the dividend:  -50 % 9 == -5 and 50 % -9 == 5.
        """
        other = self._coerce(other)
        return self.subtract(self.divide(other).truncate().multiply(other))

    def power(self, exponent):
        """
        Raise numerator and denominator to an int power.  A negative exponent inverts.

        OverflowError if the result would be too big to compute, see fixedpoint.POWER_BITS_LIMIT.
        """
        exponent = operator.index(exponent)
        if not self.is_power_computable(exponent):
            raise OverflowError("{} ** {} is too big to compute exactly".format(self, exponent))
        if exponent < 0:
            return self._make(self._denominator ** -exponent, self._numerator ** -exponent)
        return self._make(self._numerator ** exponent, self._denominator ** exponent)

    def is_power_computable(self, exponent):
        return (
            fixedpoint.is_power_computable(self._numerator, exponent) and
            fixedpoint.is_power_computable(self._denominator, exponent)
        )

    def negate(self):
        return self._make(-self._numerator, self._denominator)

    def abs(self):
        return self._make(abs(self._numerator), abs(self._denominator))

    def increment(self):
        return self._make(self._numerator + self._denominator, self._denominator)

    def decrement(self):
        return self._make(self._numerator - self._denominator, self._denominator)

    def truncate(self):
        """Round toward zero."""
        if self.is_undefined():
            return self.UNDEFINED
        quotient, _ = fixedpoint.truncating_divmod(self._numerator, self._denominator)
        return self._make(quotient, 1)

    def floor(self):
        """Round toward negative infinity."""
        truncated = self.truncate()
        if self.is_whole() or not self.is_negative():
            return truncated
        return truncated.decrement()

    def ceiling(self):
        """Round toward positive infinity."""
        truncated = self.truncate()
        if self.is_whole() or self.is_negative() or self.is_undefined():
            return truncated
        return truncated.increment()

    @classmethod
    def mediant(cls, a, b):
        """(a.numerator + b.numerator) / (a.denominator + b.denominator), between a and b."""
        a = cls._coerce(a).simplify_sign()
        b = cls._coerce(b).simplify_sign()
        return cls._make(a._numerator + b._numerator, a._denominator + b._denominator)

    @classmethod
    def equalize_denominators(cls, a, b):
        """
        Rewrite two fractions over the common denominator |a.denominator * b.denominator|.

        Values and signs are unchanged, nothing is reduced:
            equalize_denominators(Rational(1, 2), Rational(-1, 3)) == (3/6, -2/6)
        """
        a = cls._coerce(a)
        b = cls._coerce(b)
        denominator = abs(a._denominator * b._denominator)
        return (
            cls._make(abs(a._numerator) * abs(b._denominator) * a.sign(), denominator),
            cls._make(abs(b._numerator) * abs(a._denominator) * b.sign(), denominator),
        )

    @classmethod
    def sum(cls, items):
        return sum_rationals(items)

    @staticmethod
    def min(a, b):
        """The lesser, or a if they are equal."""
        return b if b < a else a

    @staticmethod
    def max(a, b):
        """The greater, or a if they are equal."""
        return b if b > a else a

    def log(self, base=None):
        """Logarithm as a float, computed from the numerator and denominator so huge values work."""
        if base is None:
            return self._logarithm(math.log)
        return self._logarithm(math.log) / math.log(base)

    def log10(self):
        return self._logarithm(math.log10)

    def _logarithm(self, log_function):
        if self.is_undefined() or self.is_negative():
            return math.nan
        if self.is_zero():
            return -math.inf
        return log_function(abs(self._numerator)) - log_function(abs(self._denominator))

    # Comparison
    # ----------
    @classmethod
    def _comparable(cls, x):
        """
        A Rational, or a non-finite float.  ConstructorTypeError if x is not a real number we know.

        Floats compare by their binary value, so Rational(1, 10) != 0.1.  Rational.from_float(0.1) is 1/10.
        """
        if isinstance(x, HybridFixedFloat):
            x = x.value
        if isinstance(x, float):
            if math.isfinite(x):
                return cls._make(*x.as_integer_ratio())
            return x
        if isinstance(x, decimal.Decimal):
            if x.is_finite():
                return cls._make(*x.as_integer_ratio())
            return float(x)
        if isinstance(x, fractions.Fraction):
            return cls._make(x.numerator, x.denominator)
        return cls._coerce(x)

    def _compare(self, other):
        """Cross-multiply.  Both must be defined."""
        left = abs(self._numerator) * abs(other._denominator) * self.sign()
        right = abs(other._numerator) * abs(self._denominator) * other.sign()
        return (left > right) - (left < right)

    def compare(self, other):
        """-1, 0, or +1.  CompareError for Undefined or an incomparable type."""
        try:
            other = self._comparable(other)
        except self.ConstructorTypeError:
            raise self.CompareError("Rational cannot be compared with a " + type_name(other))
        if self.is_undefined():
            raise self.CompareError("Undefined is unordered.")
        if isinstance(other, float):
            if math.isnan(other):
                raise self.CompareError("NaN is unordered.")
            return -1 if other > 0 else 1
        if other.is_undefined():
            raise self.CompareError("Undefined is unordered.")
        return self._compare(other)

    def _ordered(self, op, other):
        try:
            other = self._comparable(other)
        except self.ConstructorTypeError:
            return NotImplemented
        if self.is_undefined():
            return False
        if isinstance(other, float):
            return op(0.0, other)
            # NOTE:  Only infinities and NaN get here.  Any finite value orders against them like zero.
        if other.is_undefined():
            return False
        return op(self._compare(other), 0)

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

    def __hash__(self):
        """
        The hash of the exact value, computed the way fractions.Fraction does it.

        So equal numbers hash alike whatever their type:  int, float, Decimal, Fraction, Rational.
        """
        if self.is_undefined():
            return 0
            # NOTE:  Undefined equals nothing, so any constant will do.
        simple = self.simplify()
        inverse = pow(simple._denominator, _HASH_MODULUS - 2, _HASH_MODULUS)
        if inverse == 0:
            magnitude_hash = _HASH_INF
        else:
            magnitude_hash = abs(simple._numerator) * inverse % _HASH_MODULUS
        result = magnitude_hash if simple._numerator >= 0 else -magnitude_hash
        return -2 if result == -1 else result
        # THANKS:  https://docs.python.org/3/library/stdtypes.html#hashing-of-numeric-types

    # Conversion
    # ----------
    @classmethod
    def from_integer(cls, i):
        return cls._make(operator.index(i), 1)

    @classmethod
    def from_float(cls, x):
        """
        Exact fraction for a float, in decimal terms when that round-trips.

            Rational.from_float(0.1) == Rational(1, 10)
            Rational.from_float(x).to_float() == x    for every finite x

        NaN becomes Undefined.  Infinity raises OverflowError.
        """
        if math.isnan(x):
            return cls.UNDEFINED
        if math.isinf(x):
            raise OverflowError("{!r} cannot be represented by a Rational.".format(x))
        try:
            fixed = fixedpoint.fixed_from_float_strictly(x)
        except FixedPointError:
            return cls._from_decimal_expansion(decimal.Decimal(x), fixedpoint.FLOAT_FRACTION_DIGITS)
        return cls._from_decimal_expansion(fixed, fixedpoint.FIXED_FRACTION_DIGITS)

    @classmethod
    def from_fixed(cls, d):
        """Exact fraction for a fixed-point Decimal.  Rounded to 28 places first, FixedPointOverflow if out of range."""
        return cls._from_decimal_expansion(fixedpoint.to_fixed(d), fixedpoint.FIXED_FRACTION_DIGITS)

    @classmethod
    def from_hybrid(cls, h):
        if h.is_fixed:
            return cls.from_fixed(h.value)
        return cls.from_float(h.value)

    @classmethod
    def _from_decimal_expansion(cls, value, max_digits):
        """
        Split into whole and fractional parts, then shift the fraction left one digit at a time.

        Stops when the fraction is whole or after max_digits shifts,
        so the denominator is a power of 10, at most 10**max_digits.
        """
        whole = value.to_integral_value(rounding=decimal.ROUND_DOWN, context=EXPANSION_CONTEXT)
        fraction = EXPANSION_CONTEXT.subtract(value, whole)
        digits = 0
        while digits < max_digits and fraction != fraction.to_integral_value(context=EXPANSION_CONTEXT):
            fraction = EXPANSION_CONTEXT.multiply(fraction, 10)
            digits += 1
        if fraction != fraction.to_integral_value(context=EXPANSION_CONTEXT):
            LOG.debug("Decimal expansion of %s truncated after %d digits.", value, digits)
        return cls._make(int(whole), 1).add(cls._make(int(fraction), 10 ** digits)).simplify()

    def to_integer(self):
        """Truncate toward zero."""
        if self.is_undefined():
            self._int_cant_be_undefined()
        return self.truncate()._numerator

    @staticmethod
    def _int_cant_be_undefined():
        raise ValueError("Undefined cannot be represented by integers.")

    def to_float(self):
        """Nearest float.  Too big is a signed infinity, Undefined is NaN."""
        if self.is_undefined():
            return math.nan
        try:
            return self._numerator / self._denominator
        except OverflowError:
            return math.copysign(math.inf, self.sign())

    def to_fixed(self):
        """Nearest fixed-point Decimal.  FixedPointOverflow if out of range or Undefined."""
        if self.is_undefined():
            raise FixedPointOverflow("Undefined has no fixed-point representation.")
        if abs(self._numerator) > fixedpoint.FIXED_COEFFICIENT_MAX * abs(self._denominator):
            raise FixedPointOverflow("{} is outside the fixed-point range".format(self))
        return fixedpoint.to_fixed(fixedpoint.WORK_CONTEXT.divide(
            decimal.Decimal(self._numerator),
            decimal.Decimal(self._denominator),
        ))
        # NOTE:  Decimal(int) is exact, so only the quotient is rounded,
        #        however big the numerator and denominator are.

    def to_hybrid(self):
        """
        Fixed point if it is as close as the nearest float, otherwise the nearest float.

        The quotient is computed exactly, so Rational(10**400 + 1, 10**400) is 1, not inf/inf.
        """
        if self.is_undefined():
            return HybridFixedFloat.NAN
        nearest = self.to_float()
        try:
            fixed = self.to_fixed()
        except FixedPointOverflow:
            return HybridFixedFloat.from_float(nearest)
        if float(fixed) == nearest:
            return HybridFixedFloat.from_fixed(fixed)
        return HybridFixedFloat.from_float(nearest)

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
        """Round half to even, like round(fractions.Fraction)."""
        if ndigits is None:
            if self.is_undefined():
                self._int_cant_be_undefined()
            canonical = self.simplify_sign()
            quotient, remainder = divmod(canonical._numerator, canonical._denominator)
            if remainder * 2 > canonical._denominator or (
                remainder * 2 == canonical._denominator and quotient % 2 == 1
            ):
                quotient += 1
            return quotient
        shift = 10 ** abs(ndigits)
        if ndigits > 0:
            return self._make(round(self.multiply(shift)), shift).simplify()
        return self._make(round(self.divide(shift)) * shift, 1)

    # Operators
    # ---------
    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        try:
            left = cls._coerce(input_left)
            right = cls._coerce(input_right)
        except cls.ConstructorTypeError:
            return NotImplemented
        return RationalOperation(method(left, right))

    def __add__(self, other): return self._binary_op(Rational.add, self, other)
    def __radd__(self, other): return self._binary_op(Rational.add, other, self)
    def __sub__(self, other): return self._binary_op(Rational.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(Rational.subtract, other, self)
    def __mul__(self, other): return self._binary_op(Rational.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(Rational.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(Rational.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(Rational.divide, other, self)
    def __floordiv__( self, other): return self._binary_op(_floor_divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(_floor_divide, other, self)
    def __mod__( self, other): return self._binary_op(Rational.remainder, self, other)
    def __rmod__(self, other): return self._binary_op(Rational.remainder, other, self)

    def __divmod__(self, other):
        """Truncated quotient and truncating remainder, consistent with %."""
        quotient = self._binary_op(_truncate_divide, self, other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self % other

    def __rdivmod__(self, other):
        quotient = self._binary_op(_truncate_divide, other, self)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, other % self

    def __pow__(self, exponent):
        """Whole exponents stay exact.  Anything else is a float, as with fractions.Fraction."""
        if isinstance(exponent, (int, Rational, RationalOperation)):
            exponent = self._coerce(exponent)
            if exponent.is_whole():
                return RationalOperation(self.power(exponent.to_integer()))
            return fixedpoint.float_power(self.to_float(), exponent.to_float())
        if isinstance(exponent, numbers.Real):
            return fixedpoint.float_power(self.to_float(), float(exponent))
        return NotImplemented

    def __rpow__(self, base):
        if isinstance(base, int):
            return self._coerce(base).__pow__(self)
        if isinstance(base, numbers.Real):
            return fixedpoint.float_power(float(base), self.to_float())
        return NotImplemented

    def __neg__(self): return self.negate()
    def __pos__(self): return self
    def __abs__(self): return self.abs()

    ZERO = None
    ONE = None
    NEGATIVE_ONE = None
    UNDEFINED = None

    @classmethod
    def random(cls, rng=None, numerator_range=(-2**31, 2**31 - 1), denominator_range=(-2**31, 2**31 - 1)):
        """
        A random fraction for testing.  Never Undefined.

        rng - anything with randint(), e.g. random.Random(seed).  Default is the random module.
        """
        rng = rng or random
        numerator = rng.randint(*numerator_range)
        denominator = 0
        while denominator == 0:
            denominator = rng.randint(*denominator_range)
        return cls._make(numerator, denominator)

    @classmethod
    def internal_setup(cls):
        """Initialize Rational constants after the class is defined."""
        cls.ZERO = cls._make(0, 1)
        cls.ONE = cls._make(1, 1)
        cls.NEGATIVE_ONE = cls._make(-1, 1)
        cls.UNDEFINED = cls._make(0, 0)


def _floor_divide(left, right):
    return left.divide(right).floor()


def _truncate_divide(left, right):
    return left.divide(right).truncate()


class RationalOperation(object):
    """
    The unreduced result of Rational arithmetic, simplified only when materialized.

    Numerators and denominators grow along an unmaterialized chain,
    so long-running sums should go through sum_rationals().
    """
    __slots__ = ('_unsimplified',)

    def __init__(self, unsimplified):
        if not isinstance(unsimplified, Rational):
            raise TypeError("RationalOperation wraps a Rational, not a " + type_name(unsimplified))
        self._unsimplified = unsimplified

    @property
    def unsimplified(self):
        return self._unsimplified

    def materialize(self):
        """The Rational result, simplified once."""
        return self._unsimplified.simplify()

    def to_rational(self):
        return self.materialize()

    def __repr__(self):
        return "RationalOperation({!r})".format(self._unsimplified)

    def __str__(self):
        return str(self.materialize())

    def __eq__(self, other): return self._unsimplified.__eq__(other)
    def __ne__(self, other): return self._unsimplified.__ne__(other)
    def __lt__(self, other): return self._unsimplified.__lt__(other)
    def __le__(self, other): return self._unsimplified.__le__(other)
    def __gt__(self, other): return self._unsimplified.__gt__(other)
    def __ge__(self, other): return self._unsimplified.__ge__(other)

    def __hash__(self):
        return hash(self._unsimplified)

    def __add__(self, other): return Rational._binary_op(Rational.add, self, other)
    def __radd__(self, other): return Rational._binary_op(Rational.add, other, self)
    def __sub__(self, other): return Rational._binary_op(Rational.subtract, self, other)
    def __rsub__(self, other): return Rational._binary_op(Rational.subtract, other, self)
    def __mul__(self, other): return Rational._binary_op(Rational.multiply, self, other)
    def __rmul__(self, other): return Rational._binary_op(Rational.multiply, other, self)
    def __truediv__( self, other): return Rational._binary_op(Rational.divide, self, other)
    def __rtruediv__(self, other): return Rational._binary_op(Rational.divide, other, self)
    def __floordiv__( self, other): return Rational._binary_op(_floor_divide, self, other)
    def __rfloordiv__(self, other): return Rational._binary_op(_floor_divide, other, self)
    def __mod__( self, other): return Rational._binary_op(Rational.remainder, self, other)
    def __rmod__(self, other): return Rational._binary_op(Rational.remainder, other, self)
    def __pow__(self, exponent): return self._unsimplified.__pow__(exponent)
    def __rpow__(self, base): return self._unsimplified.__rpow__(base)

    def __neg__(self): return RationalOperation(self._unsimplified.negate())
    def __pos__(self): return self
    def __abs__(self): return RationalOperation(self._unsimplified.abs())

    def __float__(self):
        return self._unsimplified.to_float()

    def __int__(self):
        return self._unsimplified.to_integer()

    def __trunc__(self):
        return self._unsimplified.__trunc__()

    def __floor__(self):
        return self._unsimplified.__floor__()

    def __ceil__(self):
        return self._unsimplified.__ceil__()

    def __round__(self, ndigits=None):
        return self._unsimplified.__round__(ndigits)

    def __bool__(self):
        return bool(self._unsimplified)


def sum_rationals(items):
    """
    Add up Rationals (or RationalOperations or ints), simplifying every SUM_SIMPLIFY_INTERVAL terms.

    The result is simplified.  No items sum to Rational.ZERO.
    A single item comes back as it was, unsimplified.
    """
    total = Rational.ZERO
    only = None
    terms = 0
    for item in items:
        only = item if terms == 0 else None
        total = total.add(item)
        terms += 1
        if terms % Rational.SUM_SIMPLIFY_INTERVAL == 0:
            total = total.simplify()
    if terms == 1:
        # noinspection PyProtectedMember
        return Rational._coerce(only)
    return total.simplify()


# noinspection PyProtectedMember
Rational.internal_setup()
assert Rational(2, 1).hard_equals(Rational(4, 2).simplify())
assert Rational(-1, 2).hard_equals(Rational(2, -4).simplify())
assert Rational.UNDEFINED != Rational.UNDEFINED
