"""
UnsignedBigInt - an arbitrary-precision integer that is never negative.
"""

import math

from exactnum.fixedpoint import type_name


class UnsignedBigInt(int):
    """
    Magnitude-only big integer.

    Constructed from the absolute value of its input, so UnsignedBigInt(-5) == 5.
    Arithmetic falls through to int and returns plain ints,
    because a difference of two unsigned values may well be negative.
    """

    def __new__(cls, value=0):
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                raise ValueError("{!r} cannot be represented by an unsigned integer.".format(value))
            value = math.trunc(value)
        elif not isinstance(value, int):
            try:
                value = value.__index__()
            except AttributeError:
                raise cls.ConstructorTypeError("{outer}({inner}) is not supported".format(
                    outer=cls.__name__,
                    inner=type_name(value),
                ))
        return super(UnsignedBigInt, cls).__new__(cls, abs(value))

    class ConstructorTypeError(TypeError):
        """e.g. UnsignedBigInt('12') or UnsignedBigInt([])"""

    def is_power_of_two(self):
        return self != 0 and self & (self - 1) == 0

    def is_even(self):
        return self & 1 == 0

    def __repr__(self):
        return "UnsignedBigInt({})".format(int(self))
        # EXAMPLE:  UnsignedBigInt(42)

    def __str__(self):
        return str(int(self))
