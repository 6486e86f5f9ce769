"""
exactnum - Exact and precision-preserving numbers.

Usage example:

    from exactnum import Rational, HybridFixedFloat, GeneralNumber

    assert Rational(1, 3) + Rational(1, 6) == Rational(1, 2)
    assert HybridFixedFloat(0.1) + HybridFixedFloat(0.2) == HybridFixedFloat(0.3)
    assert (GeneralNumber(1) / GeneralNumber(3)).is_rational

From least to most general:

    UnsignedBigInt      non-negative big integer
    Rational            numerator / denominator, arbitrary precision
    HybridFixedFloat    fixed-point decimal, or binary float when it must
    IntegerOrFloat      big integer, or HybridFixedFloat
    GeneralNumber       big integer, Rational, or HybridFixedFloat
"""

import logging

from .unsigned import UnsignedBigInt
from .hybrid import HybridFixedFloat
from .rational import Rational
from .rational import RationalOperation
from .rational import sum_rationals
from .intfloat import IntegerOrFloat
from .general import GeneralNumber
from .fixedpoint import FixedPointError
from .fixedpoint import FixedPointInexact
from .fixedpoint import FixedPointOverflow
from .conversions import ConversionTypeError

__all__ = [
    'UnsignedBigInt',
    'HybridFixedFloat',
    'Rational',
    'RationalOperation',
    'sum_rationals',
    'IntegerOrFloat',
    'GeneralNumber',
    'FixedPointError',
    'FixedPointInexact',
    'FixedPointOverflow',
    'ConversionTypeError',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import version
__version__ = version.__doc__
