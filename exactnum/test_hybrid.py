"""
Unit tests for HybridFixedFloat
"""

import decimal
import math
import numbers
import unittest

from exactnum import fixedpoint
from exactnum.hybrid import HybridFixedFloat


class HybridTestCase(unittest.TestCase):

    def assertFixed(self, expected_text, hybrid):
        self.assertIsInstance(hybrid, HybridFixedFloat)
        self.assertTrue(hybrid.is_fixed, "Expected fixed point, got " + repr(hybrid))
        self.assertEqual(decimal.Decimal(expected_text), hybrid.value)

    def assertFloat(self, expected_float, hybrid):
        self.assertIsInstance(hybrid, HybridFixedFloat)
        self.assertTrue(hybrid.is_float, "Expected floating point, got " + repr(hybrid))
        self.assertEqual(expected_float, hybrid.value)


class HybridConstructorTests(HybridTestCase):

    def test_int(self):
        self.assertFixed('42', HybridFixedFloat(42))
        self.assertFixed('-42', HybridFixedFloat(-42))
        self.assertFixed('0', HybridFixedFloat())
        self.assertFixed('79228162514264337593543950335', HybridFixedFloat(2**96 - 1))
        self.assertFloat(1e30, HybridFixedFloat(10**30))
        self.assertFloat(math.inf, HybridFixedFloat(10**400))
        self.assertFloat(-math.inf, HybridFixedFloat(-10**400))

    def test_float(self):
        self.assertFixed('0.1', HybridFixedFloat(0.1))
        self.assertFixed('-2.5', HybridFixedFloat(-2.5))
        self.assertFixed('1E+22', HybridFixedFloat(1e22))
        self.assertFloat(1e-30, HybridFixedFloat(1e-30))
        self.assertFloat(1e30, HybridFixedFloat(1e30))
        self.assertFloat(math.inf, HybridFixedFloat(math.inf))
        self.assertTrue(HybridFixedFloat(math.nan).is_nan())

    def test_inexact_float_logs(self):
        with self.assertLogs('exactnum.hybrid', level='DEBUG') as logs:
            HybridFixedFloat(1e-30)
        self.assertIn("1e-30", logs.output[0])

    def test_decimal(self):
        self.assertFixed('0.1', HybridFixedFloat(decimal.Decimal('0.1')))
        self.assertFixed('0', HybridFixedFloat(decimal.Decimal('1E-30')))
        self.assertFloat(1e30, HybridFixedFloat(decimal.Decimal('1E+30')))
        self.assertFixed('0.3333333333333333333333333333', HybridFixedFloat(decimal.Decimal(1) / decimal.Decimal(3)))

    def test_copy(self):
        original = HybridFixedFloat('0.1')
        copy = HybridFixedFloat(original)
        self.assertIsNot(original, copy)
        self.assertFixed('0.1', copy)

    def test_named_constructors(self):
        self.assertFixed('0.25', HybridFixedFloat.from_float(0.25))
        self.assertFixed('0.25', HybridFixedFloat.from_fixed(decimal.Decimal('0.25')))
        self.assertFixed('7', HybridFixedFloat.from_integer(7))
        self.assertFloat(1e-30, HybridFixedFloat.from_float(1e-30))

    def test_bad_type(self):
        with self.assertRaises(HybridFixedFloat.ConstructorTypeError):
            HybridFixedFloat(None)
        with self.assertRaises(TypeError):
            HybridFixedFloat([1])

    def test_constants(self):
        self.assertFixed('0', HybridFixedFloat.ZERO)
        self.assertFixed('1', HybridFixedFloat.ONE)
        self.assertTrue(HybridFixedFloat.NAN.is_nan())
        self.assertTrue(HybridFixedFloat.POSITIVE_INFINITY.is_positive_infinity())
        self.assertTrue(HybridFixedFloat.NEGATIVE_INFINITY.is_negative_infinity())
        self.assertFloat(5e-324, HybridFixedFloat.EPSILON)

    def test_is_a_number(self):
        self.assertIsInstance(HybridFixedFloat(1), numbers.Real)


class HybridTextTests(HybridTestCase):

    def test_parse_fixed(self):
        self.assertFixed('0.1', HybridFixedFloat.parse('0.1'))
        self.assertFixed('2.50', HybridFixedFloat.parse('  2.50 '))
        self.assertFixed('100000', HybridFixedFloat.parse('1e5'))
        self.assertFixed('-3', HybridFixedFloat('-3'))

    def test_parse_float(self):
        self.assertFloat(1e-30, HybridFixedFloat.parse('1e-30'))
        self.assertFloat(math.inf, HybridFixedFloat.parse('inf'))
        self.assertFloat(math.inf, HybridFixedFloat.parse('1e400'))
        self.assertTrue(HybridFixedFloat.parse('nan').is_nan())

    def test_parse_errors(self):
        with self.assertRaises(HybridFixedFloat.ParseError):
            HybridFixedFloat.parse('alpha')
        with self.assertRaises(ValueError):
            HybridFixedFloat('1/2')
        self.assertEqual((False, None), HybridFixedFloat.try_parse(''))
        self.assertEqual((False, None), HybridFixedFloat.try_parse('0x10'))
        self.assertEqual((False, None), HybridFixedFloat.try_parse(3))

    def test_str(self):
        self.assertEqual('0.1', str(HybridFixedFloat(0.1)))
        self.assertEqual('1.10', str(HybridFixedFloat(decimal.Decimal('1.10'))))
        self.assertEqual('0.0000001', str(HybridFixedFloat('1e-7')))
        self.assertEqual('1e-30', str(HybridFixedFloat(1e-30)))
        self.assertEqual('inf', str(HybridFixedFloat.POSITIVE_INFINITY))

    def test_repr(self):
        self.assertEqual("HybridFixedFloat('0.1')", repr(HybridFixedFloat('0.1')))
        self.assertEqual("HybridFixedFloat('1e-30')", repr(HybridFixedFloat(1e-30)))
        self.assertEqual("HybridFixedFloat('nan')", repr(HybridFixedFloat.NAN))

    def test_text_round_trip(self):
        for text in ('0.1', '-7', '123.456', '1e-30', '1e+300', '-inf', '79228162514264337593543950335'):
            hybrid = HybridFixedFloat(text)
            again = HybridFixedFloat(str(hybrid))
            self.assertEqual(hybrid.kind, again.kind)
            self.assertEqual(hybrid, again)


class HybridArithmeticTests(HybridTestCase):

    def test_decimal_fractions_are_exact(self):
        self.assertNotEqual(0.3, 0.1 + 0.2)
        self.assertFixed('0.3', HybridFixedFloat(0.1) + HybridFixedFloat(0.2))
        self.assertFixed('-0.1', HybridFixedFloat(0.1) - HybridFixedFloat(0.2))
        self.assertFixed('0.02', HybridFixedFloat(0.1) * HybridFixedFloat(0.2))
        self.assertFixed('0.5', HybridFixedFloat(0.1) / HybridFixedFloat(0.2))
        self.assertFixed('0.1', HybridFixedFloat(0.1) % HybridFixedFloat(0.2))
        self.assertEqual(HybridFixedFloat(0.3), HybridFixedFloat(0.1) + HybridFixedFloat(0.2))
        self.assertEqual(decimal.Decimal('0.3'), HybridFixedFloat(0.1) + HybridFixedFloat(0.2))

    def test_named_methods(self):
        a = HybridFixedFloat('1.5')
        self.assertFixed('2', a.add(0.5))
        self.assertFixed('1', a.subtract(decimal.Decimal('0.5')))
        self.assertFixed('3', a.multiply(2))
        self.assertFixed('0.75', a.divide(2))
        self.assertFixed('0.5', a.remainder(1))
        self.assertFixed('2.5', a.increment())
        self.assertFixed('0.5', a.decrement())

    def test_mixed_operands(self):
        self.assertFixed('1.5', 1 + HybridFixedFloat('0.5'))
        self.assertFixed('0.3', HybridFixedFloat('0.1') + decimal.Decimal('0.2'))
        self.assertFixed('0.5', 1 - HybridFixedFloat('0.5'))
        self.assertFixed('4', 2 / HybridFixedFloat('0.5'))
        with self.assertRaises(TypeError):
            HybridFixedFloat(1) + 'x'

    def test_overflow_falls_back_to_float(self):
        big = HybridFixedFloat(2**96 - 1)
        self.assertTrue(big.is_fixed)
        with self.assertLogs('exactnum.hybrid', level='DEBUG'):
            bigger = big + 1
        self.assertFloat(float(2**96), bigger)
        self.assertFloat(1e40, HybridFixedFloat(10**20) * HybridFixedFloat(10**20))
        self.assertFloat(1e30, HybridFixedFloat(10) ** 30)

    def test_float_operand_is_float_arithmetic(self):
        self.assertFloat(1e-30 + 1e-30, HybridFixedFloat(1e-30) + HybridFixedFloat(1e-30))
        self.assertFloat(2e-30, HybridFixedFloat(1e-30) * 2)

    def test_float_result_that_fits_becomes_fixed(self):
        self.assertFixed('1', HybridFixedFloat(1e30) / HybridFixedFloat(1e30))

    def test_division_by_zero(self):
        self.assertTrue((HybridFixedFloat(1) / 0).is_positive_infinity())
        self.assertTrue((HybridFixedFloat(-1) / 0).is_negative_infinity())
        self.assertTrue((HybridFixedFloat(0) / 0).is_nan())
        self.assertTrue((HybridFixedFloat(1) % 0).is_nan())
        self.assertTrue((HybridFixedFloat(1) // 0).is_positive_infinity())

    def test_remainder_truncates(self):
        self.assertFixed('5', HybridFixedFloat(50) % 9)
        self.assertFixed('-5', HybridFixedFloat(-50) % 9)
        self.assertFixed('5', HybridFixedFloat(50) % -9)
        self.assertFixed('-5', HybridFixedFloat(-50) % -9)
        self.assertFixed('-50', HybridFixedFloat(-50) % HybridFixedFloat.POSITIVE_INFINITY)
        self.assertTrue((HybridFixedFloat.POSITIVE_INFINITY % 3).is_nan())

    def test_floor_divide(self):
        self.assertFixed('3', HybridFixedFloat(7) // 2)
        self.assertFixed('-4', HybridFixedFloat(-7) // 2)
        self.assertFixed('-1', HybridFixedFloat('-0.5') // 1)
        self.assertFixed('2', HybridFixedFloat('5.5') // HybridFixedFloat('2.5'))

    def test_divmod(self):
        quotient, remainder = divmod(HybridFixedFloat(-7), 2)
        self.assertFixed('-3', quotient)
        self.assertFixed('-1', remainder)
        quotient, remainder = divmod(7, HybridFixedFloat(-2))
        self.assertFixed('-3', quotient)
        self.assertFixed('1', remainder)

    def test_power(self):
        self.assertFixed('0.01', HybridFixedFloat('0.1') ** 2)
        self.assertFixed('10', HybridFixedFloat('0.1') ** -1)
        self.assertFixed('1', HybridFixedFloat('123.456') ** 0)
        self.assertFixed('1024', 2 ** HybridFixedFloat(10))
        self.assertEqual(math.sqrt(2), float(HybridFixedFloat(2) ** 0.5))
        self.assertTrue((HybridFixedFloat(0) ** -1).is_positive_infinity())
        self.assertTrue((HybridFixedFloat(-1) ** 0.5).is_nan())

    def test_negate_abs(self):
        self.assertFixed('-0.1', -HybridFixedFloat('0.1'))
        self.assertFixed('0.1', abs(HybridFixedFloat('-0.1')))
        self.assertEqual('0', str(-HybridFixedFloat(0)))
        self.assertFloat(-1e-30, HybridFixedFloat(1e-30).negate())
        self.assertFloat(math.inf, abs(HybridFixedFloat.NEGATIVE_INFINITY))

    def test_floor_ceiling_truncate(self):
        self.assertFixed('-3', HybridFixedFloat('-2.5').floor())
        self.assertFixed('-2', HybridFixedFloat('-2.5').ceiling())
        self.assertFixed('-2', HybridFixedFloat('-2.5').truncate())
        self.assertFixed('2', HybridFixedFloat('2.5').floor())
        self.assertFixed('3', HybridFixedFloat('2.5').ceiling())
        self.assertFloat(1e30, HybridFixedFloat(1e30).floor())
        self.assertTrue(HybridFixedFloat.NAN.floor().is_nan())
        self.assertTrue(HybridFixedFloat.POSITIVE_INFINITY.ceiling().is_positive_infinity())

    def test_math_protocol(self):
        self.assertEqual(-3, math.floor(HybridFixedFloat('-2.5')))
        self.assertEqual(-2, math.ceil(HybridFixedFloat('-2.5')))
        self.assertEqual(-2, math.trunc(HybridFixedFloat('-2.5')))
        self.assertEqual(-2, int(HybridFixedFloat('-2.5')))
        self.assertEqual(0.1, float(HybridFixedFloat('0.1')))
        with self.assertRaises(ValueError):
            int(HybridFixedFloat.NAN)
        with self.assertRaises(OverflowError):
            int(HybridFixedFloat.POSITIVE_INFINITY)

    def test_round(self):
        self.assertEqual(2, round(HybridFixedFloat('2.5')))
        self.assertEqual(4, round(HybridFixedFloat('3.5')))
        self.assertEqual(-2, round(HybridFixedFloat('-2.5')))
        self.assertFixed('1.23', round(HybridFixedFloat('1.2345'), 2))
        self.assertFixed('1.24', round(HybridFixedFloat('1.235'), 2))

    def test_log(self):
        self.assertEqual(2.0, HybridFixedFloat(100).log10())
        self.assertAlmostEqual(3.0, HybridFixedFloat(8).log(2))
        self.assertAlmostEqual(1.0, HybridFixedFloat(math.e).log())
        self.assertTrue(math.isnan(HybridFixedFloat(-1).log()))
        self.assertTrue(math.isnan(HybridFixedFloat.NAN.log10()))
        self.assertEqual(-math.inf, HybridFixedFloat(0).log())
        self.assertEqual(math.inf, HybridFixedFloat.POSITIVE_INFINITY.log())


class HybridComparisonTests(HybridTestCase):

    def test_ordering(self):
        self.assertLess(HybridFixedFloat('0.1'), HybridFixedFloat('0.2'))
        self.assertLess(HybridFixedFloat(0), HybridFixedFloat(1e-30))
        self.assertGreater(HybridFixedFloat(1e30), HybridFixedFloat(2**96 - 1))
        self.assertLessEqual(HybridFixedFloat('0.1'), 0.1)
        self.assertGreaterEqual(HybridFixedFloat('0.1'), decimal.Decimal('0.1'))
        self.assertLess(HybridFixedFloat.NEGATIVE_INFINITY, HybridFixedFloat(-10**20))

    def test_equality(self):
        self.assertNotEqual(HybridFixedFloat('0.1'), 0.1)
        self.assertEqual(HybridFixedFloat(0.1), HybridFixedFloat('0.1'))
        self.assertEqual(HybridFixedFloat('0.1'), decimal.Decimal('0.1'))
        self.assertEqual(HybridFixedFloat('2.0'), HybridFixedFloat(2))
        self.assertNotEqual(HybridFixedFloat('0.1'), HybridFixedFloat('0.10000000001'))
        self.assertNotEqual(HybridFixedFloat(1), 'one')

    def test_ints_compare_exactly(self):
        self.assertEqual(HybridFixedFloat(2**53 + 1), 2**53 + 1)
        self.assertNotEqual(HybridFixedFloat(2**53 + 1), 2**53)
        self.assertNotEqual(HybridFixedFloat(10**30), 10**30)
        self.assertLess(HybridFixedFloat(10**30), 10**30 + 10**15)
        self.assertGreater(HybridFixedFloat(10**30), 10**30)

    def test_nan(self):
        nan = HybridFixedFloat.NAN
        self.assertFalse(nan == nan)
        self.assertTrue(nan != nan)
        self.assertFalse(nan < 1)
        self.assertFalse(nan >= 1)

    def test_compare(self):
        self.assertEqual(-1, HybridFixedFloat(1).compare(2))
        self.assertEqual(-1, HybridFixedFloat('0.1').compare(0.1))
        self.assertEqual(0, HybridFixedFloat('0.5').compare(0.5))
        self.assertEqual(1, HybridFixedFloat.POSITIVE_INFINITY.compare(10**20))
        with self.assertRaises(HybridFixedFloat.CompareError):
            HybridFixedFloat.NAN.compare(1)
        with self.assertRaises(HybridFixedFloat.CompareError):
            HybridFixedFloat(1).compare(math.nan)
        with self.assertRaises(HybridFixedFloat.CompareError):
            HybridFixedFloat(1).compare('1')

    def test_hash(self):
        self.assertEqual(hash(2), hash(HybridFixedFloat(2)))
        self.assertEqual(hash(2), hash(HybridFixedFloat('2.00')))
        self.assertEqual(hash(0.5), hash(HybridFixedFloat('0.5')))
        self.assertEqual(hash(decimal.Decimal('0.1')), hash(HybridFixedFloat(0.1)))
        self.assertEqual(1, len({HybridFixedFloat('0.5'), HybridFixedFloat(0.5), HybridFixedFloat('0.50')}))

    def test_fixed_and_float_compare_exactly(self):
        fixed_max = HybridFixedFloat(fixedpoint.FIXED_MAX)
        float_just_above = HybridFixedFloat(2**96)
        self.assertTrue(fixed_max.is_fixed)
        self.assertTrue(float_just_above.is_float)
        self.assertNotEqual(fixed_max, float_just_above)
        self.assertLess(fixed_max, float_just_above)
        self.assertEqual(-1, fixed_max.compare(float_just_above))
        self.assertEqual(2, len({fixed_max, float_just_above}))

    def test_hash_agrees_with_equality(self):
        tenth = {HybridFixedFloat('0.1'): 'tenth'}
        self.assertEqual('tenth', tenth[decimal.Decimal('0.1')])
        self.assertEqual('tenth', tenth[HybridFixedFloat(0.1)])
        self.assertNotIn(0.1, tenth)
        self.assertIn(1e30, {HybridFixedFloat(1e30)})
        self.assertIn(2**53 + 1, {HybridFixedFloat(2**53 + 1)})
        self.assertIn(HybridFixedFloat('0.25'), {0.25})

    def test_min_max(self):
        a = HybridFixedFloat('1.0')
        b = HybridFixedFloat(1)
        self.assertIs(a, HybridFixedFloat.min(a, b))
        self.assertIs(a, HybridFixedFloat.max(a, b))
        self.assertFixed('-1', HybridFixedFloat.min(HybridFixedFloat(-1), a))
        self.assertFloat(1e30, HybridFixedFloat.max(HybridFixedFloat(1e30), a))


class HybridPredicateTests(HybridTestCase):

    def test_predicates(self):
        self.assertTrue(HybridFixedFloat('2.0').is_whole())
        self.assertFalse(HybridFixedFloat('2.5').is_whole())
        self.assertTrue(HybridFixedFloat(1e30).is_whole())
        self.assertFalse(HybridFixedFloat.POSITIVE_INFINITY.is_whole())
        self.assertTrue(HybridFixedFloat('-0.1').is_negative())
        self.assertTrue(HybridFixedFloat('0.0').is_zero())
        self.assertTrue(HybridFixedFloat(1e30).is_finite())
        self.assertFalse(HybridFixedFloat.NAN.is_finite())
        self.assertTrue(HybridFixedFloat.NEGATIVE_INFINITY.is_infinite())

    def test_sign(self):
        self.assertEqual(-1, HybridFixedFloat('-0.1').sign())
        self.assertEqual(0, HybridFixedFloat(0).sign())
        self.assertEqual(1, HybridFixedFloat(1e-30).sign())
        self.assertEqual(0, HybridFixedFloat.NAN.sign())

    def test_bool(self):
        self.assertFalse(HybridFixedFloat(0))
        self.assertFalse(HybridFixedFloat('0.000'))
        self.assertTrue(HybridFixedFloat(1e-30))
        self.assertTrue(HybridFixedFloat.NAN)

    def test_views(self):
        self.assertEqual(0.1, HybridFixedFloat('0.1').as_float())
        self.assertEqual(decimal.Decimal('0.1'), HybridFixedFloat('0.1').as_fixed())
        self.assertEqual(decimal.Decimal(0), HybridFixedFloat(1e-30).as_fixed())
        with self.assertRaises(fixedpoint.FixedPointOverflow):
            HybridFixedFloat(1e30).as_fixed()
        self.assertIs(HybridFixedFloat.Kind.FIXED, HybridFixedFloat(1).kind)


if __name__ == '__main__':
    unittest.main()
