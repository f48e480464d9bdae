from decimal import Decimal

import pytest
from django.test import SimpleTestCase
from django.utils import translation

from monetize.currency import FormatRules, lookup
from monetize.exceptions import FormatError
from monetize.money import Money
from monetize.parser import (NO_VALUE, Absent, Numeric, Text, Typed, classify,
                             parse, parse_decimal, to_money)

DOT_DECIMAL = FormatRules(decimal_mark=".", thousands_separator=",")
COMMA_DECIMAL = FormatRules(decimal_mark=",", thousands_separator=".")


class ClassifyTests(SimpleTestCase):

    def test_shapes(self):
        money = Money(100, "USD")
        self.assertEqual(classify(None), Absent(None))
        self.assertEqual(classify("  "), Absent("  "))
        self.assertEqual(classify(money), Typed(money))
        self.assertEqual(classify(12), Numeric(Decimal(12)))
        self.assertEqual(classify(0.1), Numeric(Decimal("0.1")))
        self.assertEqual(classify("12"), Text("12"))

    def test_unsupported_types(self):
        for value in (True, False, [1], {"a": 1}, object()):
            with self.assertRaises(FormatError):
                classify(value)


class ParseNumbersTests(SimpleTestCase):

    def setUp(self):
        self.usd = lookup("USD")

    def test_integers_and_decimals(self):
        self.assertEqual(parse(42, self.usd), 4200)
        self.assertEqual(parse(Decimal("12.34"), self.usd), 1234)
        self.assertEqual(parse(-1, self.usd), -100)

    def test_floats_do_not_drift(self):
        # 1.15 * 100 is 114.99999999999999 in binary floating point
        self.assertEqual(parse(1.15, self.usd), 115)
        self.assertEqual(parse(0.1 + 0.2, self.usd), 30)

    def test_rounds_half_up(self):
        self.assertEqual(parse(Decimal("0.125"), self.usd), 13)
        self.assertEqual(parse(Decimal("-0.125"), self.usd), -13)
        self.assertEqual(parse(Decimal("0.124"), self.usd), 12)

    def test_uses_currency_exponent(self):
        self.assertEqual(parse(42, lookup("JPY")), 42)
        self.assertEqual(parse("1.5", lookup("KWD"), DOT_DECIMAL), 1500)

    def test_non_finite(self):
        for value in (Decimal("NaN"), Decimal("Infinity"), float("inf")):
            with self.assertRaises(FormatError):
                parse(value, self.usd)

    def test_out_of_range(self):
        # scaling past the largest exponent, and more digits than quantize keeps
        for value in (Decimal("9E+999999"), Decimal("1" * 40)):
            with self.subTest(value=value):
                with self.assertRaises(FormatError):
                    parse(value, self.usd)

    def test_money_passes_through(self):
        # the Money keeps its own cents, whatever currency is asked for
        self.assertEqual(parse(Money(3210, "USD"), lookup("JPY")), 3210)

    def test_absent_is_not_an_error(self):
        self.assertIs(parse(None, self.usd), NO_VALUE)
        self.assertIs(parse("", self.usd), NO_VALUE)
        self.assertIs(parse(" \t", self.usd), NO_VALUE)
        self.assertFalse(NO_VALUE)


class ParseStringTests(SimpleTestCase):

    def setUp(self):
        self.usd = lookup("USD")

    def test_valid_dot_decimal(self):
        cases = {
            "42": 4200,
            "12.00": 1200,
            "12,230.24": 1223024,
            "1,234,567.89": 123456789,
            "-123": -12300,
            "+5.5": 550,
            ".5": 50,
            "12.": 1200,
            "  7.25 ": 725,
        }
        for text, cents in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse(text, self.usd, DOT_DECIMAL), cents)

    def test_valid_comma_decimal(self):
        self.assertEqual(parse("12,00", self.usd, COMMA_DECIMAL), 1200)
        self.assertEqual(parse("12.230,24", self.usd, COMMA_DECIMAL), 1223024)

    def test_invalid_strings(self):
        cases = [
            ("...", DOT_DECIMAL),
            ("...", COMMA_DECIMAL),
            ("12.23.24", DOT_DECIMAL),
            ("12.23.24", COMMA_DECIMAL),
            ("12,23.24", DOT_DECIMAL),
            ("12,23.24", COMMA_DECIMAL),
            ("1234,567.00", DOT_DECIMAL),
            (",123.00", DOT_DECIMAL),
            ("12.5a", DOT_DECIMAL),
            ("some text", DOT_DECIMAL),
            ("-", DOT_DECIMAL),
            ("1 2", DOT_DECIMAL),
            ("١٢", DOT_DECIMAL),
        ]
        for text, rules in cases:
            with self.subTest(text=text, rules=rules):
                with self.assertRaises(FormatError) as ctx:
                    parse(text, self.usd, rules)
                self.assertEqual(str(ctx.exception), "invalid decimal format")

    def test_rules_default_to_active_locale(self):
        with translation.override("en-gb"):
            self.assertEqual(parse("12.00", lookup("EUR")), 1200)
        with translation.override("zxsw"):
            # no locale format: EUR's own ',' decimal mark
            self.assertEqual(parse("12,00", lookup("EUR")), 1200)

    def test_parse_decimal(self):
        self.assertEqual(parse_decimal("12,230.24", DOT_DECIMAL), Decimal("12230.24"))
        self.assertEqual(parse_decimal("12.230,24", COMMA_DECIMAL), Decimal("12230.24"))


@pytest.mark.parametrize("locale, text", [("en-gb", "12.00"), ("zxsw", "12,00")])
def test_to_money_uses_locale_format(locale, text):
    with translation.override(locale):
        assert to_money(text, "EUR") == Money(1200, "EUR")


def test_to_money_defaults():
    # EUR is the default currency in the test settings
    assert to_money(42) == Money(4200, "EUR")
    assert to_money("") is None
    money = Money(5, "USD")
    assert to_money(money) is money
