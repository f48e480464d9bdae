"""
Turn raw input into a whole number of subunits.

Every value handed to a monetized setter is first classified into one of
four shapes, then converted:

    Absent   None or a blank string       -> NO_VALUE (not an error)
    Typed    an existing Money            -> its cents, currency untouched
    Numeric  int / float / Decimal        -> amount * 10**exponent, rounded
    Text     any other string             -> read with the locale's separators

Rounding is ROUND_HALF_UP (nearest subunit, ties away from zero), so
"0.125" USD is 13 cents and "-0.125" is -13.
"""
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow

from .currency import default_currency, format_rules, lookup
from .exceptions import FormatError
from .money import Money

_DIGITS = re.compile(r"[0-9]+")


class _NoValue:
    """Marker for input that means 'no amount' (None, '', '   ')."""

    def __repr__(self):
        return "NO_VALUE"

    def __bool__(self):
        return False


NO_VALUE = _NoValue()


# ---------- Input shapes ----------
@dataclass(frozen=True)
class Absent:
    raw: object = None


@dataclass(frozen=True)
class Typed:
    money: Money


@dataclass(frozen=True)
class Numeric:
    value: Decimal


@dataclass(frozen=True)
class Text:
    value: str


def classify(raw):
    """Sort raw input into Absent / Typed / Numeric / Text."""
    if raw is None:
        return Absent(raw)
    if isinstance(raw, Money):
        return Typed(raw)
    # checked before int: True/False are ints
    if isinstance(raw, bool):
        raise FormatError(raw)
    if isinstance(raw, (int, Decimal)):
        return Numeric(Decimal(raw))
    if isinstance(raw, float):
        # str() keeps the short repr: 0.1 -> '0.1', not 0.1000000000000000055...
        return Numeric(Decimal(str(raw)))
    if isinstance(raw, str):
        if not raw.strip():
            return Absent(raw)
        return Text(raw)
    raise FormatError(raw)


# ---------- Conversion ----------
def to_subunits(amount, currency):
    """Scale a major-unit Decimal to whole subunits of `currency`."""
    if not amount.is_finite():
        raise FormatError(amount)
    try:
        scaled = amount.scaleb(currency.exponent)
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except (InvalidOperation, Overflow):
        # out of the decimal context's digit or exponent range
        raise FormatError(amount)


def parse_decimal(text, rules):
    """
    Read a formatted number like '12,230.24' into a Decimal.

    At most one decimal mark. Thousands separators may only appear before it,
    the first group has 1-3 digits and every following group exactly 3.
    """
    original = text
    text = text.strip()
    sign = ""
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:].strip()

    decimal_mark = rules.decimal_mark
    thousands = rules.thousands_separator

    if text.count(decimal_mark) > 1:
        raise FormatError(original)
    integer, _, fraction = text.partition(decimal_mark)

    if thousands and thousands in fraction:
        # e.g. '12,23.24' when ',' is the decimal mark
        raise FormatError(original)
    if fraction and not _DIGITS.fullmatch(fraction):
        raise FormatError(original)

    groups = integer.split(thousands) if thousands and integer else [integer]
    if len(groups) > 1:
        head, tail = groups[0], groups[1:]
        if not (_DIGITS.fullmatch(head) and len(head) <= 3):
            raise FormatError(original)
        if any(len(group) != 3 or not _DIGITS.fullmatch(group) for group in tail):
            raise FormatError(original)
    elif integer and not _DIGITS.fullmatch(integer):
        raise FormatError(original)

    digits = "".join(groups)
    if not digits and not fraction:
        # nothing but separators / a sign
        raise FormatError(original)

    try:
        return Decimal(f"{sign}{digits or '0'}.{fraction or '0'}")
    except InvalidOperation:
        raise FormatError(original)


def parse(raw, currency, rules=None):
    """
    Convert `raw` to a whole number of subunits of `currency`.

    Returns NO_VALUE for absent input and raises FormatError when the input
    cannot be read. A Money is self-describing: its cents come back as they
    are, whatever `currency` says.
    """
    value = classify(raw)
    if isinstance(value, Absent):
        return NO_VALUE
    if isinstance(value, Typed):
        return value.money.cents

    currency = lookup(currency)
    if isinstance(value, Numeric):
        return to_subunits(value.value, currency)
    if isinstance(value, Text):
        if rules is None:
            rules = format_rules(currency)
        return to_subunits(parse_decimal(value.value, rules), currency)
    raise FormatError(raw)


def to_money(raw, currency=None):
    """
    Build a Money from raw input using the active locale's number format.
    to_money("12.00") -> Money(1200, default currency); blank -> None.
    """
    if isinstance(raw, Money):
        return raw
    currency = lookup(currency) if currency is not None else default_currency()
    cents = parse(raw, currency)
    if cents is NO_VALUE:
        return None
    return Money(cents, currency)
