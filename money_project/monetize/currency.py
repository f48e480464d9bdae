import logging
from dataclasses import dataclass

from django.conf import settings
from django.utils import formats, translation

from .conf import get_setting
from .exceptions import UnknownCurrency
from .iso4217 import CURRENCY_TABLE

logger = logging.getLogger(__name__)


# ---------- Currency ----------
@dataclass(frozen=True)
class Currency:
    """
    A known currency. Looked up through the registry, never created per row.
    exponent: number of subunit digits (2 -> cents, 0 -> JPY has no subunits)
    """

    code: str
    name: str = ""
    symbol: str = ""
    exponent: int = 2
    decimal_mark: str = "."
    thousands_separator: str = ","
    # lower wins when several currencies share a symbol
    priority: int = 100

    def __post_init__(self):
        if not self.code:
            raise ValueError("Currency code must be set")
        if self.exponent < 0:
            raise ValueError("Currency exponent must be non-negative")
        # Codes are always stored upper case ('usd' -> 'USD')
        object.__setattr__(self, "code", self.code.upper())

    @property
    def subunit_to_unit(self):
        return 10 ** self.exponent

    def __str__(self):
        return self.code

    @classmethod
    def from_dict(cls, data):
        """Build a currency from a MONETIZE["CURRENCIES"] entry."""
        return cls(**data)


@dataclass(frozen=True)
class FormatRules:
    decimal_mark: str
    thousands_separator: str


# ---------- Registry ----------
class CurrencyRegistry:
    """
    Process-wide table of known currencies plus the default currency slot.

    The table and the default are meant to be written while the app loads
    (MonetizeConfig.ready) and only read afterwards. Nothing here is locked:
    changing them while other threads read is unsupported, last writer wins.
    """

    def __init__(self, currencies=()):
        self._by_code = {}
        self._default = None
        for currency in currencies:
            self.register(currency)

    def register(self, currency):
        # Replacing an existing code is allowed (settings may tweak separators)
        self._by_code[currency.code] = currency
        logger.debug("Registered currency %s", currency.code)
        return currency

    def all(self):
        return sorted(self._by_code.values(), key=lambda c: (c.priority, c.code))

    def lookup(self, code_or_symbol):
        """Find a currency by ISO code (any case) or by symbol."""
        if isinstance(code_or_symbol, Currency):
            return code_or_symbol
        if not isinstance(code_or_symbol, str) or not code_or_symbol.strip():
            raise UnknownCurrency(code_or_symbol)

        key = code_or_symbol.strip()
        currency = self._by_code.get(key.upper())
        if currency is not None:
            return currency

        # Fall back to symbols, best priority first ("$" -> USD)
        for currency in self.all():
            if currency.symbol == key:
                return currency
        raise UnknownCurrency(code_or_symbol)

    def default(self):
        if self._default is None:
            # Not set explicitly: take it from settings every time
            return self.lookup(get_setting("DEFAULT_CURRENCY"))
        return self._default

    def set_default(self, currency):
        """Replace the default currency; None goes back to the settings value."""
        self._default = None if currency is None else self.lookup(currency)
        logger.info("Default currency set to %s", self._default or "settings value")

    def format_rules(self, currency, locale=None):
        """
        Separators used to read amounts for `currency`.
        A locale whose format module explicitly defines DECIMAL_SEPARATOR wins,
        otherwise the currency's own separators are used.
        """
        currency = self.lookup(currency)
        if get_setting("USE_LOCALE_FORMATS"):
            lang = locale or translation.get_language() or settings.LANGUAGE_CODE
            for module in formats.get_format_modules(lang):
                decimal_mark = getattr(module, "DECIMAL_SEPARATOR", None)
                if decimal_mark:
                    return FormatRules(
                        decimal_mark=decimal_mark,
                        thousands_separator=getattr(module, "THOUSAND_SEPARATOR", ""),
                    )
        return FormatRules(
            decimal_mark=currency.decimal_mark,
            thousands_separator=currency.thousands_separator,
        )

    def load_settings(self):
        """Register MONETIZE["CURRENCIES"] and check the default currency exists."""
        for data in get_setting("CURRENCIES"):
            self.register(Currency.from_dict(data))
        # fail early on a typo in DEFAULT_CURRENCY
        default = self.default()
        logger.debug("Currency registry loaded, default is %s", default)


def _builtin_currencies():
    for code, name, symbol, exponent, decimal_mark, thousands, priority in CURRENCY_TABLE:
        yield Currency(
            code=code,
            name=name,
            symbol=symbol,
            exponent=exponent,
            decimal_mark=decimal_mark,
            thousands_separator=thousands,
            priority=priority,
        )


registry = CurrencyRegistry(_builtin_currencies())


def lookup(code_or_symbol):
    return registry.lookup(code_or_symbol)


def default_currency():
    return registry.default()


def set_default_currency(currency):
    registry.set_default(currency)


def format_rules(currency, locale=None):
    return registry.format_rules(currency, locale=locale)
