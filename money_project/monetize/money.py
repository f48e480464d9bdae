from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency, lookup


@dataclass(frozen=True)
class Money:
    """
    Immutable amount of money stored as whole subunits (cents).

        Money(4200, "EUR")  # 42.00 EUR
        Money(4200, "EUR") == Money(4200, lookup("eur"))  # True
    """

    cents: int
    currency: Currency

    def __post_init__(self):
        # bool is an int subclass but never a valid amount
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money needs a whole number of subunits, got {self.cents!r}")
        if not isinstance(self.currency, Currency):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "currency", lookup(self.currency))

    @property
    def amount(self):
        """Amount in major units, e.g. Decimal('42.00')."""
        return Decimal(self.cents).scaleb(-self.currency.exponent)

    @property
    def currency_as_string(self):
        return self.currency.code

    def __str__(self):
        return f"{self.amount} {self.currency.code}"
