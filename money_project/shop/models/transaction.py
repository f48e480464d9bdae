from django.db import models
from monetize.attributes import monetize
from monetize.models import MonetizableModel
from monetize.money import Money


# ---------- Transaction ----------
@monetize("amount_cents")
@monetize("tax_cents")
class Transaction(MonetizableModel):  # A payment whose row carries its own currency
    amount_cents = models.IntegerField()
    tax_cents = models.IntegerField()
    # Row-level currency: wins over every declared currency when set
    currency = models.CharField(max_length=3, null=True, blank=True)

    def __str__(self):
        return f"Transaction {self.pk}: {self.amount}"

    @property
    def total(self):
        """Amount plus tax, in the transaction's currency."""
        if self.amount_cents is None or self.tax_cents is None:
            return None
        return Money(self.amount_cents + self.tax_cents, self.amount.currency)
