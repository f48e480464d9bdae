from django.db import models
from monetize.attributes import monetize, register_currency
from monetize.models import MonetizableModel


# ---------- DummyProduct ----------
# Rows without a currency fall back to GBP
@register_currency("gbp")
@monetize("price_cents")
class DummyProduct(MonetizableModel):
    price_cents = models.IntegerField()
    currency = models.CharField(max_length=3, null=True, blank=True)

    def __str__(self):
        return f"DummyProduct {self.pk}"


# ---------- Product ----------
@register_currency("usd")
@monetize("price_cents")
@monetize("discount", as_="discount_value")  # column without a _cents suffix
@monetize(
    "bonus_cents",
    numericality={
        "greater_than_or_equal_to": 0,
        "less_than_or_equal_to": 100,
        "message": "Must be between 0 and 100",
    },
)
@monetize("optional_price_cents", allow_nil=True)
class Product(MonetizableModel):  # Every amount is in USD, no currency column
    price_cents = models.IntegerField()
    discount = models.IntegerField()
    bonus_cents = models.IntegerField()
    optional_price_cents = models.IntegerField(null=True, blank=True)

    def __str__(self):
        return f"Product {self.pk}"
