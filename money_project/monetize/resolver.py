"""
Pick the currency of a monetized attribute on one instance.

Sources are tried in this order, the first one holding a value wins:

    1. the currency of a Money being assigned (writes only)
    2. the row's own currency (the `currency` attribute, or the one named
       by with_model_currency)
    3. the currency registered on the model class
    4. the attribute's with_currency (a code, or a callable on the instance)
    5. the registry default

A wrong order silently prices rows in the wrong currency, so keep it as is.
"""
from .currency import default_currency, lookup
from .options import get_model_currency


def _is_absent(value):
    return value is None or (isinstance(value, str) and not value.strip())


def instance_currency(instance, attribute):
    """Raw row-level currency value of `instance`, or None when unset."""
    name = attribute.instance_currency_name
    value = getattr(instance, name, None)
    if callable(value):
        # a plain method such as `def currency(self): return "USD"`
        value = value()
    if value is not None and not isinstance(value, str):
        # Currency, or a related currency row exposing `code`
        value = getattr(value, "code", value)
    return None if _is_absent(value) else value


def resolve(instance, attribute, explicit=None):
    # 1. explicit currency carried by the assigned value
    if explicit is not None:
        return lookup(explicit)

    # 2. row-level currency
    row_currency = instance_currency(instance, attribute)
    if row_currency is not None:
        return lookup(row_currency)

    # 3. currency registered on the model
    model_currency = get_model_currency(type(instance))
    if model_currency is not None:
        return model_currency

    # 4. currency configured on the attribute
    if attribute.currency is not None:
        return attribute.currency
    if attribute.currency_method is not None:
        configured = attribute.currency_method(instance)
        if not _is_absent(configured):
            return lookup(configured)

    # 5. global default
    return default_currency()
