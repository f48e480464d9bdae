from django.core.exceptions import ValidationError
from django.db import models
from django.test.utils import isolate_apps

from monetize.attributes import define
from monetize.models import MonetizableModel
from monetize.options import register_model_currency


def example_model(*declarations, register=None, fields=None, attrs=None,
                  base=MonetizableModel, name="ExampleModel"):
    """
    Build a throwaway model with a nullable `price_cents` column.

    declarations: ("column", {monetize options}) pairs passed to define()
    fields/attrs: extra model fields / plain class attributes
    """
    body = {
        "__module__": __name__,
        "price_cents": models.IntegerField(null=True, blank=True),
    }
    body.update(fields or {})
    body.update(attrs or {})
    if base is not MonetizableModel:
        # subclasses of a throwaway model reuse its columns
        body.pop("price_cents")
        body["Meta"] = type("Meta", (), {"proxy": True})

    # Keep throwaway models out of the real app registry
    with isolate_apps("monetize"):
        model = type(name, (base,), body)

    if register is not None:
        register_model_currency(model, register)
    for column, options in declarations:
        define(model, column, **options)
    return model


def validation_errors(instance):
    """full_clean() the instance and return its message dict ({} when valid)."""
    try:
        instance.full_clean()
    except ValidationError as exc:
        return exc.message_dict
    return {}
