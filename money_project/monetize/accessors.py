import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from django.core.exceptions import FieldDoesNotExist

from .exceptions import FormatError
from .money import Money
from .parser import Absent, Typed, classify, parse
from .resolver import resolve

logger = logging.getLogger(__name__)

# instance.__dict__ key holding the before-coercion values
SHADOW_ATTR = "_monetize_shadows"


@dataclass(frozen=True)
class Shadow:
    """Last raw value given to a monetized setter, kept until the next validation."""

    raw: object
    error: FormatError = None
    absent: bool = False


# ---------- shadow values ----------
def get_shadow(instance, attribute):
    return instance.__dict__.get(SHADOW_ATTR, {}).get(attribute.accessor_name)


def _store_shadow(instance, attribute, shadow):
    instance.__dict__.setdefault(SHADOW_ATTR, {})[attribute.accessor_name] = shadow


def clear_shadows(instance):
    """
    Forget every before-coercion value of `instance`.
    MonetizableModel.full_clean() calls this after each validation pass; code
    validating by other means must call it once done.
    """
    instance.__dict__.pop(SHADOW_ATTR, None)


def before_type_cast(instance, attribute):
    shadow = get_shadow(instance, attribute)
    return None if shadow is None else shadow.raw


# ---------- getter / setter ----------
def whole_subunits(value):
    """`value` as an int when it holds a whole number of subunits, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value)) if isinstance(value, (str, float)) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not number.is_finite() or number != number.to_integral_value():
        return None
    return int(number)


def get_money(instance, attribute):
    """
    Money view of the subunit column, None when the column is empty.
    A column holding something other than a whole number (e.g. 12.7 or "foo"
    written directly) also reads as None until validation reports it.
    """
    cents = whole_subunits(getattr(instance, attribute.subunit_column))
    if cents is None:
        return None
    return Money(cents, resolve(instance, attribute))


def _write_instance_currency(instance, attribute, currency):
    # Only a real column is written, a method or property is left alone
    try:
        field = type(instance)._meta.get_field(attribute.instance_currency_name)
    except FieldDoesNotExist:
        return
    if field.concrete and not field.is_relation:
        setattr(instance, field.attname, currency.code)


def set_money(instance, attribute, raw):
    """
    Assign raw input to the subunit column.

    Never raises for bad input: the failure is kept on the shadow value and
    reported by the next validation pass, the column keeps its old value.
    """
    _store_shadow(instance, attribute, Shadow(raw))

    try:
        value = classify(raw)
    except FormatError as exc:
        logger.debug("Rejected %r for %s: %s", raw, attribute, exc)
        _store_shadow(instance, attribute, Shadow(raw, error=exc))
        return

    if isinstance(value, Absent):
        _store_shadow(instance, attribute, Shadow(raw, absent=True))
        setattr(instance, attribute.subunit_column, None)
        return

    # A Money brings its own currency and skips resolution
    explicit = value.money.currency if isinstance(value, Typed) else None
    currency = resolve(instance, attribute, explicit)
    try:
        cents = parse(raw, currency)
    except FormatError as exc:
        logger.debug("Rejected %r for %s: %s", raw, attribute, exc)
        _store_shadow(instance, attribute, Shadow(raw, error=exc))
        return

    setattr(instance, attribute.subunit_column, cents)
    if explicit is not None:
        _write_instance_currency(instance, attribute, explicit)


def currency_as_string(instance, attribute):
    return resolve(instance, attribute).code


def install(owner, attribute):
    """Put the accessor properties of `attribute` on the model class."""
    setattr(
        owner,
        attribute.accessor_name,
        property(
            lambda self: get_money(self, attribute),
            lambda self, raw: set_money(self, attribute, raw),
            doc=f"Money view of {attribute.subunit_column}.",
        ),
    )
    setattr(
        owner,
        attribute.before_type_cast_name,
        property(lambda self: before_type_cast(self, attribute)),
    )
    setattr(
        owner,
        attribute.currency_as_string_name,
        property(lambda self: currency_as_string(self, attribute)),
    )
    # Options caches the property names accepted by Model(**kwargs)
    owner._meta.__dict__.pop("_property_names", None)
