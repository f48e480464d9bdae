import logging
from dataclasses import dataclass

from django.core.exceptions import FieldDoesNotExist

from .accessors import install
from .conf import get_setting
from .currency import Currency, lookup
from .exceptions import ConfigurationError, UnknownCurrency
from .models import MonetizableModel
from .options import (get_model_currency, get_monetized_attributes, get_options,
                      register_model_currency)
from .validators import build_validators

logger = logging.getLogger(__name__)

# Column types that can back a monetized attribute
INTEGER_FIELD_TYPES = {
    "IntegerField",
    "BigIntegerField",
    "SmallIntegerField",
    "PositiveIntegerField",
    "PositiveBigIntegerField",
    "PositiveSmallIntegerField",
}

# Row-level currency attribute used when with_model_currency is not given
DEFAULT_INSTANCE_CURRENCY = "currency"


@dataclass(frozen=True, eq=False)
class MonetizedAttribute:
    """
    Declaration of one monetized attribute, e.g. `price` backed by `price_cents`.
    Built once per model by define(); never changes afterwards.
    """

    owner: type
    subunit_column: str
    accessor_name: str
    # with_currency: either a literal currency or a callable(instance)
    currency: Currency = None
    currency_method: object = None
    instance_currency_name: str = DEFAULT_INSTANCE_CURRENCY
    allow_nil: bool = False
    numericality: tuple = ()
    message: str = None
    validators: tuple = ()

    @property
    def before_type_cast_name(self):
        return f"{self.accessor_name}_before_type_cast"

    @property
    def currency_as_string_name(self):
        return f"{self.accessor_name}_currency_as_string"

    @property
    def currency_source(self):
        """
        Which declared currency applies when the row has none, in resolution
        order. Describes the declaring model (`owner`): a currency registered
        only on a subclass that inherits this attribute is not reflected.
        """
        if get_model_currency(self.owner) is not None:
            return "model_registered"
        if self.currency is not None:
            return "explicit_literal"
        if self.currency_method is not None:
            return "explicit_instance_method"
        return "none"

    def __repr__(self):
        return f"<MonetizedAttribute {self.owner.__name__}.{self.accessor_name} ({self.subunit_column})>"


def _subunit_field(owner, subunit_column):
    try:
        field = owner._meta.get_field(subunit_column)
    except FieldDoesNotExist:
        raise ConfigurationError(
            f"{owner.__name__} has no field {subunit_column!r} to monetize"
        ) from None
    if field.get_internal_type() not in INTEGER_FIELD_TYPES:
        raise ConfigurationError(
            f"{owner.__name__}.{subunit_column} is a {field.get_internal_type()}, "
            "monetized columns must be integer fields"
        )
    return field


def _accessor_name(subunit_column):
    suffix = get_setting("SUBUNIT_SUFFIX")
    if not subunit_column.endswith(suffix) or subunit_column == suffix:
        raise ConfigurationError(
            f"Column {subunit_column!r} does not end with {suffix!r}, pass as_= to name the accessor"
        )
    return subunit_column[: -len(suffix)]


def _has_member(owner, name):
    try:
        owner._meta.get_field(name)
        return True
    except FieldDoesNotExist:
        return hasattr(owner, name)


def _configured_currency(with_currency):
    """Split with_currency into (literal currency, callable)."""
    if with_currency is None:
        return None, None
    if callable(with_currency) and not isinstance(with_currency, Currency):
        return None, with_currency
    try:
        return lookup(with_currency), None
    except UnknownCurrency as exc:
        raise ConfigurationError(f"with_currency: {exc}") from exc


def define(
    owner,
    subunit_column,
    *,
    as_=None,
    with_currency=None,
    with_model_currency=None,
    numericality=None,
    allow_nil=False,
    override=False,
):
    """
    Expose the integer column `subunit_column` of `owner` as a Money attribute.

    Installs `<name>`, `<name>_before_type_cast` and `<name>_currency_as_string`
    on the model class and returns the MonetizedAttribute. Raises
    ConfigurationError for anything wrong with the declaration.
    """
    if not (isinstance(owner, type) and issubclass(owner, MonetizableModel)):
        raise ConfigurationError(f"{owner!r} must subclass MonetizableModel to be monetized")

    _subunit_field(owner, subunit_column)
    accessor_name = as_ or _accessor_name(subunit_column)

    options = get_options(owner)
    if accessor_name in options.attributes:
        raise ConfigurationError(f"{owner.__name__}.{accessor_name} is already monetized")

    # One attribute per column, a subclass may only shadow the inherited accessor
    inherited = get_monetized_attributes(owner)
    for existing in inherited.values():
        if existing.subunit_column == subunit_column and existing.accessor_name != accessor_name:
            raise ConfigurationError(
                f"{owner.__name__}.{subunit_column} is already monetized as {existing.accessor_name!r}"
            )

    # Re-declaring an inherited accessor shadows it, anything else must be asked for
    if not override and accessor_name not in inherited:
        for name in (accessor_name, f"{accessor_name}_before_type_cast",
                     f"{accessor_name}_currency_as_string"):
            if _has_member(owner, name):
                raise ConfigurationError(
                    f"{owner.__name__}.{name} already exists, pass override=True to replace it"
                )

    if with_model_currency is not None and not _has_member(owner, with_model_currency):
        raise ConfigurationError(
            f"with_model_currency: {owner.__name__} has no member {with_model_currency!r}"
        )
    instance_currency_name = with_model_currency or DEFAULT_INSTANCE_CURRENCY
    if instance_currency_name != DEFAULT_INSTANCE_CURRENCY and _has_member(owner, DEFAULT_INSTANCE_CURRENCY):
        # Two row-level currencies would make the resolution order ambiguous
        raise ConfigurationError(
            f"{owner.__name__} has both {DEFAULT_INSTANCE_CURRENCY!r} and "
            f"with_model_currency={instance_currency_name!r}"
        )

    currency, currency_method = _configured_currency(with_currency)
    validators, message = build_validators(numericality)

    attribute = MonetizedAttribute(
        owner=owner,
        subunit_column=subunit_column,
        accessor_name=accessor_name,
        currency=currency,
        currency_method=currency_method,
        instance_currency_name=instance_currency_name,
        allow_nil=allow_nil,
        numericality=tuple(sorted((numericality or {}).items())),
        message=message,
        validators=validators,
    )
    options.attributes[accessor_name] = attribute
    install(owner, attribute)
    logger.debug("Monetized %s.%s as %r", owner.__name__, subunit_column, accessor_name)
    return attribute


# ---------- class decorators ----------
def monetize(subunit_column, **options):
    """
    @monetize("price_cents", allow_nil=True)
    class Product(MonetizableModel): ...
    """

    def decorator(owner):
        define(owner, subunit_column, **options)
        return owner

    return decorator


def register_currency(currency):
    """
    @register_currency("usd")
    class Product(MonetizableModel): ...
    """

    def decorator(owner):
        register_model_currency(owner, currency)
        return owner

    return decorator
