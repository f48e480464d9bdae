from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from .accessors import get_shadow, whole_subunits
from .exceptions import UnknownCurrency
from .money import Money
from .options import get_monetized_attributes
from .resolver import resolve

INVALID_AMOUNT_MESSAGE = _("Must be a valid amount.")
NULL_MESSAGE = models.Field.default_error_messages["null"]
UNKNOWN_CURRENCY_MESSAGE = _("Unknown currency %(code)s.")


def _clean_subunit_column(instance, attribute):
    """Integer check on the backing column, replaces Django's own field cleaning."""
    field = type(instance)._meta.get_field(attribute.subunit_column)
    raw = getattr(instance, field.attname)

    if raw in field.empty_values:
        if attribute.allow_nil:
            return
        raise ValidationError(attribute.message or NULL_MESSAGE, code="null")

    # whole numbers only, to_python would truncate 12.7 to 12
    value = whole_subunits(raw)
    if value is None:
        raise ValidationError(attribute.message or INVALID_AMOUNT_MESSAGE, code="invalid")

    try:
        field.run_validators(value)
    except ValidationError as exc:
        if attribute.message:
            raise ValidationError(attribute.message, code=exc.error_list[0].code)
        raise
    # Same as Model.clean_fields: keep the cleaned value
    setattr(instance, field.attname, value)


def _clean_amount(instance, attribute):
    """Checks on the public attribute: pending input, then numericality bounds."""
    message = attribute.message
    shadow = get_shadow(instance, attribute)
    if shadow is not None:
        if shadow.error is not None:
            raise ValidationError(message or INVALID_AMOUNT_MESSAGE, code="invalid")
        if shadow.absent:
            if attribute.allow_nil:
                return
            raise ValidationError(message or NULL_MESSAGE, code="null")

    cents = whole_subunits(getattr(instance, attribute.subunit_column))
    if cents is None:
        # empty or malformed, reported on the column itself
        return
    # raises UnknownCurrency for a row currency the registry does not know
    currency = resolve(instance, attribute)
    if not attribute.validators:
        return

    amount = Money(cents, currency).amount
    errors = []
    for validator in attribute.validators:
        try:
            validator(amount)
        except ValidationError as exc:
            if message:
                # one custom message is enough, whichever bound failed
                raise ValidationError(message, code=exc.code)
            errors.append(exc)
    if errors:
        raise ValidationError(errors)


def clean_attribute(instance, attribute, exclude=()):
    """Validate one monetized attribute, returns {field name: [ValidationError, ...]}."""
    errors = {}
    if attribute.subunit_column not in exclude:
        try:
            _clean_subunit_column(instance, attribute)
        except ValidationError as exc:
            errors[attribute.subunit_column] = exc.error_list
    if attribute.accessor_name not in exclude:
        try:
            _clean_amount(instance, attribute)
        except ValidationError as exc:
            errors[attribute.accessor_name] = exc.error_list
        except UnknownCurrency as exc:
            if attribute.message:
                error = ValidationError(attribute.message, code="invalid")
            else:
                error = ValidationError(
                    UNKNOWN_CURRENCY_MESSAGE, code="invalid", params={"code": exc.code}
                )
            errors[attribute.instance_currency_name] = [error]
    return errors


def clean_monetized(instance, exclude=()):
    """Validate every monetized attribute of `instance`."""
    errors = {}
    for attribute in get_monetized_attributes(type(instance)).values():
        for name, error_list in clean_attribute(instance, attribute, exclude).items():
            # attributes sharing a currency column report a bad code once
            bucket = errors.setdefault(name, [])
            bucket.extend(error for error in error_list if error not in bucket)
    return errors
