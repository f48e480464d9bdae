from decimal import Decimal, InvalidOperation

from django.core.validators import BaseValidator, MaxValueValidator, MinValueValidator
from django.utils.translation import gettext_lazy as _

from .exceptions import ConfigurationError


# MinValueValidator / MaxValueValidator cover the inclusive bounds,
# the strict and equality checks below follow the same pattern.
class GreaterThanValidator(BaseValidator):
    message = _("Ensure this value is greater than %(limit_value)s.")
    code = "greater_than"

    def compare(self, a, b):
        return a <= b


class LessThanValidator(BaseValidator):
    message = _("Ensure this value is less than %(limit_value)s.")
    code = "less_than"

    def compare(self, a, b):
        return a >= b


class EqualToValidator(BaseValidator):
    message = _("Ensure this value is equal to %(limit_value)s.")
    code = "equal_to"

    def compare(self, a, b):
        return a != b


class OtherThanValidator(BaseValidator):
    message = _("Ensure this value is other than %(limit_value)s.")
    code = "other_than"

    def compare(self, a, b):
        return a == b


# numericality option -> validator class
NUMERICALITY_VALIDATORS = {
    "greater_than": GreaterThanValidator,
    "greater_than_or_equal_to": MinValueValidator,
    "less_than": LessThanValidator,
    "less_than_or_equal_to": MaxValueValidator,
    "equal_to": EqualToValidator,
    "other_than": OtherThanValidator,
}


def build_validators(numericality):
    """
    Turn a numericality mapping into (validators, message).

        build_validators({"greater_than_or_equal_to": 0, "message": "Too low"})

    Limits are compared against the amount in major units (Decimal).
    `message`, when given, replaces every error message of the attribute.
    """
    numericality = dict(numericality or {})
    message = numericality.pop("message", None)

    validators = []
    for key, limit in numericality.items():
        try:
            validator_class = NUMERICALITY_VALIDATORS[key]
        except KeyError:
            raise ConfigurationError(f"Unknown numericality option {key!r}") from None
        try:
            limit = Decimal(str(limit))
        except InvalidOperation:
            raise ConfigurationError(
                f"numericality option {key!r} needs a number, got {limit!r}"
            ) from None
        validators.append(validator_class(limit))
    return tuple(validators), message
