from django.core.exceptions import ValidationError
from django.db import models

from .accessors import clear_shadows
from .options import get_model_currency, get_monetized_attributes
from .validation import clean_monetized


class MonetizableModel(models.Model):
    """
    Abstract base for models with monetized integer columns.

    - subunit columns are validated by their monetized attribute instead of
      Django's default field cleaning
    - every full_clean() ends by clearing the before-type-cast values,
      whether validation passed or not
    """

    class Meta:
        abstract = True

    @classmethod
    def monetized_attributes(cls):
        return get_monetized_attributes(cls)

    @classmethod
    def registered_currency(cls):
        return get_model_currency(cls)

    def clean_fields(self, exclude=None):
        exclude = set(exclude or ())
        attributes = get_monetized_attributes(type(self)).values()
        subunit_columns = {attribute.subunit_column for attribute in attributes}

        errors = {}
        try:
            super().clean_fields(exclude=exclude | subunit_columns)
        except ValidationError as e:
            errors = e.update_error_dict(errors)

        for name, error_list in clean_monetized(self, exclude).items():
            errors.setdefault(name, []).extend(error_list)

        if errors:
            raise ValidationError(errors)

    def full_clean(self, *args, **kwargs):
        try:
            super().full_clean(*args, **kwargs)
        finally:
            # runs after clean(), validate_unique() and validate_constraints()
            clear_shadows(self)
