import logging

from .currency import lookup

logger = logging.getLogger(__name__)

OPTIONS_ATTR = "monetize_options"


class MonetizeOptions:
    """
    Per-model monetize configuration, attached to the model's _meta.

    Holds only what the model itself declared; inherited declarations are
    merged by walking the MRO (see get_monetized_attributes).
    """

    def __init__(self, model):
        self.model = model
        self.currency = None  # model-registered currency
        self.attributes = {}  # accessor_name -> MonetizedAttribute

    def __repr__(self):
        return f"<MonetizeOptions {self.model.__name__}: {sorted(self.attributes)}>"


def _own_options(model):
    # _meta is created per model class by ModelBase, so it is never inherited
    meta = model.__dict__.get("_meta")
    if meta is None:
        return None
    return getattr(meta, OPTIONS_ATTR, None)


def get_options(model):
    """Options declared on `model` itself, created on first use."""
    options = _own_options(model)
    if options is None:
        options = MonetizeOptions(model)
        setattr(model._meta, OPTIONS_ATTR, options)
    return options


def register_model_currency(model, currency):
    """Bind one currency to every monetized attribute of `model` (last write wins)."""
    currency = lookup(currency)
    get_options(model).currency = currency
    logger.debug("Registered %s as model currency of %s", currency, model.__name__)
    return currency


def get_model_currency(model):
    """The currency registered on `model` or its closest ancestor, else None."""
    for klass in model.__mro__:
        options = _own_options(klass)
        if options is not None and options.currency is not None:
            return options.currency
    return None


def get_monetized_attributes(model):
    """
    All monetized attributes of `model`, keyed by accessor name.
    Ancestors come first so a subclass declaration shadows the parent's.
    """
    attributes = {}
    for klass in reversed(model.__mro__):
        options = _own_options(klass)
        if options is not None:
            attributes.update(options.attributes)
    return attributes
