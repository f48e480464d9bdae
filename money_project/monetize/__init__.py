# Expose integer subunit columns of Django models as Money attributes.
#
# Public API (import after Django is set up):
#   monetize.models      MonetizableModel
#   monetize.attributes  define, monetize, register_currency
#   monetize.options     register_model_currency, get_model_currency
#   monetize.currency    registry, lookup, default_currency, set_default_currency
#   monetize.money       Money
#   monetize.parser      parse, to_money
