from django.conf import settings

# Defaults for the MONETIZE settings dict, e.g. in settings.py:
#
#   MONETIZE = {
#       "DEFAULT_CURRENCY": "EUR",
#       "CURRENCIES": [{"code": "XTS", "name": "Testing", "exponent": 3}],
#   }
DEFAULTS = {
    # currency used when no other source applies
    "DEFAULT_CURRENCY": "USD",
    # extra currencies registered on top of the built-in ISO table
    "CURRENCIES": (),
    # let the active locale's number format override the currency's own
    "USE_LOCALE_FORMATS": True,
    # suffix stripped from a subunit column to name its accessor
    "SUBUNIT_SUFFIX": "_cents",
}


def get_setting(name):
    """Read one MONETIZE setting, falling back to DEFAULTS."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown MONETIZE setting {name!r}")
    user_settings = getattr(settings, "MONETIZE", None) or {}
    return user_settings.get(name, DEFAULTS[name])
