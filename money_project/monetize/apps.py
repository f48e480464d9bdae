from django.apps import AppConfig


class MonetizeConfig(AppConfig):
    name = "monetize"
    verbose_name = "Monetized attributes"

    # load extra currencies and the default currency from settings.MONETIZE
    def ready(self):
        from .currency import registry

        registry.load_settings()
