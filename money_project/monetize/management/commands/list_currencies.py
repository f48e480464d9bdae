from django.core.management.base import BaseCommand, CommandError

from monetize.currency import registry
from monetize.exceptions import UnknownCurrency


class Command(BaseCommand):
    help = "List the registered currencies and the separators used to read amounts."

    # Define command-line arguments
    def add_arguments(self, parser):
        parser.add_argument(
            "--code",
            help="Only show this currency (code or symbol).",
        )
        parser.add_argument(
            "--locale",
            help="Locale used to pick separators (defaults to the active language).",
        )

    def handle(self, *args, **options):
        if options["code"]:
            try:
                currencies = [registry.lookup(options["code"])]
            except UnknownCurrency as exc:
                raise CommandError(str(exc))
        else:
            currencies = registry.all()

        default = registry.default()
        for currency in currencies:
            rules = registry.format_rules(currency, locale=options["locale"])
            marker = "*" if currency == default else " "
            self.stdout.write(
                f"{marker} {currency.code:<4} {currency.symbol:<4} "
                f"exp={currency.exponent} "
                f"decimal={rules.decimal_mark!r} thousands={rules.thousands_separator!r} "
                f"{currency.name}"
            )
        self.stdout.write(self.style.SUCCESS(f"Default currency: {default.code}"))
