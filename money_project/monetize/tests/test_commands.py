from io import StringIO

from django.core.management import CommandError, call_command
from django.test import SimpleTestCase


class ListCurrenciesCommandTests(SimpleTestCase):

    def run_command(self, *args):
        out = StringIO()
        call_command("list_currencies", *args, stdout=out)
        return out.getvalue()

    def test_lists_registry_and_default(self):
        output = self.run_command()
        self.assertIn("USD", output)
        self.assertIn("JPY", output)
        # default currency is starred
        self.assertIn("* EUR", output)
        self.assertIn("Default currency: EUR", output)

    def test_single_currency_with_locale_rules(self):
        output = self.run_command("--code", "eur", "--locale", "zxsw")
        self.assertIn("decimal=','", output)
        self.assertNotIn("USD", output.splitlines()[0])

        output = self.run_command("--code", "eur", "--locale", "en-gb")
        self.assertIn("decimal='.'", output)

    def test_unknown_code(self):
        with self.assertRaises(CommandError):
            self.run_command("--code", "XYZ")
