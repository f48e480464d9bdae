# Built-in currency table.
# (code, name, symbol, exponent, decimal_mark, thousands_separator, priority)
# Separators and priorities follow the conventions of the money library the
# monetized columns were designed around; a lower priority wins when several
# currencies share a symbol ("$" -> USD).
CURRENCY_TABLE = (
    ("USD", "United States Dollar", "$", 2, ".", ",", 1),
    ("EUR", "Euro", "€", 2, ",", ".", 2),
    ("GBP", "British Pound", "£", 2, ".", ",", 3),
    ("AUD", "Australian Dollar", "$", 2, ".", ",", 4),
    ("CAD", "Canadian Dollar", "$", 2, ".", ",", 5),
    ("JPY", "Japanese Yen", "¥", 0, ".", ",", 6),
    ("CHF", "Swiss Franc", "CHF", 2, ".", ",", 100),
    ("CNY", "Chinese Renminbi Yuan", "¥", 2, ".", ",", 100),
    ("SEK", "Swedish Krona", "kr", 2, ",", " ", 100),
    ("NOK", "Norwegian Krone", "kr", 2, ",", ".", 100),
    ("DKK", "Danish Krone", "kr.", 2, ",", ".", 100),
    ("PLN", "Polish Złoty", "zł", 2, ",", " ", 100),
    ("CZK", "Czech Koruna", "Kč", 2, ",", " ", 100),
    ("HUF", "Hungarian Forint", "Ft", 2, ",", " ", 100),
    ("RUB", "Russian Ruble", "₽", 2, ",", ".", 100),
    ("TRY", "Turkish Lira", "₺", 2, ",", ".", 100),
    ("BRL", "Brazilian Real", "R$", 2, ",", ".", 100),
    ("MXN", "Mexican Peso", "$", 2, ".", ",", 100),
    ("ARS", "Argentine Peso", "$", 2, ",", ".", 100),
    ("CLP", "Chilean Peso", "$", 0, ",", ".", 100),
    ("INR", "Indian Rupee", "₹", 2, ".", ",", 100),
    ("KRW", "South Korean Won", "₩", 0, ".", ",", 100),
    ("HKD", "Hong Kong Dollar", "$", 2, ".", ",", 100),
    ("SGD", "Singapore Dollar", "$", 2, ".", ",", 100),
    ("NZD", "New Zealand Dollar", "$", 2, ".", ",", 100),
    ("ZAR", "South African Rand", "R", 2, ".", ",", 100),
    ("ILS", "Israeli New Sheqel", "₪", 2, ".", ",", 100),
    ("AED", "United Arab Emirates Dirham", "د.إ", 2, ".", ",", 100),
    ("KWD", "Kuwaiti Dinar", "د.ك", 3, ".", ",", 100),
    ("BHD", "Bahraini Dinar", "ب.د", 3, ".", ",", 100),
)
