"""Currency lookup and display formatting.

Formatting is presentation only: stored amounts keep full float precision
and are rounded here, half-up, to two decimals.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from bookkeeper.config import get_settings


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


CURRENCIES: tuple[Currency, ...] = (
    Currency("ZAR", "South African Rand", "R"),
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("AUD", "Australian Dollar", "A$"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("INR", "Indian Rupee", "₹"),
    Currency("NGN", "Nigerian Naira", "₦"),
    Currency("KES", "Kenyan Shilling", "KSh"),
    Currency("BWP", "Botswana Pula", "P"),
    Currency("NAD", "Namibian Dollar", "N$"),
)

_BY_CODE = {c.code: c for c in CURRENCIES}


def get_currency(code: str) -> Currency:
    """Look up a currency by ISO code, falling back to the first (ZAR)."""
    return _BY_CODE.get(code.upper(), CURRENCIES[0])


def round_money(amount: float) -> Decimal:
    return Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_currency(amount: float, code: str | None = None) -> str:
    """Format an amount as e.g. ``R34,500.00`` or ``-$12.50``.

    Without a code, the configured ``default_currency`` is used.
    """
    currency = get_currency(code or get_settings().default_currency)
    rounded = round_money(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency.symbol}{abs(rounded):,.2f}"
