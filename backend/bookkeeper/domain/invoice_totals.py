"""Invoice totals — pure derivation of subtotal, tax and total from line items.

Works on anything shaped like a line item: ``InvoiceItem`` entities,
pydantic schemas, or raw form rows as mappings (``tax_rate`` or
``taxRate``). A missing, ``None``, blank or NaN number counts as 0, so a
half-filled form row contributes nothing until it is populated.

No rounding happens here; formatting to two decimals is a display concern
(see ``bookkeeper.application.services.currency``).
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "quantity": ("quantity", "qty"),
    "price": ("price", "unit_price"),
    "tax_rate": ("tax_rate", "taxRate"),
}


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0


def _number(item: Any, name: str) -> float:
    """Read a numeric field from a mapping or an object, defaulting to 0."""
    for alias in _FIELD_ALIASES[name]:
        if isinstance(item, Mapping):
            value = item.get(alias)
        else:
            value = getattr(item, alias, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        number = float(value)
        return 0.0 if math.isnan(number) else number
    return 0.0


def line_amount(item: Any) -> float:
    """Pre-tax amount of one line: quantity × price."""
    return _number(item, "quantity") * _number(item, "price")


def line_tax(item: Any) -> float:
    """Tax on one line: amount × tax_rate / 100."""
    return line_amount(item) * _number(item, "tax_rate") / 100


def calculate_totals(items: Iterable[Any]) -> InvoiceTotals:
    """Derive the totals for a sequence of line items.

    Recomputed from scratch on every call. Values are not range-checked:
    a tax rate above 100 simply yields a larger tax.
    """
    subtotal = 0.0
    tax = 0.0
    for item in items:
        subtotal += line_amount(item)
        tax += line_tax(item)
    return InvoiceTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)
