"""Line item and invoice total calculation.

Money is handled as Decimal. Each line's discounted amount and tax are
rounded half-up to cents before being summed, so the stored aggregates
always satisfy ``total == subtotal + tax == sum(line_total)``.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


class InvalidLineItemError(ValueError):
    """Raised when a line cannot produce a non-negative amount"""


def to_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class LineAmounts:
    after_discount: Decimal
    tax: Decimal

    @property
    def total(self) -> Decimal:
        return self.after_discount + self.tax


@dataclass(frozen=True)
class InvoiceTotals:
    lines: List[LineAmounts]
    subtotal: Decimal
    tax: Decimal

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax


def calculate_line(rate: Decimal, qty: int, discount: Decimal, tax_rate: Decimal) -> LineAmounts:
    """
    Compute one line

    after_discount = rate * qty - discount
    tax            = after_discount * tax_rate / 100

    Raises:
        InvalidLineItemError: negative inputs, or discount above rate * qty
    """
    rate = Decimal(rate)
    discount = Decimal(discount)
    tax_rate = Decimal(tax_rate)

    if qty <= 0:
        raise InvalidLineItemError(f"Quantity must be positive, got {qty}")
    if rate < 0 or discount < 0 or tax_rate < 0:
        raise InvalidLineItemError("Rate, discount and tax rate must not be negative")

    gross = rate * qty
    if discount > gross:
        raise InvalidLineItemError(f"Discount {discount} exceeds line amount {gross}")

    after_discount = to_money(gross - discount)
    tax = to_money(after_discount * tax_rate / HUNDRED)
    return LineAmounts(after_discount=after_discount, tax=tax)


def calculate_totals(lines: Iterable[tuple]) -> InvoiceTotals:
    """Compute every line of ``(rate, qty, discount, tax_rate)`` tuples and the aggregates"""
    amounts = [calculate_line(*line) for line in lines]
    subtotal = sum((a.after_discount for a in amounts), Decimal("0.00"))
    tax = sum((a.tax for a in amounts), Decimal("0.00"))
    return InvoiceTotals(lines=amounts, subtotal=subtotal, tax=tax)
