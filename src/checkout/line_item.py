"""Priced line items derived from a product and quantity for one pricing pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple, Tuple

from .product import Product

if TYPE_CHECKING:
    from .discount import Discount


class AppliedDiscount(NamedTuple):
    """Bookkeeping record for one discount that changed a line item's total."""

    discount: "Discount"
    discounted_quantity: int
    amount: int


@dataclass(frozen=True)
class LineItem:
    """One product row of a priced cart.

    Invariant:
    - ``subtotal`` is fixed at ``price_in_cents * quantity``.
    - ``total`` equals ``subtotal`` minus the sum of ``discounts`` amounts.
    - ``discounts`` lists the most recently applied record first.
    """

    product: Product
    quantity: int
    subtotal: int
    total: int
    discounts: Tuple[AppliedDiscount, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, product: Product, quantity: int = 1) -> "LineItem":
        """Build the undiscounted line item.

        >>> item = LineItem.build(Product("P1", "Product 1", 1000), 3)
        >>> item.subtotal, item.total, item.discounts
        (3000, 3000, ())
        """
        amount = product.price_in_cents * quantity
        return cls(product=product, quantity=quantity, subtotal=amount, total=amount)

    @property
    def savings(self) -> int:
        return self.subtotal - self.total
