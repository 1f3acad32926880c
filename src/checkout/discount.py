"""Discount rules and the algorithms that apply them to line items.

Two kinds of discount change a line item:

* ``percentage``: a fraction of the unit price, per discounted unit, rounded
  up to the next whole cent in the merchant's favour.
* ``unit_price``: a fixed number of cents off per discounted unit.

Only whole bundles are discounted. With ``bundle_size=2`` and a quantity of 3
the discounted quantity is 2 and the trailing unit pays full price. Any other
discount type is tolerated and leaves the line item untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import ROUND_CEILING, Decimal
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Union

from .errors import DiscountDefinitionError
from .line_item import AppliedDiscount, LineItem
from .product import Product

logger = logging.getLogger(__name__)

__all__ = ["Discount", "DiscountType", "apply_discount", "discounted_quantity"]


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    UNIT_PRICE = "unit_price"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


@dataclass(frozen=True)
class Discount:
    """Immutable description of one discount rule.

    ``minimum_quantity`` and ``products`` describe eligibility and are enforced
    by resolvers; the rule itself only knows how to price a line item.
    ``products`` holds product ids; ``Product`` instances are accepted and
    reduced to their ids.
    """

    name: str
    discount_type: DiscountType
    discount: Union[int, float, Decimal]
    minimum_quantity: int = 1
    bundle_size: int = 1
    products: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.bundle_size, bool) or not isinstance(self.bundle_size, int):
            raise DiscountDefinitionError(
                f"Discount {self.name!r}: bundle_size must be an integer, got {type(self.bundle_size).__name__}"
            )
        if self.bundle_size < 1:
            raise DiscountDefinitionError(
                f"Discount {self.name!r}: bundle_size must be at least 1, got {self.bundle_size}"
            )
        object.__setattr__(self, "discount_type", DiscountType(self.discount_type))
        object.__setattr__(self, "products", _product_ids(self.products))

    def applies_to(self, product: Product, quantity: int) -> bool:
        return product.id in self.products and quantity >= self.minimum_quantity

    def apply(self, line_item: LineItem) -> LineItem:
        return apply_discount(self, line_item)


def _product_ids(products: Iterable[Union[str, Product]]) -> FrozenSet[str]:
    if isinstance(products, (str, Product)):
        products = [products]
    return frozenset(p.id if isinstance(p, Product) else str(p) for p in products)


def discounted_quantity(quantity: int, bundle_size: int) -> int:
    """Largest multiple of ``bundle_size`` not exceeding ``quantity``.

    >>> discounted_quantity(3, 2)
    2
    >>> discounted_quantity(5, 1)
    5
    """
    return quantity - quantity % bundle_size


def _with_discount(line_item: LineItem, discount: Discount, quantity: int, amount: int) -> LineItem:
    logger.debug(
        "Applied discount %r to %s: %s unit(s), %s cent(s) off",
        discount.name,
        line_item.product.id,
        quantity,
        amount,
    )
    return replace(
        line_item,
        total=line_item.total - amount,
        discounts=(AppliedDiscount(discount, quantity, amount),) + line_item.discounts,
    )


def _apply_percentage(discount: Discount, line_item: LineItem) -> LineItem:
    quantity = discounted_quantity(line_item.quantity, discount.bundle_size)
    # Decimal keeps e.g. 100 * 0.07 at exactly 7 before rounding up.
    savings = Decimal(quantity) * Decimal(line_item.product.price_in_cents) * Decimal(str(discount.discount))
    amount = int(savings.to_integral_value(rounding=ROUND_CEILING))
    return _with_discount(line_item, discount, quantity, amount)


def _apply_unit_price(discount: Discount, line_item: LineItem) -> LineItem:
    quantity = discounted_quantity(line_item.quantity, discount.bundle_size)
    return _with_discount(line_item, discount, quantity, quantity * discount.discount)


_APPLIERS: Dict[DiscountType, Callable[[Discount, LineItem], LineItem]] = {
    DiscountType.PERCENTAGE: _apply_percentage,
    DiscountType.UNIT_PRICE: _apply_unit_price,
}


def apply_discount(discount: Discount, line_item: LineItem) -> LineItem:
    """Apply ``discount`` to ``line_item`` and return the updated line item.

    Amounts are computed from the line item's quantity and unit price, so
    several discounts on one line item add up rather than compound.

    Example::

        >>> product = Product("P1", "Product 1", 1000)
        >>> pairs = Discount("25% off pairs", "percentage", 0.25, bundle_size=2)
        >>> item = apply_discount(pairs, LineItem.build(product, 3))
        >>> item.total, item.discounts[0].discounted_quantity, item.discounts[0].amount
        (2500, 2, 500)
        >>> fixed = Discount("5 off pairs", "unit_price", 500, bundle_size=2)
        >>> apply_discount(fixed, LineItem.build(product, 3)).total
        2000
        >>> mystery = Discount("5 off pairs", "unknown", 500, bundle_size=2)
        >>> apply_discount(mystery, LineItem.build(product, 3)).total
        3000
    """
    applier = _APPLIERS.get(discount.discount_type)
    if applier is None:
        logger.debug("Skipping discount %r with unsupported type %s", discount.name, discount.discount_type.value)
        return line_item
    return applier(discount, line_item)
