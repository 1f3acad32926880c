"""Cart engine: product quantities priced through a batched discount resolver.

A cart is an immutable snapshot. ``add_product`` returns a new cart and leaves
the original alone, so older snapshots can be priced from other threads
without locking. Pricing calls the configured resolver once with every
``(product, quantity)`` pair and applies each pair's discounts in the order
the resolver returned them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field, replace
from functools import reduce
from types import MappingProxyType
from typing import Any, List, Mapping, Sequence

from .config import build_config
from .discount import Discount, apply_discount
from .errors import ResolverContractError
from .line_item import LineItem
from .product import Product
from .resolver import DiscountResolver, NullResolver, ResolvedDiscounts

logger = logging.getLogger(__name__)

__all__ = ["Cart"]


@dataclass(frozen=True)
class Cart:
    products: Mapping[Product, int] = field(default_factory=dict)
    discount_resolver: DiscountResolver = field(default_factory=NullResolver)

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", MappingProxyType(dict(self.products)))

    @classmethod
    def new(cls, **options: Any) -> "Cart":
        """Create an empty cart.

        Options:
            discount_resolver: a ``DiscountResolver`` or a callable taking the
                list of ``(product, quantity)`` pairs. Defaults to no discounts.

        >>> Cart.new().calculate_total()
        0
        """
        config = build_config(options)
        return cls(discount_resolver=config.discount_resolver)

    def __len__(self) -> int:
        return len(self.products)

    def quantity_of(self, product: Product) -> int:
        return self.products.get(product, 0)

    def add_product(self, product: Product, quantity: int = 1) -> "Cart":
        """Return a new cart with ``quantity`` more of ``product``.

        >>> tea = Product("GR1", "Green Tea", 311)
        >>> cart = Cart.new().add_product(tea).add_product(tea, 2)
        >>> cart.quantity_of(tea)
        3
        """
        products = dict(self.products)
        products[product] = products.get(product, 0) + quantity
        return replace(self, products=products)

    def list_line_items(self) -> List[LineItem]:
        """Price every product in the cart with its resolved discounts applied."""
        resolved = self._resolve_discounts()
        return [
            self._line_item(product, quantity, resolved.get((product, quantity), ()))
            for product, quantity in self.products.items()
        ]

    def calculate_total(self) -> int:
        return sum(item.total for item in self.list_line_items())

    def _resolve_discounts(self) -> ResolvedDiscounts:
        items = list(self.products.items())
        logger.debug("Resolving discounts for %d product(s) via %r", len(items), self.discount_resolver)
        resolved = self.discount_resolver.resolve(items)
        if not isinstance(resolved, MappingABC):
            raise ResolverContractError(
                f"{self.discount_resolver!r} returned {type(resolved).__name__}, expected a mapping"
            )
        return resolved

    @staticmethod
    def _line_item(product: Product, quantity: int, discounts: Sequence[Discount]) -> LineItem:
        return reduce(lambda item, discount: apply_discount(discount, item), discounts, LineItem.build(product, quantity))
