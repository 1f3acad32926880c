"""Discount resolvers: batched lookup of the rules that apply to a cart.

A resolver receives every ``(product, quantity)`` pair of a cart in one call
and returns a mapping from pair to the ordered rules that apply to it. This
lets an implementation run one bulk query instead of one per product. Pairs
missing from the mapping get no discounts.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Protocol, Sequence, Tuple, runtime_checkable

from .discount import Discount
from .errors import ConfigurationError
from .product import Product

logger = logging.getLogger(__name__)

__all__ = [
    "CartEntry",
    "DiscountResolver",
    "FunctionResolver",
    "NullResolver",
    "ResolvedDiscounts",
    "RuleTableResolver",
    "as_resolver",
]

CartEntry = Tuple[Product, int]
ResolvedDiscounts = Mapping[CartEntry, Sequence[Discount]]


@runtime_checkable
class DiscountResolver(Protocol):
    def resolve(self, items: Sequence[CartEntry]) -> ResolvedDiscounts:
        ...


class NullResolver:
    """Resolver used when none is configured: nothing is discounted."""

    def resolve(self, items: Sequence[CartEntry]) -> ResolvedDiscounts:
        return {}

    def __repr__(self) -> str:
        return "NullResolver()"


class FunctionResolver:
    """Adapts a plain callable with the resolver signature."""

    def __init__(self, func: Callable[[Sequence[CartEntry]], ResolvedDiscounts]):
        self.func = func

    def resolve(self, items: Sequence[CartEntry]) -> ResolvedDiscounts:
        return self.func(items)

    def __repr__(self) -> str:
        return f"FunctionResolver({getattr(self.func, '__qualname__', self.func)!r})"


class RuleTableResolver:
    """Resolves from an in-memory list of rules.

    A rule applies to a pair when the product's id is one of the rule's
    products and the quantity reaches ``minimum_quantity``. Matching rules keep
    the order they were given in.

    >>> tea = Product("GR1", "Green Tea", 311)
    >>> bogof = Discount("BOGOF", "percentage", 0.5, bundle_size=2, products={"GR1"})
    >>> RuleTableResolver([bogof]).resolve([(tea, 2)])[(tea, 2)] == [bogof]
    True
    """

    def __init__(self, discounts: Iterable[Discount]):
        self.discounts: Tuple[Discount, ...] = tuple(discounts)

    def resolve(self, items: Sequence[CartEntry]) -> Dict[CartEntry, List[Discount]]:
        resolved = {}
        for product, quantity in items:
            resolved[(product, quantity)] = [d for d in self.discounts if d.applies_to(product, quantity)]
        logger.debug("Resolved %d rule(s) against %d cart entries", len(self.discounts), len(items))
        return resolved


def as_resolver(value) -> DiscountResolver:
    """Normalize a configured resolver option into a ``DiscountResolver``.

    Accepts ``None`` (no discounts), an object with a ``resolve`` method, or a
    plain callable.
    """
    if value is None:
        return NullResolver()
    if isinstance(value, DiscountResolver):
        return value
    if callable(value):
        return FunctionResolver(value)
    raise ConfigurationError(
        f"discount_resolver must be a resolver or a callable, got {type(value).__name__}"
    )
