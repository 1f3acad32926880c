"""Cart pricing with batched discount resolution."""

__version__ = "0.1.0"

from .cart import Cart
from .config import CartConfig, build_config
from .discount import Discount, DiscountType, apply_discount
from .errors import (
    CheckoutError,
    ConfigurationError,
    DiscountDefinitionError,
    ResolverContractError,
    UnknownOptionError,
)
from .line_item import AppliedDiscount, LineItem
from .product import Product
from .resolver import DiscountResolver, FunctionResolver, NullResolver, RuleTableResolver, as_resolver

__all__ = [
    "AppliedDiscount",
    "Cart",
    "CartConfig",
    "CheckoutError",
    "ConfigurationError",
    "Discount",
    "DiscountDefinitionError",
    "DiscountResolver",
    "DiscountType",
    "FunctionResolver",
    "LineItem",
    "NullResolver",
    "Product",
    "ResolverContractError",
    "RuleTableResolver",
    "UnknownOptionError",
    "__version__",
    "apply_discount",
    "as_resolver",
    "build_config",
]
