from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import UnknownOptionError
from .resolver import DiscountResolver, NullResolver, as_resolver


KNOWN_OPTIONS: tuple[str, ...] = ("discount_resolver",)


@dataclass(frozen=True)
class CartConfig:
    discount_resolver: DiscountResolver = field(default_factory=NullResolver)


def build_config(options: Mapping[str, Any] | None = None) -> CartConfig:
    """Validate cart constructor options and build a ``CartConfig``.

    Raises:
        UnknownOptionError: if any key is not in ``KNOWN_OPTIONS``.
        ConfigurationError: if ``discount_resolver`` is neither a resolver nor callable.
    """

    options = dict(options or {})
    unknown = sorted(key for key in options if key not in KNOWN_OPTIONS)
    if unknown:
        raise UnknownOptionError(unknown, KNOWN_OPTIONS)

    return CartConfig(discount_resolver=as_resolver(options.get("discount_resolver")))
