from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """Immutable catalogue entry; equality and hashing use every field.

    >>> tea = Product(id="GR1", name="Green Tea", price_in_cents=311)
    >>> tea == Product("GR1", "Green Tea", 311)
    True
    """

    id: str
    name: str
    price_in_cents: int
