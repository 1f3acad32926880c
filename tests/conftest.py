import logging

import pytest

from checkout import Cart, Discount, DiscountType, Product, RuleTableResolver


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="checkout")


@pytest.fixture
def products():
    return {
        "green_tea": Product(id="GR1", name="Green Tea", price_in_cents=311),
        "strawberries": Product(id="SR1", name="Strawberries", price_in_cents=500),
        "coffee": Product(id="CF1", name="Coffee", price_in_cents=1123),
    }


@pytest.fixture
def discounts(products):
    return [
        Discount(
            name="Buy One Get One Free",
            discount_type=DiscountType.PERCENTAGE,
            discount=0.5,
            minimum_quantity=1,
            bundle_size=2,
            products={products["green_tea"].id},
        ),
        Discount(
            name="Bulk Discount Strawberries",
            discount_type=DiscountType.UNIT_PRICE,
            discount=50,
            minimum_quantity=3,
            products={products["strawberries"].id},
        ),
        Discount(
            name="Bulk Discount Coffee",
            discount_type=DiscountType.PERCENTAGE,
            discount=0.3333,
            minimum_quantity=3,
            products={products["coffee"].id},
        ),
    ]


@pytest.fixture
def cart(discounts):
    return Cart.new(discount_resolver=RuleTableResolver(discounts))
