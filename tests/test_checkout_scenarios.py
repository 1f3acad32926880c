"""End-to-end basket totals for the tea, strawberries and coffee promotions."""

from checkout import Cart


def test_buy_one_get_one_free_with_odd_number_of_items(products, cart):
    # Basket: GR1,SR1,GR1,GR1,CF1
    cart = (
        cart.add_product(products["green_tea"])
        .add_product(products["strawberries"])
        .add_product(products["green_tea"])
        .add_product(products["green_tea"])
        .add_product(products["coffee"])
    )

    assert cart.calculate_total() == 2245


def test_buy_one_get_one_free_with_even_number_of_items(products, cart):
    # Basket: GR1,GR1 -> 622 - ceil(2 * 311 * 0.5)
    cart = cart.add_product(products["green_tea"], 2)

    assert cart.calculate_total() == 311


def test_price_discount_on_bulk_items(products, cart):
    # Basket: SR1,SR1,GR1,SR1
    cart = (
        cart.add_product(products["strawberries"])
        .add_product(products["strawberries"])
        .add_product(products["green_tea"])
        .add_product(products["strawberries"])
    )

    assert cart.calculate_total() == 1661


def test_percentage_discount_on_bulk_items(products, cart):
    # Basket: GR1,CF1,SR1,CF1,CF1
    cart = (
        cart.add_product(products["green_tea"])
        .add_product(products["coffee"])
        .add_product(products["strawberries"])
        .add_product(products["coffee"])
        .add_product(products["coffee"])
    )

    assert cart.calculate_total() == 3057


def test_line_items_record_applied_discounts(products, cart, discounts):
    cart = cart.add_product(products["coffee"], 3).add_product(products["strawberries"])

    items = {item.product.id: item for item in cart.list_line_items()}

    coffee = items["CF1"]
    assert coffee.subtotal == 3369
    assert coffee.total == 2246
    assert coffee.discounts == ((discounts[2], 3, 1123),)
    assert items["SR1"].discounts == ()
    assert items["SR1"].total == items["SR1"].subtotal == 500


def test_empty_cart_totals_zero(cart):
    assert cart.list_line_items() == []
    assert cart.calculate_total() == 0
    assert Cart.new().calculate_total() == 0
