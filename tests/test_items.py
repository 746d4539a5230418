import pytest

from stockroom.items import Clothing, Discount, Electronics, InventoryItem, Shoes


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        InventoryItem(1, "Thing", 10.0, 3)


def test_category_per_type():
    assert Clothing(1, "Shirt", 10.0, 1).category == "Clothing"
    assert Electronics(2, "Phone", 10.0, 1).category == "Electronics"
    assert Shoes(3, "Boot", 10.0, 1).category == "Shoes"


def test_defaults():
    item = Clothing(1, "Shirt", 10.0, 1)
    assert item.fabric_type == "Cotton"
    assert item.size == "M"
    assert item.restock_threshold == 5
    assert item.restock_amount == 10
    assert item.discount == Discount("None", 0.0)
    assert Electronics(2, "Phone", 10.0, 1).warranty_period == 12


@pytest.mark.parametrize(
    "fabric, size, surcharge",
    [
        ("Cotton", "M", 0),
        ("Silk", "M", 500),
        ("Cotton", "L", 100),
        ("Cotton", "XXL", 100),
        ("Silk", "XL", 600),
    ],
)
def test_clothing_price(fabric, size, surcharge):
    item = Clothing(1, "Shirt", 250.0, 3, fabric_type=fabric, size=size)
    assert item.calculate_price() == item.price + surcharge


@pytest.mark.parametrize("warranty, surcharge", [(6, 0), (12, 0), (24, 1000)])
def test_electronics_price(warranty, surcharge):
    item = Electronics(2, "Phone", 800.0, 4, warranty_period=warranty)
    assert item.calculate_price() == item.price + surcharge


@pytest.mark.parametrize("size, surcharge", [("M", 0), ("L", 100), ("XL", 100), ("XXL", 0)])
def test_shoes_price(size, surcharge):
    item = Shoes(3, "Runner", 300.0, 2, brand="Acme", size=size)
    assert item.calculate_price() == item.price + surcharge


def test_update_stock_and_restock():
    item = Shoes(3, "Runner", 300.0, 2, restock_amount=7)
    item.update_stock(4)
    assert item.stock_quantity == 4
    item.restock()
    assert item.stock_quantity == 4 + 7


def test_needs_restocking_threshold():
    item = Electronics(2, "Phone", 800.0, 4, restock_threshold=5)
    assert item.needs_restocking()
    item.update_stock(5)
    assert not item.needs_restocking()


def test_no_discount_keeps_price():
    item = Clothing(1, "Shirt", 80.0, 1)
    assert item.price_after_discount() == item.price


def test_unknown_discount_type_keeps_price():
    item = Clothing(1, "Shirt", 80.0, 1, discount=Discount("Coupon", 30.0))
    assert item.price_after_discount() == item.price


def test_percentage_discount_half():
    item = Clothing(1, "Shirt", 80.0, 1, discount=Discount("Percentage", 50.0))
    assert item.price_after_discount() * 2 == item.price


def test_percentage_discount_full():
    item = Clothing(1, "Shirt", 80.0, 1, discount=Discount("Percentage", 100.0))
    assert item.price_after_discount() == 0.0


def test_flat_discount_never_negative():
    item = Shoes(3, "Runner", 30.0, 2, discount=Discount("Flat", 45.0))
    assert item.price_after_discount() == 0.0


def test_flat_discount_subtracts():
    item = Shoes(3, "Runner", 30.0, 2, discount=Discount("Flat", 10.0))
    assert item.price_after_discount() + 10.0 == item.price


def test_describe_base_line():
    item = Electronics(7, "Laptop", 999.5, 3)
    first = item.describe().splitlines()[0]
    assert first == "ID : 7, Name : Laptop, Price : 999.5, Stock : 3, Price after discount : 999.5"


def test_describe_extra_lines():
    assert Clothing(1, "Shirt", 10.0, 1, fabric_type="Silk", size="XL").describe().endswith(
        "Fabric Type : Silk, Size : XL"
    )
    assert Electronics(2, "Phone", 10.0, 1, warranty_period=24).describe().endswith(
        "Warranty : 24 months"
    )
    assert Shoes(3, "Boot", 10.0, 1, brand="Acme", size="L").describe().endswith(
        "Brand : Acme, Size : L"
    )


def test_display_item_prints_description(capsys):
    item = Shoes(3, "Boot", 10.0, 1, brand="Acme", size="L")
    item.display_item()
    assert capsys.readouterr().out == item.describe() + "\n"