"""Inventory item types and their pricing rules."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Discount:
    """A discount: ``Percentage``, ``Flat`` or ``None``."""

    type: str = "None"
    value: float = 0.0


@dataclass
class InventoryItem(ABC):
    """An item held in stock."""

    item_id: int
    name: str
    price: float
    stock_quantity: int
    restock_threshold: int = field(default=5, kw_only=True)
    restock_amount: int = field(default=10, kw_only=True)
    discount: Discount = field(default_factory=Discount, kw_only=True)

    category: ClassVar[str] = ""

    @abstractmethod
    def calculate_price(self) -> float:
        """Price including category-specific surcharges."""

    def update_stock(self, new_stock_quantity: int) -> None:
        self.stock_quantity = new_stock_quantity

    def restock(self) -> None:
        self.stock_quantity += self.restock_amount

    def needs_restocking(self) -> bool:
        return self.stock_quantity < self.restock_threshold

    def price_after_discount(self) -> float:
        if self.discount.type == "Percentage":
            return self.price - (self.price * self.discount.value / 100)
        if self.discount.type == "Flat":
            return max(self.price - self.discount.value, 0.0)
        return self.price

    def describe(self) -> str:
        return (
            f"ID : {self.item_id}, "
            f"Name : {self.name}, "
            f"Price : {_num(self.price)}, "
            f"Stock : {self.stock_quantity}, "
            f"Price after discount : {_num(self.price_after_discount())}"
        )

    def display_item(self) -> str:
        """Write the item's description to standard output and return it."""
        text = self.describe()
        sys.stdout.write(text + "\n")
        return text


@dataclass
class Clothing(InventoryItem):
    """A garment with a fabric and a size."""

    fabric_type: str = "Cotton"
    size: str = "M"

    category: ClassVar[str] = "Clothing"

    def calculate_price(self) -> float:
        final_price = self.price
        if self.fabric_type == "Silk":
            final_price += 500
        if self.size in ("L", "XL", "XXL"):
            final_price += 100
        return final_price

    def describe(self) -> str:
        return (
            super().describe()
            + f"\nFabric Type : {self.fabric_type}, Size : {self.size}"
        )


@dataclass
class Electronics(InventoryItem):
    """A device with a warranty period in months."""

    warranty_period: int = 12

    category: ClassVar[str] = "Electronics"

    def calculate_price(self) -> float:
        final_price = self.price
        if self.warranty_period > 12:
            final_price += 1000
        return final_price

    def describe(self) -> str:
        return super().describe() + f"\nWarranty : {self.warranty_period} months"


@dataclass
class Shoes(InventoryItem):
    """A pair of shoes with a brand and a size."""

    brand: str = "Default"
    size: str = "M"

    category: ClassVar[str] = "Shoes"

    def calculate_price(self) -> float:
        final_price = self.price
        if self.size in ("L", "XL"):
            final_price += 100
        return final_price

    def describe(self) -> str:
        return super().describe() + f"\nBrand : {self.brand}, Size : {self.size}"