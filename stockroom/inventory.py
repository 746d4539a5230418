"""Inventory storage, lookup, discounts and stock movements."""

from __future__ import annotations

import logging
import os
import sqlite3
import sys
from collections.abc import Sequence
from typing import Any

from stockroom import sales
from stockroom.bulk import BulkRecord, bulk_update as _bulk_update
from stockroom.items import Clothing, Discount, Electronics, InventoryItem, Shoes

logger = logging.getLogger(__name__)

_COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 5),
    ("Name", 15),
    ("Price", 10),
    ("Stock", 8),
    ("Category", 12),
    ("Discount", 10),
    ("Value", 10),
    ("Extra Info", 20),
)

_DETAIL_QUERIES: dict[str, str] = {
    "Clothing": "SELECT fabric_type, size FROM Clothing WHERE item_id = ?",
    "Electronics": "SELECT warranty_period FROM Electronics WHERE electronics_id = ?",
    "Shoes": "SELECT brand, size FROM Shoes WHERE shoes_id = ?",
}

_COUNT_BY_ID = "SELECT COUNT(*) AS count FROM Inventory WHERE item_id = ?"


def _num(value: float) -> str:
    return f"{value:g}"


def _table_line(values: Sequence[Any]) -> str:
    return "".join(str(value).ljust(width) for value, (_, width) in zip(values, _COLUMNS))


class InventoryManager:
    """Stores inventory items in the database and works on them."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def _query(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        cursor = self.conn.cursor()
        cursor.row_factory = sqlite3.Row
        try:
            return cursor.execute(sql, params).fetchall()
        finally:
            cursor.close()

    def _query_one(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Row | None:
        rows = self._query(sql, params)
        return rows[0] if rows else None

    def _detail(self, category: str, item_id: int) -> sqlite3.Row | None:
        sql = _DETAIL_QUERIES.get(category)
        if sql is None:
            return None
        return self._query_one(sql, (item_id,))

    def add_item(self, item: InventoryItem) -> bool:
        """Store an item and its category details; return whether it was stored."""
        try:
            self.conn.execute(
                "INSERT INTO Inventory (item_id, name, price, stock_quantity, category) "
                "VALUES (?, ?, ?, ?, ?)",
                (item.item_id, item.name, item.price, item.stock_quantity, item.category),
            )
            if isinstance(item, Clothing):
                self.conn.execute(
                    "INSERT INTO Clothing (item_id, size, fabric_type) VALUES (?, ?, ?)",
                    (item.item_id, item.size, item.fabric_type),
                )
            elif isinstance(item, Electronics):
                self.conn.execute(
                    "INSERT INTO Electronics (electronics_id, warranty_period) VALUES (?, ?)",
                    (item.item_id, item.warranty_period),
                )
            elif isinstance(item, Shoes):
                self.conn.execute(
                    "INSERT INTO Shoes (shoes_id, brand, size) VALUES (?, ?, ?)",
                    (item.item_id, item.brand, item.size),
                )
            self.conn.commit()
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL Error in addItem(): %s", exc)
            return False
        print("Item added to database successfully!")
        return True

    def _extra_info(self, category: str, item_id: int) -> str:
        detail = self._detail(category, item_id)
        if detail is None:
            return ""
        if category == "Clothing":
            return f"Fabric: {detail['fabric_type']}, Size: {detail['size']}"
        if category == "Electronics":
            return f"Warranty: {detail['warranty_period']} months"
        return f"Brand: {detail['brand']}, Size: {detail['size']}"

    def display_all_items(self) -> None:
        """Print every item as a table."""
        try:
            rows = self._query("SELECT * FROM Inventory")
            lines = [_table_line([title for title, _ in _COLUMNS]), "-" * 90]
            for row in rows:
                lines.append(
                    _table_line(
                        [
                            row["item_id"],
                            row["name"],
                            _num(row["price"]),
                            row["stock_quantity"],
                            row["category"],
                            row["discount_type"],
                            _num(row["discount_value"]),
                            self._extra_info(row["category"], row["item_id"]),
                        ]
                    )
                )
        except sqlite3.Error as exc:
            logger.error("SQL error in displayAllItems: %s", exc)
            return
        print("\n".join(lines))

    def search_item(self, item_id: int) -> bool:
        """Print the full details of one item; return whether it exists."""
        try:
            row = self._query_one("SELECT * FROM Inventory WHERE item_id = ?", (item_id,))
            if row is None:
                print(f"Item with ID {item_id} not found.")
                return False
            print("Item Details:")
            print(f"ID: {row['item_id']}")
            print(f"Name: {row['name']}")
            print(f"Price: {_num(row['price'])}")
            print(f"Stock Quantity: {row['stock_quantity']}")
            print(f"Category: {row['category']}")
            print(f"Restock Threshold: {row['restock_threshold']}")
            print(f"Restock Amount: {row['restock_amount']}")
            print(f"Discount Type: {row['discount_type']}")
            print(f"Discount Value: {_num(row['discount_value'])}")
            category = row["category"]
            detail = self._detail(category, item_id)
            if detail is not None:
                if category == "Clothing":
                    print(f"Fabric Type: {detail['fabric_type']}")
                    print(f"Size: {detail['size']}")
                elif category == "Electronics":
                    print(f"Warranty Period: {detail['warranty_period']} months")
                else:
                    print(f"Brand: {detail['brand']}")
                    print(f"Size: {detail['size']}")
            return True
        except sqlite3.Error as exc:
            logger.error("SQL error in searchItem: %s", exc)
            return False

    def _exists(self, item_id: int) -> bool:
        row = self._query_one(_COUNT_BY_ID, (item_id,))
        return row is not None and row["count"] > 0

    def update_stock(self, item_id: int, new_quantity: int) -> bool:
        """Set an item's stock; return whether the item exists."""
        try:
            if not self._exists(item_id):
                print(f"Item with ID {item_id} not found.")
                return False
            self.conn.execute(
                "UPDATE Inventory SET stock_quantity = ? WHERE item_id = ?",
                (new_quantity, item_id),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("Error updating stock: %s", exc)
            return False
        print(
            f"Stock updated successfully for item ID {item_id}. New Quantity: {new_quantity}"
        )
        return True

    def delete_item(self, item_id: int) -> bool:
        """Delete an item; return whether anything was deleted."""
        try:
            cursor = self.conn.execute("DELETE FROM Inventory WHERE item_id = ?", (item_id,))
            self.conn.commit()
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL Error during deletion: %s", exc)
            return False
        if cursor.rowcount > 0:
            print(f"Item with ID {item_id} deleted successfully!")
            return True
        print(f"Item with ID {item_id} not found!", file=sys.stderr)
        return False

    def item_from_row(self, row: sqlite3.Row) -> InventoryItem | None:
        """Build an item from an ``Inventory`` row and its category details.

        Returns ``None`` for an unknown category or missing details.
        """
        item_id = row["item_id"]
        category = row["category"]
        common = dict(
            item_id=item_id,
            name=row["name"],
            price=row["price"],
            stock_quantity=row["stock_quantity"],
            restock_threshold=row["restock_threshold"],
            restock_amount=row["restock_amount"],
            discount=Discount(row["discount_type"], row["discount_value"]),
        )
        detail = self._detail(category, item_id)
        if detail is None:
            return None
        if category == "Shoes":
            return Shoes(**common, brand=detail["brand"], size=detail["size"])
        if category == "Clothing":
            return Clothing(**common, fabric_type=detail["fabric_type"], size=detail["size"])
        return Electronics(**common, warranty_period=int(detail["warranty_period"]))

    def _search(self, where: str, params: Sequence[Any], label: str) -> list[InventoryItem]:
        try:
            rows = self._query(f"SELECT * FROM Inventory WHERE {where}", params)
            items = [self.item_from_row(row) for row in rows]
        except sqlite3.Error as exc:
            logger.error("SQL Error in %s: %s", label, exc)
            return []
        return [item for item in items if item is not None]

    def search_by_name(self, name: str) -> list[InventoryItem]:
        """Items whose name contains ``name``."""
        return self._search("name LIKE ?", (f"%{name}%",), "searchByName")

    def search_by_price_range(self, min_price: float, max_price: float) -> list[InventoryItem]:
        """Items priced between the bounds, inclusive."""
        return self._search(
            "price BETWEEN ? AND ?", (min_price, max_price), "searchByPriceRange"
        )

    def search_by_stock_levels(self, min_stock: int, max_stock: int) -> list[InventoryItem]:
        """Items whose stock lies between the bounds, inclusive."""
        return self._search(
            "stock_quantity BETWEEN ? AND ?", (min_stock, max_stock), "searchByStockLevels"
        )

    def search_by_category(self, category: str) -> list[InventoryItem]:
        """Items of one category."""
        return self._search("category = ?", (category,), "searchByCategory")

    def auto_restock(self) -> dict[int, int]:
        """Restock every item below its threshold; return new stock by item id."""
        restocked: dict[int, int] = {}
        try:
            rows = self._query(
                "SELECT item_id, name, stock_quantity, restock_amount "
                "FROM Inventory WHERE stock_quantity < restock_threshold"
            )
            for row in rows:
                item_id = row["item_id"]
                new_stock = row["stock_quantity"] + row["restock_amount"]
                print(f"Auto Restocking item: {row['name']} (ID: {item_id})")
                self.conn.execute(
                    "UPDATE Inventory SET stock_quantity = ? WHERE item_id = ?",
                    (new_stock, item_id),
                )
                self.conn.commit()
                print(f"New stock level: {new_stock}")
                restocked[item_id] = new_stock
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL error in autoRestock: %s", exc)
        return restocked

    def bulk_update(self, filename: str | os.PathLike[str]) -> list[BulkRecord]:
        """Apply a bulk update file; an unreadable file is logged and ignored."""
        try:
            return _bulk_update(self.conn, filename)
        except OSError:
            logger.error("Error: Could not open file %s", filename)
            return []

    def process_sale(self, item_id: int, quantity: int) -> bool:
        return sales.process_sale(self.conn, item_id, quantity)

    def process_restock(self, item_id: int, quantity: int) -> bool:
        return sales.process_restock(self.conn, item_id, quantity)

    def _apply_discount(
        self, count_sql: str, where: str, key: Any, discount: Discount
    ) -> int | None:
        row = self._query_one(count_sql, (key,))
        if row is not None and row["count"] == 0:
            return None
        cursor = self.conn.execute(
            f"UPDATE Inventory SET discount_type = ?, discount_value = ? WHERE {where}",
            (discount.type, discount.value, key),
        )
        self.conn.commit()
        return cursor.rowcount

    def apply_discount_to_item(self, item_id: int, discount: Discount) -> bool:
        """Set an item's discount; return whether the item was updated."""
        try:
            affected = self._apply_discount(_COUNT_BY_ID, "item_id = ?", item_id, discount)
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL Error in applyDiscountToItem: %s", exc)
            return False
        if affected is None:
            print(f"Item with ID: {item_id} not found!")
            return False
        if affected > 0:
            print(f"Discount applied to item ID: {item_id} successfully!")
            return True
        print(f"Item ID {item_id} already has this discount set.")
        return False

    def apply_discount_to_category(self, category: str, discount: Discount) -> bool:
        """Set the discount of every item in a category; return whether any changed."""
        try:
            affected = self._apply_discount(
                "SELECT COUNT(*) AS count FROM Inventory WHERE category = ?",
                "category = ?",
                category,
                discount,
            )
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL Error in applyDiscountToCategory: %s", exc)
            return False
        if affected is None:
            print(f"No items with category: {category} found!")
            return False
        if affected > 0:
            print(f"Discount applied to items with category: {category} successfully!")
            return True
        print(f"Items with category {category} already have this discount set.")
        return False

    def clear_inventory(self) -> None:
        """Delete every inventory item."""
        self.conn.execute("DELETE FROM Inventory")
        self.conn.commit()