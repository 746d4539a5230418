"""Interactive menu for the inventory system."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections import deque
from collections.abc import Sequence
from typing import TextIO

from stockroom.database import DEFAULT_DATABASE, get_connection
from stockroom.inventory import InventoryManager
from stockroom.items import Clothing, Discount, Electronics, InventoryItem, Shoes
from stockroom.usermanager import UserManager

_USER_OPTIONS = (
    "1. Logout",
    "2. View Inventory",
    "3. Search Item by ID",
    "4. Search by Category",
    "5. Search by Name",
    "6. Search by Price Range",
    "7. Search by Stock Level",
    "8. Process Sale",
    "9. Process Restock",
    "10. Auto Restock",
)

_ADMIN_OPTIONS = (
    "11. Add New Item",
    "12. Update Stock",
    "13. Delete Item",
    "14. Apply Discount to Item",
    "15. Apply Discount to Category",
    "16. Add User",
    "17. Bulk Update from File",
    "18. Clear Entire Inventory",
)


def display_menu(is_logged_in: bool, is_admin: bool) -> str:
    """Return the menu text for the current session, ending with the prompt."""
    lines = ["", "=== Inventory Management System ==="]
    if not is_logged_in:
        lines += ["1. Login", "2. Exit"]
    else:
        lines += _USER_OPTIONS
        if is_admin:
            lines += ["", "--- Admin Options ---", *_ADMIN_OPTIONS]
        lines.append("0. Exit")
    return "\n".join(lines) + "\nSelect an option: "


class _Tokens:
    """Whitespace-separated words read from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())


def _ask(prompt: str) -> None:
    print(prompt, end="", flush=True)


def _show(items: Sequence[InventoryItem]) -> None:
    print()
    for item in items:
        item.display_item()


def _read_item(tokens: _Tokens, category: str) -> InventoryItem | None:
    if category == "Clothing":
        print("ID, Name, Price, Stock, MinStock, Threshold, DiscountType, DiscountValue, Fabric, Size:")
    elif category == "Electronics":
        print(
            "ID, Name, Price, Stock, Threshold, restockAmount, DiscountType, DiscountValue, "
            "Warranty (in months):"
        )
    elif category == "Shoes":
        print("ID, Name, Price, Stock, MinStock, Threshold, DiscountType, DiscountValue, Brand, Size:")
    else:
        print("Invalid category. Please enter one of: Clothing, Electronics, Shoes.")
        return None
    item_id = tokens.integer()
    name = tokens.word()
    price = tokens.number()
    stock = tokens.integer()
    threshold = tokens.integer()
    restock_amount = tokens.integer()
    discount = Discount(tokens.word(), tokens.number())
    common = dict(
        restock_threshold=threshold, restock_amount=restock_amount, discount=discount
    )
    if category == "Clothing":
        fabric, size = tokens.word(), tokens.word()
        return Clothing(item_id, name, price, stock, fabric_type=fabric, size=size, **common)
    if category == "Electronics":
        warranty = tokens.integer()
        return Electronics(item_id, name, price, stock, warranty_period=warranty, **common)
    brand, size = tokens.word(), tokens.word()
    return Shoes(item_id, name, price, stock, brand=brand, size=size, **common)


def _logged_out(choice: int, tokens: _Tokens, users: UserManager) -> bool:
    """Handle a choice before login; return False to leave the program."""
    if choice == 1:
        _ask("Username: ")
        username = tokens.word()
        _ask("Password: ")
        password = tokens.word()
        users.login(username, password)
    elif choice == 2:
        print("Exiting program.")
        return False
    else:
        print("Invalid option. Please login first.")
    return True


def _logged_in(
    choice: int, tokens: _Tokens, inventory: InventoryManager, users: UserManager
) -> bool:
    """Handle a choice after login; return False to leave the program."""
    if choice == 0:
        print("Exiting program.")
        return False
    if choice == 1:
        users.logout()
    elif choice == 2:
        print()
        inventory.display_all_items()
    elif choice == 3:
        _ask("Enter Item ID: ")
        item_id = tokens.integer()
        print()
        inventory.search_item(item_id)
    elif choice == 4:
        _ask("Enter Category: ")
        _show(inventory.search_by_category(tokens.word()))
    elif choice == 5:
        _ask("Enter Name: ")
        _show(inventory.search_by_name(tokens.word()))
    elif choice == 6:
        _ask("Enter Min Price: ")
        low = tokens.number()
        _ask("Enter Max Price: ")
        high = tokens.number()
        _show(inventory.search_by_price_range(low, high))
    elif choice == 7:
        _ask("Enter Min Stock: ")
        low = tokens.integer()
        _ask("Enter Max Stock: ")
        high = tokens.integer()
        _show(inventory.search_by_stock_levels(low, high))
    elif choice in (8, 9):
        _ask("Enter Item ID: ")
        item_id = tokens.integer()
        _ask("Quantity to Sell: " if choice == 8 else "Quantity to Restock: ")
        quantity = tokens.integer()
        print()
        if choice == 8:
            inventory.process_sale(item_id, quantity)
        else:
            inventory.process_restock(item_id, quantity)
    elif choice == 10:
        print()
        inventory.auto_restock()
    elif choice == 11:
        _ask("Enter Category (Clothing/Electronics/Shoes): ")
        item = _read_item(tokens, tokens.word())
        if item is not None:
            inventory.add_item(item)
    elif choice == 12:
        _ask("Enter Item ID and New Stock: ")
        item_id, new_stock = tokens.integer(), tokens.integer()
        print()
        inventory.update_stock(item_id, new_stock)
    elif choice == 13:
        _ask("Enter Item ID to Delete: ")
        item_id = tokens.integer()
        print()
        inventory.delete_item(item_id)
    elif choice == 14:
        print("Item ID, Discount Type (Percentage/Flat), Discount Value:")
        item_id = tokens.integer()
        discount = Discount(tokens.word(), tokens.number())
        print()
        inventory.apply_discount_to_item(item_id, discount)
    elif choice == 15:
        print("Category, Discount Type (Percentage/Flat), Discount Value:")
        category = tokens.word()
        discount = Discount(tokens.word(), tokens.number())
        print()
        inventory.apply_discount_to_category(category, discount)
    elif choice == 16:
        print("New Username, Password, Role (admin/employee):")
        username, password, role = tokens.word(), tokens.word(), tokens.word()
        print()
        users.add_user(username, password, role)
    elif choice == 17:
        _ask("Enter Bulk Update Filename (e.g., bulk_update.txt): ")
        inventory.bulk_update(tokens.word())
    elif choice == 18:
        _ask("Are you sure you want to delete all inventory data? (yes/no): ")
        confirm = tokens.word()
        print()
        if confirm == "yes":
            inventory.clear_inventory()
            print("All inventory data deleted.")
        else:
            print("Operation cancelled.")
    else:
        print("Invalid option.")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; return the exit status."""
    parser = argparse.ArgumentParser(prog="stockroom", description="Inventory management")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="SQLite database file")
    args = parser.parse_args(argv)
    tokens = _Tokens(sys.stdin)
    try:
        conn = get_connection(args.database)
        inventory = InventoryManager(conn)
        users = UserManager(conn)
        running = True
        while running:
            _ask(display_menu(users.current_user is not None, users.is_admin()))
            try:
                choice = tokens.integer()
            except ValueError:
                choice = -1
            try:
                if users.current_user is None:
                    running = _logged_out(choice, tokens, users)
                else:
                    running = _logged_in(choice, tokens, inventory, users)
            except ValueError:
                print("Invalid input.")
    except EOFError:
        print()
        return 0
    except sqlite3.Error as exc:
        print(f"SQL Error: {exc}", file=sys.stderr)
        return 1
    return 0