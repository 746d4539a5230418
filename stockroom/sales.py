"""Sales and restocks that move stock and leave a trail."""

from __future__ import annotations

import logging
import sqlite3

from stockroom.audit import AuditLogger
from stockroom.transactions import Transaction, log_transaction

logger = logging.getLogger(__name__)

_SELECT_STOCK = "SELECT stock_quantity, price FROM Inventory WHERE item_id = ?"
_UPDATE_STOCK = "UPDATE Inventory SET stock_quantity = ? WHERE item_id = ?"


def _set_stock(conn: sqlite3.Connection, item_id: int, stock: int) -> None:
    conn.execute(_UPDATE_STOCK, (stock, item_id))
    conn.commit()


def process_sale(conn: sqlite3.Connection, item_id: int, quantity: int) -> bool:
    """Sell ``quantity`` of an item; return whether the sale went through."""
    try:
        row = conn.execute(_SELECT_STOCK, (item_id,)).fetchone()
        audit = AuditLogger(conn)
        if row is None:
            print(f"Item with ID {item_id} not found.")
            audit.log_event(f"Failed sale: Item ID {item_id} not found.")
            return False
        current_stock, price = row
        if current_stock < quantity:
            print(f"Insufficient stock for item ID {item_id}.")
            audit.log_event(f"Failed sale: Insufficient stock for ID {item_id}")
            return False
        _set_stock(conn, item_id, current_stock - quantity)
        log_transaction(conn, Transaction(item_id, quantity, price, "sale"))
        print("Sale processed successfully!")
        audit.log_event(f"Sale processed: ID {item_id}, Quantity {quantity}")
        return True
    except sqlite3.Error as exc:
        logger.error("SQL error during sale: %s", exc)
        return False


def process_restock(conn: sqlite3.Connection, item_id: int, quantity: int) -> bool:
    """Add ``quantity`` to an item's stock; return whether it went through."""
    try:
        row = conn.execute(_SELECT_STOCK, (item_id,)).fetchone()
        audit = AuditLogger(conn)
        if row is None:
            print(f"Item with ID {item_id} not found.")
            audit.log_event(f"Failed restock: Item ID {item_id} not found.")
            return False
        current_stock, price = row
        _set_stock(conn, item_id, current_stock + quantity)
        log_transaction(conn, Transaction(item_id, quantity, price, "restock"))
        print("Restock processed successfully!")
        audit.log_event(f"Restock processed: ID {item_id}, Quantity {quantity}")
        return True
    except sqlite3.Error as exc:
        logger.error("SQL error during restock: %s", exc)
        return False