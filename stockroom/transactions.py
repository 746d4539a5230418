"""Recording of sales and restocks."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    """A stock movement: ``sale`` or ``restock``."""

    item_id: int
    quantity: int
    price: float
    type: str


def log_transaction(conn: sqlite3.Connection, transaction: Transaction) -> None:
    """Store a transaction with the current time; database errors are logged."""
    try:
        conn.execute(
            "INSERT INTO Transactions (item_id, quantity, price, type, timestamp) "
            "VALUES (?, ?, ?, ?, datetime('now'))",
            (transaction.item_id, transaction.quantity, transaction.price, transaction.type),
        )
        conn.commit()
    except sqlite3.Error as exc:
        logger.error("SQL error during transaction logging: %s", exc)