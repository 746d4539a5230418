"""Bulk creation and update of inventory items from comma-separated files."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_UPSERT_ITEM = (
    "INSERT INTO Inventory (item_id, name, price, stock_quantity, category) "
    "VALUES (?, ?, ?, ?, ?) "
    "ON CONFLICT(item_id) DO UPDATE SET name=excluded.name, price=excluded.price, "
    "stock_quantity=excluded.stock_quantity, category=excluded.category"
)

# Category -> (number of extra fields required, upsert statement).
_DETAIL_UPSERTS: dict[str, tuple[int, str]] = {
    "Clothing": (
        2,
        "INSERT INTO Clothing (item_id, fabric_type, size) VALUES (?, ?, ?) "
        "ON CONFLICT(item_id) DO UPDATE SET fabric_type=excluded.fabric_type, "
        "size=excluded.size",
    ),
    "Electronics": (
        1,
        "INSERT INTO Electronics (electronics_id, warranty_period) VALUES (?, ?) "
        "ON CONFLICT(electronics_id) DO UPDATE SET "
        "warranty_period=excluded.warranty_period",
    ),
    "Shoes": (
        2,
        "INSERT INTO Shoes (shoes_id, brand, size) VALUES (?, ?, ?) "
        "ON CONFLICT(shoes_id) DO UPDATE SET brand=excluded.brand, size=excluded.size",
    ),
}


@dataclass(frozen=True)
class BulkRecord:
    """One line of a bulk update file."""

    item_id: int
    name: str
    price: float
    stock_quantity: int
    category: str
    extra_fields: tuple[str, ...] = ()


def parse_bulk_line(line: str) -> BulkRecord:
    """Parse ``id,name,price,quantity,category[,extra...]``.

    A trailing comma does not start an empty field. Raises ``ValueError``
    when the id, price or quantity is not a number.
    """
    text = line.rstrip("\r\n")
    fields = text.split(",")
    if text.endswith(","):
        fields.pop()
    head = fields[:5]
    head += [""] * (5 - len(head))
    id_text, name, price_text, quantity_text, category = head
    try:
        item_id = int(id_text)
        price = float(price_text)
        quantity = int(quantity_text)
    except ValueError as exc:
        raise ValueError(f"Malformed bulk update line: {text!r}") from exc
    return BulkRecord(item_id, name, price, quantity, category, tuple(fields[5:]))


def _apply_record(conn: sqlite3.Connection, record: BulkRecord) -> bool:
    try:
        conn.execute(
            _UPSERT_ITEM,
            (
                record.item_id,
                record.name,
                record.price,
                record.stock_quantity,
                record.category,
            ),
        )
        required, statement = _DETAIL_UPSERTS.get(record.category, (None, ""))
        if required is not None and len(record.extra_fields) >= required:
            conn.execute(statement, (record.item_id, *record.extra_fields[:required]))
        else:
            logger.warning(
                "Insufficient extra fields for category: %s at item ID: %d",
                record.category,
                record.item_id,
            )
        conn.commit()
    except sqlite3.Error as exc:
        conn.rollback()
        logger.error("SQL error during bulkUpdate: %s", exc)
        return False
    return True


def _records(filename: str | os.PathLike[str]) -> Iterator[BulkRecord]:
    with open(filename, encoding="utf-8") as file:
        for line in file:
            yield parse_bulk_line(line)


def bulk_update(
    conn: sqlite3.Connection, filename: str | os.PathLike[str]
) -> list[BulkRecord]:
    """Insert or update every item listed in ``filename``.

    Returns the records whose inventory rows were written. Database errors
    on a line are logged and the line skipped; a missing file raises
    ``OSError`` and a malformed line ``ValueError``.
    """
    return [record for record in _records(filename) if _apply_record(conn, record)]