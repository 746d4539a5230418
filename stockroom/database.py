"""Shared SQLite connection and the inventory schema."""

from __future__ import annotations

import logging
import sqlite3
import threading

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "inventory.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Inventory (
    item_id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    price REAL NOT NULL,
    stock_quantity INTEGER NOT NULL,
    category TEXT NOT NULL,
    restock_threshold INTEGER NOT NULL DEFAULT 5,
    restock_amount INTEGER NOT NULL DEFAULT 10,
    discount_type TEXT NOT NULL DEFAULT 'None',
    discount_value REAL NOT NULL DEFAULT 0.0
);
CREATE TABLE IF NOT EXISTS Clothing (
    item_id INTEGER PRIMARY KEY
        REFERENCES Inventory(item_id) ON DELETE CASCADE,
    fabric_type TEXT,
    size TEXT
);
CREATE TABLE IF NOT EXISTS Electronics (
    electronics_id INTEGER PRIMARY KEY
        REFERENCES Inventory(item_id) ON DELETE CASCADE,
    warranty_period INTEGER
);
CREATE TABLE IF NOT EXISTS Shoes (
    shoes_id INTEGER PRIMARY KEY
        REFERENCES Inventory(item_id) ON DELETE CASCADE,
    brand TEXT,
    size TEXT
);
CREATE TABLE IF NOT EXISTS Transactions (
    transaction_id INTEGER PRIMARY KEY AUTOINCREMENT,
    item_id INTEGER NOT NULL,
    quantity INTEGER NOT NULL,
    price REAL NOT NULL,
    type TEXT NOT NULL,
    timestamp TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS AuditLogs (
    log_id INTEGER PRIMARY KEY AUTOINCREMENT,
    event TEXT NOT NULL,
    timestamp TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS Users (
    username TEXT PRIMARY KEY,
    password TEXT NOT NULL,
    role TEXT NOT NULL
);
"""

_connections: dict[str, sqlite3.Connection] = {}
_lock = threading.Lock()


def create_schema(conn: sqlite3.Connection) -> None:
    """Create every table the inventory needs, if missing."""
    conn.executescript(_SCHEMA)
    conn.commit()


def _is_open(conn: sqlite3.Connection) -> bool:
    try:
        conn.execute("SELECT 1")
    except sqlite3.ProgrammingError:
        return False
    return True


def get_connection(path: str = DEFAULT_DATABASE) -> sqlite3.Connection:
    """Return the shared connection to ``path``, opening it if needed."""
    key = str(path)
    with _lock:
        conn = _connections.get(key)
        if conn is None or not _is_open(conn):
            try:
                conn = sqlite3.connect(key, check_same_thread=False)
                conn.row_factory = sqlite3.Row
                conn.execute("PRAGMA foreign_keys = ON")
                create_schema(conn)
            except sqlite3.Error as exc:
                logger.error("Database connection error: %s", exc)
                raise
            _connections[key] = conn
        return conn