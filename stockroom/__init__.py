"""Inventory management in SQLite: items, stock, discounts, sales, users and an audit log."""

__version__ = "0.1.0"