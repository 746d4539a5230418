import sqlite3

import pytest

from stockroom.database import create_schema
from stockroom.sales import process_restock, process_sale

STOCK = 10
PRICE = 5.0


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    connection.execute(
        "INSERT INTO Inventory (item_id, name, price, stock_quantity, category) "
        "VALUES (1, 'Shirt', ?, ?, 'Clothing')",
        (PRICE, STOCK),
    )
    connection.commit()
    yield connection
    connection.close()


def stock_of(conn, item_id=1):
    return conn.execute(
        "SELECT stock_quantity FROM Inventory WHERE item_id = ?", (item_id,)
    ).fetchone()[0]


def events(conn):
    return [row[0] for row in conn.execute("SELECT event FROM AuditLogs ORDER BY log_id")]


def transactions(conn):
    return conn.execute(
        "SELECT item_id, quantity, price, type FROM Transactions ORDER BY transaction_id"
    ).fetchall()


def test_sale_reduces_stock_and_records(conn, capsys):
    assert process_sale(conn, 1, 3) is True
    assert stock_of(conn) == STOCK - 3
    assert transactions(conn) == [(1, 3, PRICE, "sale")]
    assert events(conn) == ["Sale processed: ID 1, Quantity 3"]
    assert "Sale processed successfully!" in capsys.readouterr().out


def test_sale_of_entire_stock(conn):
    assert process_sale(conn, 1, STOCK) is True
    assert stock_of(conn) == 0


def test_sale_with_insufficient_stock(conn, capsys):
    assert process_sale(conn, 1, STOCK + 1) is False
    assert stock_of(conn) == STOCK
    assert transactions(conn) == []
    assert events(conn) == ["Failed sale: Insufficient stock for ID 1"]
    assert "Insufficient stock for item ID 1." in capsys.readouterr().out


def test_sale_of_unknown_item(conn, capsys):
    assert process_sale(conn, 99, 1) is False
    assert events(conn) == ["Failed sale: Item ID 99 not found."]
    assert "Item with ID 99 not found." in capsys.readouterr().out


def test_restock_increases_stock_and_records(conn, capsys):
    assert process_restock(conn, 1, 5) is True
    assert stock_of(conn) == STOCK + 5
    assert transactions(conn) == [(1, 5, PRICE, "restock")]
    assert events(conn) == ["Restock processed: ID 1, Quantity 5"]
    assert "Restock processed successfully!" in capsys.readouterr().out


def test_restock_of_unknown_item(conn):
    assert process_restock(conn, 42, 5) is False
    assert events(conn) == ["Failed restock: Item ID 42 not found."]
    assert transactions(conn) == []


def test_sale_then_restock_round_trip(conn):
    assert process_sale(conn, 1, 4)
    assert process_restock(conn, 1, 4)
    assert stock_of(conn) == STOCK
    assert [t[3] for t in transactions(conn)] == ["sale", "restock"]


def test_closed_connection_returns_false():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    connection.close()
    assert process_sale(connection, 1, 1) is False
    assert process_restock(connection, 1, 1) is False