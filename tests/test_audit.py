import logging
import sqlite3

import pytest

from stockroom.audit import AuditLogger
from stockroom.database import create_schema


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_event_is_stored(conn):
    AuditLogger(conn).log_event("User logged in: alice")
    rows = conn.execute("SELECT event FROM AuditLogs").fetchall()
    assert rows == [("User logged in: alice",)]


def test_events_keep_order(conn):
    audit = AuditLogger(conn)
    audit.log_event("first")
    audit.log_event("second")
    events = [row[0] for row in conn.execute("SELECT event FROM AuditLogs ORDER BY log_id")]
    assert events == ["first", "second"]


def test_event_has_timestamp(conn):
    AuditLogger(conn).log_event("x")
    (stamp,) = conn.execute("SELECT timestamp FROM AuditLogs").fetchone()
    assert stamp == conn.execute("SELECT datetime(?)", (stamp,)).fetchone()[0]


def test_missing_table_is_logged_not_raised(caplog):
    bare = sqlite3.connect(":memory:")
    with caplog.at_level(logging.ERROR):
        AuditLogger(bare).log_event("x")
    assert "SQL Error during audit logging" in caplog.text