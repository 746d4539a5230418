"""Audit trail of user and stock events."""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)


class AuditLogger:
    """Writes events to the ``AuditLogs`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def log_event(self, event: str) -> None:
        """Record an event; database errors are logged, not raised."""
        try:
            self.conn.execute("INSERT INTO AuditLogs (event) VALUES (?)", (event,))
            self.conn.commit()
        except sqlite3.Error as exc:
            logger.error("SQL Error during audit logging: %s", exc)