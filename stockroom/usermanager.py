"""User accounts, login and logout."""

from __future__ import annotations

import logging
import sqlite3

from stockroom.audit import AuditLogger
from stockroom.users import User

logger = logging.getLogger(__name__)


class UserManager:
    """Registers users and tracks who is logged in."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self._current_user: User | None = None

    @property
    def current_user(self) -> User | None:
        """The logged-in user, or ``None``."""
        return self._current_user

    def add_user(self, username: str, password: str, role: str) -> bool:
        """Register a user; return ``False`` if the database refuses it."""
        try:
            self.conn.execute(
                "INSERT INTO Users (username, password, role) VALUES (?, ?, ?)",
                (username, password, role),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            self.conn.rollback()
            logger.error("SQL Error adding user: %s", exc)
            return False
        AuditLogger(self.conn).log_event(f"New user registered: {username}")
        print(f"User {username} added successfully.")
        return True

    def login(self, username: str, password: str) -> bool:
        """Log in with the given credentials; return whether they matched."""
        try:
            row = self.conn.execute(
                "SELECT password, role FROM Users WHERE username = ?", (username,)
            ).fetchone()
        except sqlite3.Error as exc:
            logger.error("SQL Error during login: %s", exc)
            return False
        if row is not None:
            stored, role = row
            user = User(username, stored, role)
            if user.authenticate(password):
                self._current_user = user
                AuditLogger(self.conn).log_event(f"User logged in: {username}")
                print(f"Login successful. Welcome, {username}.")
                return True
        print("Invalid username or password.")
        return False

    def logout(self) -> None:
        """Log the current user out, if any."""
        if self._current_user is not None:
            name = self._current_user.username
            AuditLogger(self.conn).log_event(f"User logged out: {name}")
            print(f"Goodbye {name}!")
        else:
            print("No user is currently logged in!")
        self._current_user = None

    def is_admin(self) -> bool:
        return self._current_user is not None and self._current_user.role == "admin"