"""System users."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A user account with a role such as ``admin`` or ``employee``."""

    username: str
    password: str = field(repr=False)
    role: str

    def authenticate(self, password: str) -> bool:
        return self.password == password