"""User record managed by the user-lifecycle service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    """A user account.  Identity is the ``user_id``."""

    user_id: int | None = None
    username: str | None = field(default=None, compare=False)
    email: str | None = field(default=None, compare=False)
    active: bool = field(default=True, compare=False)

    def __hash__(self) -> int:
        return hash(self.user_id)
