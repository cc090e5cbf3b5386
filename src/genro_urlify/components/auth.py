# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""User information part of a URL (``user:pass@``)."""

from __future__ import annotations

from typing import Any

__all__ = ["Auth"]


class Auth:
    """
    Optional username and password.

    Empty strings are stored as None, so ``Auth("", "")`` is empty.

    Example:
        >>> str(Auth("admin", "secret"))
        'admin:secret@'
        >>> str(Auth("admin"))
        'admin@'
        >>> str(Auth())
        ''
    """

    __slots__ = ("user", "password")

    def __init__(self, user: str | None = None, password: str | None = None) -> None:
        self.user = user or None
        self.password = password or None

    def set_user(self, user: str | None) -> Auth:
        self.user = user or None
        return self

    def set_password(self, password: str | None) -> Auth:
        self.password = password or None
        return self

    def set(self, user: str | None = None, password: str | None = None) -> Auth:
        self.user = user or None
        self.password = password or None
        return self

    def clear(self) -> Auth:
        return self.set()

    def is_empty(self) -> bool:
        return self.user is None and self.password is None

    def has_auth(self) -> bool:
        return not self.is_empty()

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user, "pass": self.password}

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        text = self.user or ""
        if self.password is not None:
            text += f":{self.password}"
        return f"{text}@"

    def __repr__(self) -> str:
        # Password is masked
        masked = "***" if self.password is not None else None
        return f"Auth(user={self.user!r}, password={masked!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Auth):
            return (self.user, self.password) == (other.user, other.password)
        return False
