"""Users of the studio and their roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    NONE = 0
    MUSICIAN = 1
    RECEPTIONIST = 2
    ADMINISTRATOR = 3


@dataclass(eq=False)
class User:
    """A person known to the studio; compared by identity."""

    first_name: str
    last_name: str
    email: str
    role: Role = Role.NONE

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(eq=False)
class Receptionist(User):
    """Front-desk staff; gets its role from an administrator."""


@dataclass(eq=False)
class Administrator(User):
    """A user who may hand out roles while holding the administrator role."""

    role: Role = Role.ADMINISTRATOR

    def assign_role(self, user: User, role: Role) -> None:
        """Give ``user`` the ``role``; PermissionError if self is not an administrator."""
        if self.role is not Role.ADMINISTRATOR:
            raise PermissionError(f"{self.name} may not assign roles")
        user.role = role