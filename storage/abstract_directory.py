"""User directory abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from models.user import DEFAULT_ROLE, User


@dataclass(frozen=True)
class UserFields:
    """Non-credential fields of a user record."""

    name: str
    email: str
    phone: str
    role: str = DEFAULT_ROLE

    @classmethod
    def from_public(cls, projection: dict) -> "UserFields":
        """Build fields from a public user projection."""

        return cls(
            name=projection["name"],
            email=projection["email"],
            phone=projection["phone"],
            role=projection["role"],
        )


class AbstractUserDirectory(ABC):
    """Interface for user record stores."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the full record, credential hash included, for internal use."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> dict | None:
        """Return the public projection of the user, or None."""

    @abstractmethod
    def list_all(self) -> list[dict]:
        """Return public projections of every user."""

    @abstractmethod
    def create(self, fields: UserFields, credential_hash: str) -> int:
        """Insert a new record and return its id."""

    @abstractmethod
    def update(
        self,
        user_id: int,
        fields: UserFields,
        new_credential_hash: str | None = None,
    ) -> int:
        """Update a record and return the number of affected records."""

    @abstractmethod
    def delete(self, user_id: int) -> int:
        """Delete a record and return the number of affected records."""
