"""Registration, login and credential management for user accounts."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models.user import DEFAULT_ROLE, USER_ROLES
from storage import AbstractUserDirectory, UserFields

from .credentials import CredentialHasher
from .errors import (
    EmailConflict,
    InternalError,
    InvalidCredentials,
    UserNotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)

SECRET_FIELDS = frozenset({"password", "currentPassword", "newPassword"})


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    if not isinstance(raw_email, str):
        return ""
    return raw_email.strip().lower()


def _is_blank(key: str, value: object) -> bool:
    if not isinstance(value, str):
        return True
    # Secrets are checked as given; whitespace is a valid password.
    return not (value if key in SECRET_FIELDS else value.strip())


def _require(**values: object) -> None:
    missing = [key for key, value in values.items() if _is_blank(key, value)]
    if missing:
        raise ValidationError(
            "Missing required fields: {}.".format(", ".join(sorted(missing)))
        )


def _resolve_role(raw_role: object, default: str = DEFAULT_ROLE) -> str:
    if not raw_role:
        return default
    if not isinstance(raw_role, str) or raw_role.strip().lower() not in USER_ROLES:
        raise ValidationError(
            "Role must be one of: {}.".format(", ".join(USER_ROLES))
        )
    return raw_role.strip().lower()


@contextmanager
def _backend_errors(message: str) -> Iterator[None]:
    """Turn storage and hashing failures into an opaque InternalError."""
    try:
        yield
    except (SQLAlchemyError, ValueError) as exc:
        logger.exception(message)
        raise InternalError(message) from exc


class AuthService:
    """Stateless account operations over an injected directory and hasher."""

    def __init__(self, directory: AbstractUserDirectory, hasher: CredentialHasher):
        self.directory = directory
        self.hasher = hasher
        self._dummy_hash: str | None = None

    def register(
        self,
        name: str | None,
        email: str | None,
        phone: str | None,
        password: str | None,
        role: str | None = None,
    ) -> dict:
        """Create an account and return its public projection."""
        _require(name=name, email=email, phone=phone, password=password)
        fields = UserFields(
            name=name.strip(),
            email=normalize_email(email),
            phone=phone.strip(),
            role=_resolve_role(role),
        )

        with _backend_errors("Registration failed."):
            if self.directory.find_by_email(fields.email) is not None:
                raise EmailConflict()

            credential_hash = self.hasher.hash(password)
            try:
                user_id = self.directory.create(fields, credential_hash)
            except IntegrityError as exc:
                # Lost a race with a concurrent registration for the same email.
                raise EmailConflict() from exc
            user = self.directory.find_by_id(user_id)

        logger.info("Registered user id=%s role=%s", user_id, fields.role)
        return user

    def login(self, email: str | None, password: str | None) -> dict:
        """Verify credentials and return the user's public projection."""
        _require(email=email, password=password)

        with _backend_errors("Login failed."):
            record = self.directory.find_by_email(normalize_email(email))
            if record is None:
                # Spend the same hashing work as a real verification.
                self.hasher.verify(password, self._get_dummy_hash())
                logger.info("Failed login attempt for unknown account")
                raise InvalidCredentials()

            if not self.hasher.verify(password, record.password_hash):
                logger.info("Failed login attempt for user id=%s", record.id)
                raise InvalidCredentials()

            user = record.to_public_dict()

        logger.info("User id=%s logged in", user["id"])
        return user

    def change_password(
        self,
        user_id: int,
        current_password: str | None,
        new_password: str | None,
    ) -> None:
        """Rotate a user's credential after re-verifying the current one."""
        _require(currentPassword=current_password, newPassword=new_password)

        with _backend_errors("Failed to change password."):
            user = self.directory.find_by_id(user_id)
            if user is None:
                raise UserNotFound()

            record = self.directory.find_by_email(user["email"])
            stored_hash = record.password_hash if record is not None else None
            if not self.hasher.verify(current_password, stored_hash):
                logger.info("Rejected password change for user id=%s", user_id)
                raise InvalidCredentials("Current password is incorrect.")

            new_hash = self.hasher.hash(new_password)
            self.directory.update(user_id, UserFields.from_public(user), new_hash)

        logger.info("Password changed for user id=%s", user_id)

    def update_profile(
        self,
        user_id: int,
        name: str | None,
        email: str | None,
        phone: str | None,
        role: str | None = None,
        new_password: str | None = None,
    ) -> dict:
        """Update profile fields, rotating the credential only when a password is given."""
        _require(name=name, email=email, phone=phone)
        if new_password is not None and not new_password:
            raise ValidationError("Password must not be empty.")

        with _backend_errors("Failed to update user."):
            current = self.directory.find_by_id(user_id)
            if current is None:
                raise UserNotFound()

            fields = UserFields(
                name=name.strip(),
                email=normalize_email(email),
                phone=phone.strip(),
                role=_resolve_role(role, default=current["role"]),
            )
            owner = self.directory.find_by_email(fields.email)
            if owner is not None and owner.id != user_id:
                raise EmailConflict()

            new_hash = None
            if new_password is not None:
                new_hash = self.hasher.hash(new_password)
            try:
                self.directory.update(user_id, fields, new_hash)
            except IntegrityError as exc:
                raise EmailConflict() from exc
            user = self.directory.find_by_id(user_id)

        logger.info("Updated user id=%s", user_id)
        return user

    def get_user(self, user_id: int) -> dict:
        with _backend_errors("Failed to load user."):
            user = self.directory.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def list_users(self) -> list[dict]:
        with _backend_errors("Failed to list users."):
            return self.directory.list_all()

    def delete_user(self, user_id: int) -> None:
        with _backend_errors("Failed to delete user."):
            affected = self.directory.delete(user_id)
        if not affected:
            raise UserNotFound()
        logger.info("Deleted user id=%s", user_id)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.hasher.hash("not-a-real-password")
        return self._dummy_hash
