"""SQLAlchemy-backed user directory."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, scoped_session

from models.user import User

from .abstract_directory import AbstractUserDirectory, UserFields


class SQLUserDirectory(AbstractUserDirectory):
    """Persist users through an injected SQLAlchemy session."""

    def __init__(self, session: Session | scoped_session):
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return self.session.execute(
            select(User).where(User.email == email)
        ).scalar_one_or_none()

    def find_by_id(self, user_id: int) -> dict | None:
        user = self.session.get(User, user_id)
        if user is None:
            return None
        return user.to_public_dict()

    def list_all(self) -> list[dict]:
        users = self.session.execute(select(User).order_by(User.id)).scalars()
        return [user.to_public_dict() for user in users]

    def create(self, fields: UserFields, credential_hash: str) -> int:
        user = User(
            name=fields.name,
            email=fields.email,
            phone=fields.phone,
            role=fields.role,
            password_hash=credential_hash,
        )
        self.session.add(user)
        self._commit()
        return user.id

    def update(
        self,
        user_id: int,
        fields: UserFields,
        new_credential_hash: str | None = None,
    ) -> int:
        user = self.session.get(User, user_id)
        if user is None:
            return 0

        user.name = fields.name
        user.email = fields.email
        user.phone = fields.phone
        user.role = fields.role
        if new_credential_hash is not None:
            user.password_hash = new_credential_hash

        self._commit()
        return 1

    def delete(self, user_id: int) -> int:
        user = self.session.get(User, user_id)
        if user is None:
            return 0

        self.session.delete(user)
        self._commit()
        return 1

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
