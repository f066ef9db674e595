"""User directory backends."""

from .abstract_directory import AbstractUserDirectory, UserFields
from .sql_directory import SQLUserDirectory

__all__ = ["AbstractUserDirectory", "SQLUserDirectory", "UserFields"]
