"""Account services."""

from .auth_service import AuthService
from .credentials import CredentialHasher

__all__ = ["AuthService", "CredentialHasher"]
