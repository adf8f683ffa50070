"""Repositories for the Aura data layer."""
from aura.repositories.account_repository import AccountRepository, classify_response

__all__ = ["AccountRepository", "classify_response"]
