"""Client-side data access for Aura accounts."""
from aura.models import Account, AccountsResult
from aura.repositories import AccountRepository
from aura.services import AccountClient, RawResponse

__all__ = ["Account", "AccountsResult", "AccountClient", "AccountRepository", "RawResponse"]
