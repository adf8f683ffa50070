"""Network-facing services for the Aura data layer."""
from aura.services.account_client import AccountClient, RawResponse

__all__ = ["AccountClient", "RawResponse"]
