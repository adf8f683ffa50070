"""Domain models handed to the rest of the application."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Account:
    """A user account, decoupled from its wire representation."""
    account_id: str
    is_account_main: bool
    account_balance: float


@dataclass(frozen=True)
class AccountsResult:
    """
    Outcome of one account fetch.

    status_code holds the HTTP status when one was received. When it was
    not, it holds a sentinel instead: 1 if accounts were still decoded,
    0 if nothing came back, 2 for an unclassifiable response.
    """
    status_code: int
    accounts: list[Account] = field(default_factory=list)
