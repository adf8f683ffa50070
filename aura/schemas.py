"""Pydantic schemas for the Aura API wire shapes."""
from pydantic import BaseModel, ConfigDict, Field

from aura.models import Account


class AccountApiResponse(BaseModel):
    """A single account as returned by GET /accounts/{user_id}."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier of the account")
    is_main: bool = Field(..., description="Whether this is the user's main account")
    balance: float = Field(..., description="Current balance of the account")

    def to_domain_model(self) -> Account:
        """Convert this wire record into its domain model."""
        return to_domain(self)


class AccountsApiResponse(BaseModel):
    """Root envelope of the accounts list reply."""
    model_config = ConfigDict(frozen=True)

    accounts: list[AccountApiResponse]


class Transfer(BaseModel):
    """A transfer of money between two accounts."""
    model_config = ConfigDict(frozen=True)

    sender_id: str = Field(..., description="Account the money leaves")
    recipient_id: str = Field(..., description="Account the money arrives in")
    amount: float = Field(..., description="Amount to transfer")


def to_domain(wire: AccountApiResponse) -> Account:
    """Field-for-field rename of a wire account into an Account."""
    return Account(
        account_id=wire.id,
        is_account_main=wire.is_main,
        account_balance=wire.balance,
    )
