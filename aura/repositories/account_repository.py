"""Repository turning account API replies into domain results."""
from collections.abc import AsyncIterator
from typing import Optional

import structlog

from aura.logging import current_request_id, generate_request_id, get_logger
from aura.models import AccountsResult
from aura.services.account_client import AccountClient, RawResponse

LOG_TAG = "UserAccountRepository"
NO_MESSAGE = "No exception message"

# Sentinels stored in AccountsResult.status_code when no HTTP status came back
STATUS_BODY_WITHOUT_CODE = 1
STATUS_NO_RESPONSE = 0
STATUS_UNCLASSIFIED = 2


class AccountRepository:
    """Fetches a user's accounts through an AccountClient."""

    def __init__(
        self,
        client: Optional[AccountClient] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialize the repository.

        Args:
            client: Account API client (defaults to new instance)
            logger: Diagnostic logger (defaults to one tagged UserAccountRepository)
        """
        self.client = client or AccountClient()
        self.logger = logger or get_logger(LOG_TAG)

    async def fetch_account_data(self, user_id: str) -> AsyncIterator[AccountsResult]:
        """
        Stream the accounts of a user.

        Nothing is requested until the stream is iterated. It yields a single
        AccountsResult and completes. If the request or the classification
        fails, the error is logged and the stream completes without yielding.

        Args:
            user_id: The user identifier, passed through unvalidated

        Yields:
            AccountsResult for the reply
        """
        # Bound only around the call: the caller's context is restored before yielding
        request_id = current_request_id() or generate_request_id()
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await self.client.get_user_account(user_id)
                result = classify_response(response)
            except Exception as e:
                self.logger.error("account_fetch_failed", message=str(e) or NO_MESSAGE)
                return

        yield result

    async def fetch_account_result(self, user_id: str) -> Optional[AccountsResult]:
        """Drain fetch_account_data and return its value, or None if nothing was emitted."""
        result = None
        async for item in self.fetch_account_data(user_id):
            result = item
        return result


def classify_response(response: RawResponse) -> AccountsResult:
    """
    Build an AccountsResult from the presence of a body and a status code.

    | body    | status  | result                          |
    |---------|---------|---------------------------------|
    | present | present | status, mapped accounts         |
    | absent  | present | status, no accounts             |
    | present | absent  | 1, mapped accounts              |
    | absent  | absent  | 0, no accounts                  |

    An empty list counts as a present body.
    """
    body = response.body
    status_code = response.status_code

    if body is not None and status_code is not None:
        return AccountsResult(status_code, [account.to_domain_model() for account in body])

    if body is None and status_code is not None:
        return AccountsResult(status_code, accounts=[])

    if body is not None and status_code is None:
        return AccountsResult(
            status_code=STATUS_BODY_WITHOUT_CODE,
            accounts=[account.to_domain_model() for account in body],
        )

    if body is None and status_code is None:
        return AccountsResult(status_code=STATUS_NO_RESPONSE, accounts=[])

    # Unreachable while the four cases above cover every combination
    return AccountsResult(status_code=STATUS_UNCLASSIFIED, accounts=[])
