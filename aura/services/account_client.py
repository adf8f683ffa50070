"""Client for the Aura API to fetch a user's accounts."""
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from aura import metrics
from aura.config import settings
from aura.exceptions import AccountApiError, WireDecodeError
from aura.logging import current_request_id, get_logger
from aura.mapping import decode_accounts
from aura.schemas import AccountApiResponse

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status code and decoded body of an accounts reply, either may be missing."""
    status_code: Optional[int]
    body: Optional[list[AccountApiResponse]]


class AccountClient:
    """Client for fetching user accounts from the Aura API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the account client.

        Args:
            base_url: Base URL of the Aura API. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout_seconds.
            transport: Optional httpx transport, used to route requests in-process.
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.transport = transport

    async def get_user_account(self, user_id: str) -> RawResponse:
        """
        Fetch the account list for a user.

        Non-2xx replies are not errors here: they come back with their status
        code and no body.

        Args:
            user_id: The user identifier

        Returns:
            RawResponse with the status code and decoded accounts

        Raises:
            AccountApiError: If the API cannot be reached
            WireDecodeError: If a successful reply has a malformed body
        """
        url = f"{self.base_url}/accounts/{quote(user_id, safe='')}"
        request_id = current_request_id()
        headers = {"X-Request-ID": request_id} if request_id else {}

        start_time = time.perf_counter()

        logger.info("account_api_request_started", user_id=user_id, url=url)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url, headers=headers)
            except httpx.RequestError as e:
                duration_ms = (time.perf_counter() - start_time) * 1000

                logger.error(
                    "account_api_request_error",
                    user_id=user_id,
                    duration_ms=round(duration_ms, 2),
                    error=str(e),
                    outcome="error",
                )

                error_type = "timeout" if isinstance(e, httpx.TimeoutException) else "connection_error"
                metrics.record_account_fetch(
                    success=False, latency_seconds=duration_ms / 1000, error_type=error_type
                )

                raise AccountApiError(500, f"Request failed: {e}") from e

        duration_ms = (time.perf_counter() - start_time) * 1000

        if not response.is_success:
            logger.warning(
                "account_api_http_error",
                user_id=user_id,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                outcome="error",
            )
            metrics.record_account_fetch(
                success=False, latency_seconds=duration_ms / 1000, error_type="http_error"
            )
            return RawResponse(status_code=response.status_code, body=None)

        try:
            body = decode_accounts(response.json()) if response.content else None
        except (ValueError, WireDecodeError) as e:
            logger.error(
                "account_api_decode_error",
                user_id=user_id,
                status_code=response.status_code,
                error=str(e),
                outcome="error",
            )
            metrics.record_account_fetch(
                success=False, latency_seconds=duration_ms / 1000, error_type="decode_error"
            )
            if isinstance(e, WireDecodeError):
                raise
            raise WireDecodeError(f"invalid JSON: {e}") from e

        logger.info(
            "account_api_request_completed",
            user_id=user_id,
            status_code=response.status_code,
            account_count=len(body) if body is not None else 0,
            duration_ms=round(duration_ms, 2),
            outcome="success",
        )

        metrics.record_account_fetch(success=True, latency_seconds=duration_ms / 1000)

        return RawResponse(status_code=response.status_code, body=body)
