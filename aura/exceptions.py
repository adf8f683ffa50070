"""Exceptions raised by the Aura data layer."""


class AuraError(Exception):
    """Base exception for the Aura data layer."""


class AccountApiError(AuraError):
    """Raised when the Aura API cannot be reached."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Aura API error {status_code}: {detail}")


class WireDecodeError(AuraError):
    """Raised when a payload does not match the expected wire shape."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed wire payload: {detail}")
