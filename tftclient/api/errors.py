"""Exception types raised by the TFT API client."""

from typing import Optional


class RiotAPIError(Exception):
    """Base exception for every error raised by this package."""


class ValidationError(RiotAPIError, ValueError):
    """Raised when a caller-supplied parameter fails validation.

    Always raised before any network access takes place.

    Attributes:
        parameter (Optional[str]): Name of the offending parameter
    """

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        self.parameter = parameter
        super().__init__(message)


class ApiRequestError(RiotAPIError):
    """Raised when the Riot API answers with a non-200 status.

    No distinction is made between 404, 429 or any other status; callers
    that care inspect ``status_code``.

    Attributes:
        status_code (int): HTTP status code returned by the API
        api_message (str): Message resolved from the error body
        url (Optional[str]): Requested URL (never contains the API key)
    """

    def __init__(self, status_code: int, api_message: str,
                 url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.api_message = api_message
        self.url = url
        super().__init__(
            f"Riot API request failed (Status {status_code}): {api_message}"
        )
