import httpx


class BuyMeACoffeeError(Exception):
    """Base class for all Buy Me a Coffee client errors."""


class TransportError(BuyMeACoffeeError):
    """Raised when a request fails before a usable response is obtained."""


class NetworkError(TransportError):
    """Raised on timeouts or connection failures."""


class DecodeError(TransportError):
    """Raised when a response body is not JSON or matches no expected shape."""


class ClientError(BuyMeACoffeeError):
    """Raised on 4xx responses, including the 401 synthesized from a login-page redirect."""

    def __init__(self, status_code: int):
        phrase = httpx.codes.get_reason_phrase(status_code)
        super().__init__(f"{status_code} {phrase}".rstrip())
        self.status_code = status_code


class ServerError(BuyMeACoffeeError):
    """
    Raised when a successful HTTP response carries the API's structured error body.

    The API reports empty list results this way, e.g. reason "No subscriptions".
    """

    def __init__(self, reason: str, error_code: int | None = None):
        message = reason if error_code is None else f"{error_code} {reason}"
        super().__init__(message)
        self.reason = reason
        self.error_code = error_code
