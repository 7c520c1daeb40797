import logging
from typing import Any, Callable, TypeVar

import httpx

from buymeacoffee.errors import ClientError, DecodeError, ServerError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_html(response: httpx.Response) -> bool:
    return "html" in response.headers.get("content-type", "")


def _as_server_error(payload: Any) -> ServerError | None:
    """
    Matches the API's error body: exactly one of `reason` or legacy `error`
    holding a string, and an optional `error_code` fitting an unsigned 16-bit int.
    """
    if not isinstance(payload, dict):
        return None

    reason_keys = [key for key in ("reason", "error") if key in payload]
    if len(reason_keys) != 1:
        return None
    reason = payload[reason_keys[0]]
    if not isinstance(reason, str):
        return None

    error_code = payload.get("error_code")
    if error_code is not None:
        if not isinstance(error_code, int) or isinstance(error_code, bool):
            return None
        if not 0 <= error_code <= 0xFFFF:
            return None

    return ServerError(reason, error_code)


def classify_response(response: httpx.Response, decode: Callable[[Any], T]) -> T:
    """
    Turns a completed response into a decoded payload or a typed error.

    - An HTML content type means the API redirected to its login page, which
      is how it answers a bad token: raises ClientError(401).
    - Any 4xx raises ClientError with that status; the body is not read.
    - Anything else is parsed as JSON and matched first against the error
      shape (raises ServerError), then handed to `decode`.

    Raises DecodeError if the body is not JSON or fits neither shape.
    """
    if _is_html(response):
        logger.debug("HTML response (status %s), treating as unauthorized", response.status_code)
        raise ClientError(int(httpx.codes.UNAUTHORIZED))

    if response.is_client_error:
        raise ClientError(response.status_code)

    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON (status {response.status_code})") from e

    server_error = _as_server_error(payload)
    if server_error is not None:
        logger.debug("API error in response body: %s", server_error)
        raise server_error

    return decode(payload)
