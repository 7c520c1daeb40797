import httpx


def mask_token(token: str) -> str:
    return "*" * len(token)


class BearerAuth(httpx.Auth):
    """
    httpx.Auth implementation that attaches a personal access token
    as an `Authorization: Bearer` header.

    The token is fixed for the lifetime of the object and only ever
    shown masked in reprs and logs.
    """

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return f"BearerAuth(token={mask_token(self._token)!r})"
