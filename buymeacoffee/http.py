import logging

import httpx

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Thin async HTTP transport around httpx.AsyncClient.

    Injected into BuyMeACoffeeClient so that connection and timeout
    concerns live in one place. Responses are returned as-is, whatever
    their status code: interpreting them is the classifier's job.

    Args:
        base_url: Base URL prepended to all request paths.
        client: Optional pre-configured httpx.AsyncClient. If provided, timeout
                configuration is skipped and the caller is responsible. Useful for tests.
        headers: Default headers sent with every request (e.g. User-Agent).
        timeout: (connect_timeout, read_timeout) in seconds (default: (5, 30)).
        transport: Optional httpx transport for the client built here. Useful for tests.

    Redirects are followed: the API answers a bad token by redirecting to
    its HTML login page.
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        headers: dict | None = None,
        timeout: tuple[int, int] = (5, 30),
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})
        self._client = client or httpx.AsyncClient(
            follow_redirects=True,
            transport=transport,
            timeout=httpx.Timeout(
                connect=timeout[0],
                read=timeout[1],
                write=timeout[1],
                pool=timeout[1]
            )
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        auth: httpx.Auth | None = None,
        headers: dict | None = None,
        params: dict | None = None,
    ) -> httpx.Response:
        """
        Executes an async HTTP request and returns the raw response.

        Never raises on status codes. Network failures are re-raised
        unchanged as httpx exceptions.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        merged_headers = {**self._headers, **(headers or {})}
        try:
            response = await self._client.request(
                method.upper(),
                url,
                auth=auth,
                headers=merged_headers,
                params=params,
            )
        except httpx.HTTPError as e:
            logger.debug("HTTP %s %s failed: %s", method.upper(), url, e)
            raise
        logger.debug("HTTP %s %s -> %s", method.upper(), url, response.status_code)
        return response

    async def get(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()
