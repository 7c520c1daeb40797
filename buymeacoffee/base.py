import logging
from typing import Any, Callable, TypeVar

import httpx

from buymeacoffee.auth import BearerAuth, mask_token
from buymeacoffee.classifier import classify_response
from buymeacoffee.config import BASE_URL, USER_AGENT
from buymeacoffee.errors import NetworkError
from buymeacoffee.http import HttpClient
from buymeacoffee.models import MemberStatus, Membership, Page, Purchase, Support

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BuyMeACoffeeClient:
    """
    Async client for the Buy Me a Coffee developer API.

    Holds the access token and the transport; nothing else changes after
    construction, so one instance can be shared between concurrent tasks.

    List endpoints report an empty result as a ServerError whose reason is
    e.g. "No subscriptions" rather than as an empty page.
    """

    def __init__(self, token: str, http: HttpClient | None = None):
        self._token = token
        self._auth = BearerAuth(token)
        self._http = http or HttpClient(BASE_URL, headers={"User-Agent": USER_AGENT})

    def __repr__(self) -> str:
        return f"BuyMeACoffeeClient(http={self._http!r}, token={mask_token(self._token)!r})"

    async def __aenter__(self) -> "BuyMeACoffeeClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get(self, path: str, decode: Callable[[Any], T], params: dict | None = None) -> T:
        logger.debug("GET %s params=%s", path, params)
        try:
            response = await self._http.request("GET", path, auth=self._auth, params=params)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request to {path} timed out") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Connection failed for {path}: {e}") from e
        return classify_response(response, decode)

    async def members(self, status: MemberStatus = MemberStatus.ALL, page: int = 1) -> Page[Membership]:
        """Returns one page of memberships filtered by `status`."""
        return await self.get(
            "/v1/subscriptions",
            lambda data: Page.from_api(data, Membership),
            params={"status": MemberStatus(status).value, "page": page},
        )

    async def membership(self, id: int) -> Membership:
        return await self.get(f"/v1/subscriptions/{id}", Membership.from_api)

    async def supporters(self, page: int = 1) -> Page[Support]:
        """Returns one page of one-time supporters."""
        return await self.get(
            "/v1/supporters",
            lambda data: Page.from_api(data, Support),
            params={"page": page},
        )

    async def support(self, id: int) -> Support:
        return await self.get(f"/v1/supporters/{id}", Support.from_api)

    async def extras(self, page: int = 1) -> Page[Purchase]:
        """Returns one page of extra purchases."""
        return await self.get(
            "/v1/extras",
            lambda data: Page.from_api(data, Purchase),
            params={"page": page},
        )

    async def extra(self, id: int) -> Purchase:
        """Returns the extra purchase with the given Purchase.id (not Extra.id)."""
        return await self.get(f"/v1/extras/{id}", Purchase.from_api)
