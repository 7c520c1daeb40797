from buymeacoffee.base import BuyMeACoffeeClient
from buymeacoffee.config import ClientConfig, load_client_config
from buymeacoffee.http import HttpClient


def build_client(
    config: ClientConfig,
    timeout: tuple[int, int] = (5, 30),
) -> BuyMeACoffeeClient:
    """
    Wires the transport and returns a ready-to-use BuyMeACoffeeClient.

    Accepts an optional timeout so callers can tune transport behaviour
    without touching internal wiring.
    """
    http = HttpClient(config.base_url, headers={"User-Agent": config.user_agent}, timeout=timeout)
    return BuyMeACoffeeClient(config.access_token, http=http)


def create_client(timeout: tuple[int, int] = (5, 30)) -> BuyMeACoffeeClient:
    """
    Convenience function that loads config from environment variables
    and returns a ready-to-use BuyMeACoffeeClient.

    Raises ValueError if BMC_ACCESS_TOKEN is not set.
    """
    config = load_client_config()
    return build_client(config, timeout=timeout)
