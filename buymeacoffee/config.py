import os
from dataclasses import dataclass

from buymeacoffee.auth import mask_token

BASE_URL = "https://developers.buymeacoffee.com/api"
USER_AGENT = "buymeacoffee-py/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    """ Configuration for the Buy Me a Coffee client. """
    access_token: str
    base_url: str = BASE_URL
    user_agent: str = USER_AGENT

    def __repr__(self) -> str:
        return (
            f"ClientConfig(access_token={mask_token(self.access_token)!r}, "
            f"base_url={self.base_url!r}, user_agent={self.user_agent!r})"
        )


def _require_env(key: str) -> str:
    value = os.getenv(key)
    if value is None:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def load_client_config() -> ClientConfig:
    """ Load client configuration from environment variables. """
    return ClientConfig(
        access_token=_require_env("BMC_ACCESS_TOKEN"),
        base_url=os.getenv("BMC_BASE_URL", BASE_URL),
    )
