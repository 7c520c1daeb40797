import os

import pytest
from dotenv import load_dotenv

load_dotenv()


@pytest.fixture
def access_token() -> str:
    token = os.getenv("BMC_ACCESS_TOKEN")
    if not token:
        pytest.skip("BMC_ACCESS_TOKEN is not set")
    return token
