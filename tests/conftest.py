"""Shared fixtures: an in-process OneWaySMS mock gateway."""

import httpx
import pytest
import pytest_asyncio

from onewaysms.client import OneWay
from onewaysms.config import ClientConfig

BASE_URL = "http://localhost:8000"


class MockGateway:
    """
    Fake OneWaySMS gateway for httpx.MockTransport.

    Responds based on magic parameter values, the same way the gateway
    mock server for the SDK does. Every request is recorded.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = request.url.params
        path = request.url.path

        if path == "/api.aspx":
            return self._send(params)
        if path == "/bulktrx.aspx":
            return self._status(params)
        if path == "/bulkcredit.aspx":
            return self._balance(params)
        return httpx.Response(404)

    def _send(self, params) -> httpx.Response:
        credentials = (params.get("apiusername"), params.get("apipassword"))
        message = params.get("message")
        mobile_no = params.get("mobileno")

        if "invalid" in credentials:
            return httpx.Response(200, text="-100")
        if params.get("senderid") == "invalid":
            return httpx.Response(200, text="-200")
        if mobile_no == "invalid":
            return httpx.Response(200, text="-300")
        if params.get("languagetype") not in ("1", "2"):
            return httpx.Response(200, text="-400")
        if message == "invalid":
            return httpx.Response(200, text="-500")
        if message == "insufficient credit balance":
            return httpx.Response(200, text="-600")
        if message == "unknown error":
            return httpx.Response(200, text="random")
        if message == "request failure":
            return httpx.Response(500)
        if mobile_no == "60123456789,60129876543":
            return httpx.Response(200, text="145712468,145712469")
        if mobile_no == "60123456789":
            return httpx.Response(200, text="145712468")
        return httpx.Response(200, text="0")

    def _status(self, params) -> httpx.Response:
        bodies = {
            "1": "-100",
            "2": "-200",
            "3": "random",
            "145712470": "0",
            "145712471": "100",
        }
        return httpx.Response(200, text=bodies.get(params.get("mtid"), "-100"))

    def _balance(self, params) -> httpx.Response:
        credentials = (params.get("apiusername"), params.get("apipassword"))

        if "invalid" in credentials:
            return httpx.Response(200, text="-100")
        if "unknown error" in credentials:
            return httpx.Response(200, text="random")
        if credentials == ("Username", "Password"):
            return httpx.Response(200, text="6500")
        return httpx.Response(200, text="-100")


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        base_url=BASE_URL,
        api_username="Username",
        api_password="Password",
        sender_id="SenderID",
    )


@pytest.fixture
def gateway() -> MockGateway:
    return MockGateway()


@pytest_asyncio.fixture
async def http_client(gateway):
    async with httpx.AsyncClient(transport=httpx.MockTransport(gateway)) as client:
        yield client


@pytest.fixture
def make_client(config, http_client):
    """Build a OneWay client on the mock gateway, optionally overriding config fields."""
    def _make(**overrides) -> OneWay:
        values = {
            "base_url": config.base_url,
            "api_username": config.api_username,
            "api_password": config.api_password,
            "sender_id": config.sender_id,
            **overrides,
        }
        return OneWay(ClientConfig(**values), http_client=http_client)
    return _make
