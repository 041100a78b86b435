"""OneWaySMS API client."""

import logging

import httpx

from . import __version__
from .config import ClientConfig
from .encoder import build_balance_url, build_send_url, build_status_url
from .errors import OneWayError
from .interpreter import interpret_balance, interpret_send, interpret_status
from .models import BalanceResult, SendRequest, SendResult, StatusRequest, StatusResult

logger = logging.getLogger(__name__)

USER_AGENT = f"onewaysms-sdk-python/{__version__}"


class OneWay:
    """
    Client for the OneWaySMS gateway.

    Holds only the read-only config, so one instance can serve concurrent
    calls. Pass ``http_client`` to reuse a connection pool (it is not closed
    by this class); otherwise every call opens its own ``httpx.AsyncClient``.

        svc = OneWay(ClientConfig(
            base_url="API_BASE_URL",
            api_username="API_USERNAME",
            api_password="API_PASSWORD",
            sender_id="SENDER_ID",
        ))
        try:
            result = await svc.send(SendRequest(
                message="Hello, 世界",
                mobile_no=["60123456789", "60129876543"],
            ))
            print(result.mt_ids)
        except OneWayError as e:
            print(e.kind, e.message)
        except httpx.HTTPError as e:
            # Network failure, timeout
            ...
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None):
        self.config = config
        self._http_client = http_client

    async def _get(self, url: str) -> httpx.Response:
        """Perform a GET with User-Agent set to this library."""
        headers = {"User-Agent": USER_AGENT}

        if self._http_client is not None:
            return await self._http_client.get(url, headers=headers)

        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.get(url, headers=headers)

    async def send(self, request: SendRequest) -> SendResult:
        """
        Send an SMS. Language type is detected unless set on the request.

        Args:
            request: Message, recipient(s) and optional sender/language overrides

        Returns:
            SendResult with one MT ID per recipient, in order

        Raises:
            OneWayError: gateway rejected the request
            httpx.HTTPError: transport failure
        """
        logger.info(f"Sending SMS to {len(request.recipients)} recipient(s)")
        response = await self._get(build_send_url(self.config, request))

        try:
            result = interpret_send(response.status_code, response.text)
        except OneWayError as e:
            logger.warning(f"SMS not sent: {e.kind.value}: {e}")
            raise

        logger.info(f"SMS accepted, MT IDs: {list(result.mt_ids)}")
        return result

    async def check_status(self, request: StatusRequest) -> StatusResult:
        """
        Check delivery status of a sent message by its MT ID.

        Raises:
            OneWayError: MT ID unknown, delivery failed or unknown response
            httpx.HTTPError: transport failure
        """
        logger.info(f"Checking transaction status for MT ID {request.mt_id}")
        response = await self._get(build_status_url(self.config, request))

        try:
            return interpret_status(response.status_code, response.text)
        except OneWayError as e:
            logger.warning(f"Status check for MT ID {request.mt_id} failed: {e.kind.value}: {e}")
            raise

    async def check_balance(self) -> BalanceResult:
        """
        Check remaining credit balance of the configured account.

        Raises:
            OneWayError: invalid credentials or unknown response
            httpx.HTTPError: transport failure
        """
        logger.info("Checking credit balance")
        response = await self._get(build_balance_url(self.config))

        try:
            return interpret_balance(response.status_code, response.text)
        except OneWayError as e:
            logger.warning(f"Balance check failed: {e.kind.value}: {e}")
            raise
