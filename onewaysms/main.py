"""
OneWaySMS command line tool.

Sends SMS, checks delivery status and credit balance using the
credentials from .env (see config.py).
"""

import asyncio
import logging
import sys

from .client import OneWay
from .config import load_config
from .errors import OneWayError
from .models import SendRequest, StatusRequest

logger = logging.getLogger(__name__)

USAGE = """Usage: python -m onewaysms.main [send|status|balance]
  send <mobileno[,mobileno...]> <message> - send SMS
  status <mtid>                           - check delivery status
  balance                                 - check remaining credit balance"""


def setup_logging(log_file: str = "onewaysms.log"):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ]
    )


async def send_sms(svc: OneWay, mobile_no: str, message: str):
    """Send message to comma-separated recipients and log MT IDs."""
    recipients = [p.strip() for p in mobile_no.split(",") if p.strip()]
    result = await svc.send(SendRequest(message=message, mobile_no=recipients))

    for phone, mt_id in zip(recipients, result.mt_ids):
        logger.info(f"✅ {phone}: MT ID {mt_id}")


async def check_status(svc: OneWay, mt_id: int):
    result = await svc.check_status(StatusRequest(mt_id=mt_id))
    logger.info(f"MT ID {mt_id}: {result.status.value}")


async def check_balance(svc: OneWay):
    result = await svc.check_balance()
    logger.info(f"💳 Credit balance: {result.credit_balance}")


async def run(args: list[str], svc: OneWay | None = None) -> int:
    """
    Run one CLI command.

    Args:
        args: Command line arguments without the program name
        svc: Client to use, built from .env when not given

    Returns:
        Process exit code: 0 ok, 1 gateway error, 2 bad usage
    """
    mode = args[0] if args else ""

    valid = (
        (mode == "send" and len(args) == 3)
        or (mode == "status" and len(args) == 2 and args[1].isascii() and args[1].isdigit())
        or (mode == "balance" and len(args) == 1)
    )
    if not valid:
        print(USAGE)
        return 2

    if svc is None:
        svc = OneWay(load_config())

    try:
        if mode == "send":
            await send_sms(svc, args[1], args[2])
        elif mode == "status":
            await check_status(svc, int(args[1]))
        else:
            await check_balance(svc)
    except OneWayError as e:
        logger.error(f"❌ {e.kind.value}: {e}")
        return 1

    return 0


def main():
    """Main entry point."""
    setup_logging()
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
