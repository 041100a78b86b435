"""OneWaySMS client SDK - send SMS, check delivery status and credit balance."""

__version__ = "0.1.0"

from .config import ClientConfig, load_config
from .errors import ErrorKind, OneWayError
from .models import (
    BalanceResult,
    LanguageType,
    SendRequest,
    SendResult,
    StatusRequest,
    StatusResult,
    TransactionStatus,
)
from .encoder import detect_language_type, message_to_hex, hex_to_message
from .client import OneWay

__all__ = [
    "OneWay",
    "ClientConfig",
    "load_config",
    "ErrorKind",
    "OneWayError",
    "LanguageType",
    "TransactionStatus",
    "SendRequest",
    "SendResult",
    "StatusRequest",
    "StatusResult",
    "BalanceResult",
    "detect_language_type",
    "message_to_hex",
    "hex_to_message",
]
