"""Request and result types for OneWaySMS API calls."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class LanguageType(Enum):
    """
    Language type of the SMS, as sent in the ``languagetype`` parameter.

    PLAIN   - normal text message (160 characters per MT)
    UNICODE - unicode text message (70 characters per MT), hex-encoded
    """
    PLAIN = "1"
    UNICODE = "2"


class TransactionStatus(Enum):
    """Delivery status of a mobile terminating (MT) transaction."""
    DELIVERED = "delivered"
    TELCO_ACCEPTED = "telco_accepted"


@dataclass(frozen=True)
class SendRequest:
    """
    Outbound SMS to one or more recipients.

    ``mobile_no`` accepts a single number or a sequence of numbers. Numbers must
    include the country code (e.g. 60123456789). Order is kept, so the n-th
    transaction ID in the result belongs to the n-th recipient.
    """
    message: str
    mobile_no: str | Sequence[str]
    sender_id: str | None = None
    language_type: LanguageType | None = None
    recipients: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if isinstance(self.mobile_no, str):
            recipients = (self.mobile_no,)
        else:
            recipients = tuple(self.mobile_no)

        if not self.message:
            raise ValueError("message must not be empty")
        if not recipients or not all(recipients):
            raise ValueError("at least one non-empty mobile number is required")

        object.__setattr__(self, "recipients", recipients)


@dataclass(frozen=True)
class SendResult:
    """Mobile terminating IDs, one per recipient in request order."""
    mt_ids: tuple[int, ...]


@dataclass(frozen=True)
class StatusRequest:
    """Transaction status lookup by MT ID."""
    mt_id: int


@dataclass(frozen=True)
class StatusResult:
    """Delivery status of an MT transaction."""
    status: TransactionStatus


@dataclass(frozen=True)
class BalanceResult:
    """Remaining credit balance of the configured account."""
    credit_balance: int
