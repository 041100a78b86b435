"""OneWaySMS error taxonomy."""

from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    """Every way a OneWaySMS call can fail on the gateway side."""
    REQUEST_FAILURE = "RequestFailure"
    INVALID_CREDENTIALS = "InvalidCredentials"
    INVALID_SENDER_ID = "InvalidSenderID"
    INVALID_MOBILE_NO = "InvalidMobileNo"
    INVALID_LANGUAGE_TYPE = "InvalidLanguageType"
    INVALID_MESSAGE_CHARACTERS = "InvalidMessageCharacters"
    INSUFFICIENT_CREDIT_BALANCE = "InsufficientCreditBalance"
    MT_INVALID_NOT_FOUND = "MTInvalidNotFound"
    MESSAGE_DELIVERY_FAILURE = "MessageDeliveryFailure"
    UNKNOWN_ERROR = "UnknownError"


class OneWayError(Exception):
    """
    Error reported by the OneWaySMS gateway (or a non-2xx response from it).

    Switch on ``kind`` to handle specific errors:

        try:
            result = await svc.send(request)
        except OneWayError as e:
            if e.kind is ErrorKind.INSUFFICIENT_CREDIT_BALANCE:
                ...

    Transport problems (connection refused, timeouts) are not wrapped and
    surface as ``httpx.HTTPError``.
    """

    def __init__(self, message: str, kind: ErrorKind, status_code: int | None = None):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(self._format())

    def __reduce__(self):
        return (self.__class__, (self.message, self.kind, self.status_code))

    def _format(self) -> str:
        if self.status_code is None:
            return self.message
        try:
            reason = HTTPStatus(self.status_code).phrase
        except ValueError:
            reason = "Unknown Status"
        return f"{self.status_code} ({reason}): {self.message}"

    def __eq__(self, other):
        if not isinstance(other, OneWayError):
            return NotImplemented
        return (self.kind, self.status_code, self.message) == (
            other.kind, other.status_code, other.message
        )

    def __hash__(self):
        return hash((self.kind, self.status_code, self.message))

    def __repr__(self):
        return (
            f"OneWayError(message={self.message!r}, kind={self.kind.name}, "
            f"status_code={self.status_code!r})"
        )
