"""Mapping of OneWaySMS gateway responses to results and errors."""

import re

from .errors import ErrorKind, OneWayError
from .models import BalanceResult, SendResult, StatusResult, TransactionStatus

INTEGER_PATTERN = re.compile(r"-?[0-9]+")

# Negative codes returned by api.aspx
SEND_ERRORS: dict[int, tuple[ErrorKind, str]] = {
    -100: (ErrorKind.INVALID_CREDENTIALS, "apiusername or apipassword is invalid"),
    -200: (ErrorKind.INVALID_SENDER_ID, "senderid parameter is invalid"),
    -300: (ErrorKind.INVALID_MOBILE_NO, "mobileno parameter is invalid"),
    -400: (ErrorKind.INVALID_LANGUAGE_TYPE, "languagetype is invalid"),
    -500: (ErrorKind.INVALID_MESSAGE_CHARACTERS, "characters in message are invalid"),
    -600: (ErrorKind.INSUFFICIENT_CREDIT_BALANCE, "insufficient credit balance"),
}

# Codes returned by bulktrx.aspx
TRANSACTION_STATUSES: dict[int, TransactionStatus] = {
    0: TransactionStatus.DELIVERED,
    100: TransactionStatus.TELCO_ACCEPTED,
}
STATUS_ERRORS: dict[int, tuple[ErrorKind, str]] = {
    -100: (ErrorKind.MT_INVALID_NOT_FOUND, "mtid is invalid or not found"),
    -200: (ErrorKind.MESSAGE_DELIVERY_FAILURE, "message delivery failed"),
}

# Codes returned by bulkcredit.aspx
BALANCE_ERRORS: dict[int, tuple[ErrorKind, str]] = {
    -100: (ErrorKind.INVALID_CREDENTIALS, "apiusername or apipassword is invalid"),
}


def unknown_error() -> OneWayError:
    return OneWayError("unknown error", ErrorKind.UNKNOWN_ERROR)


def _check_status_code(status_code: int) -> None:
    if not 200 <= status_code < 300:
        raise OneWayError("request failure", ErrorKind.REQUEST_FAILURE, status_code)


def _parse_int(text: str) -> int | None:
    """Parse a gateway code, None if the text is not an integer."""
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def _error_for_code(code: int | None, errors: dict[int, tuple[ErrorKind, str]]) -> OneWayError:
    if code in errors:
        kind, message = errors[code]
        return OneWayError(message, kind)
    return unknown_error()


def interpret_send(status_code: int, body: str) -> SendResult:
    """
    Interpret an api.aspx response.

    Body is a comma-separated list of MT IDs on success, or a single
    negative error code.

    Raises:
        OneWayError: on non-2xx status, error code or unrecognised body
    """
    _check_status_code(status_code)

    codes = [_parse_int(part) for part in body.split(",")] if body.strip() else []
    if not codes or None in codes:
        raise unknown_error()

    if codes[0] > 0:
        return SendResult(mt_ids=tuple(codes))

    raise _error_for_code(codes[0], SEND_ERRORS)


def interpret_status(status_code: int, body: str) -> StatusResult:
    """
    Interpret a bulktrx.aspx response.

    Raises:
        OneWayError: on non-2xx status, error code or unrecognised body
    """
    _check_status_code(status_code)

    code = _parse_int(body)
    if code in TRANSACTION_STATUSES:
        return StatusResult(status=TRANSACTION_STATUSES[code])

    raise _error_for_code(code, STATUS_ERRORS)


def interpret_balance(status_code: int, body: str) -> BalanceResult:
    """
    Interpret a bulkcredit.aspx response.

    Raises:
        OneWayError: on non-2xx status, error code or unrecognised body
    """
    _check_status_code(status_code)

    credit_balance = _parse_int(body)
    if credit_balance is not None and credit_balance >= 0:
        return BalanceResult(credit_balance=credit_balance)

    raise _error_for_code(credit_balance, BALANCE_ERRORS)
