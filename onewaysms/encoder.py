"""
Request URL building for the OneWaySMS HTTP API.

Follows the OneWaySMS API documentation (http://smsd2.onewaysms.sg/api.pdf).
Everything here is pure: no I/O, inputs are never modified.
"""

from urllib.parse import urlencode

from .config import ClientConfig
from .models import LanguageType, SendRequest, StatusRequest

# URL paths of the gateway endpoints
SEND_PATH = "api.aspx"
STATUS_PATH = "bulktrx.aspx"
BALANCE_PATH = "bulkcredit.aspx"


def detect_language_type(message: str) -> LanguageType:
    """
    Detect language type based on the byte length of each character.

    Any character taking more than one byte in UTF-8 makes the whole
    message unicode.
    """
    for char in message:
        if len(char.encode("utf-8", errors="surrogatepass")) > 1:
            return LanguageType.UNICODE
    return LanguageType.PLAIN


def message_to_hex(message: str) -> str:
    """
    Convert message into hexadecimal UTF-16 code units.

    Each code unit is padded to 4 lowercase hex digits, so characters outside
    the BMP come out as two units (a surrogate pair).

    Args:
        message: Text to encode

    Returns:
        Concatenated hex string, e.g. "Hi" -> "00480069"
    """
    data = message.encode("utf-16-be", errors="surrogatepass")
    return "".join(
        f"{int.from_bytes(data[i:i + 2], 'big'):04x}"
        for i in range(0, len(data), 2)
    )


def hex_to_message(encoded: str) -> str:
    """
    Decode a string produced by message_to_hex.

    Raises:
        ValueError: if the input is not a sequence of 4-digit hex groups
    """
    if len(encoded) % 4:
        raise ValueError(f"hex message length must be a multiple of 4, got {len(encoded)}")
    data = b"".join(
        int(encoded[i:i + 4], 16).to_bytes(2, "big")
        for i in range(0, len(encoded), 4)
    )
    return data.decode("utf-16-be", errors="surrogatepass")


def encode_message(message: str, language_type: LanguageType) -> str:
    """Hex-encode unicode messages, pass plain ones through."""
    if language_type is LanguageType.UNICODE:
        return message_to_hex(message)
    return message


def build_request_url(base_url: str, path: str, params: dict[str, str]) -> str:
    """Join base URL, endpoint path and URL-encoded query parameters."""
    return f"{base_url}/{path}?{urlencode(params)}"


def build_send_url(config: ClientConfig, request: SendRequest) -> str:
    """
    Build the MT (send SMS) request URL.

    Language type is detected from the message unless the request sets it.
    """
    language_type = request.language_type or detect_language_type(request.message)

    return build_request_url(config.base_url, SEND_PATH, {
        "apiusername": config.api_username,
        "apipassword": config.api_password,
        "senderid": request.sender_id or config.sender_id,
        "mobileno": ",".join(request.recipients),
        "languagetype": language_type.value,
        "message": encode_message(request.message, language_type),
    })


def build_status_url(config: ClientConfig, request: StatusRequest) -> str:
    """Build the transaction status request URL for an MT ID."""
    return build_request_url(config.base_url, STATUS_PATH, {
        "mtid": str(request.mt_id),
    })


def build_balance_url(config: ClientConfig) -> str:
    """Build the credit balance request URL for the configured account."""
    return build_request_url(config.base_url, BALANCE_PATH, {
        "apiusername": config.api_username,
        "apipassword": config.api_password,
    })
