import hashlib
import hmac
import re
from typing import Mapping, Optional, Union

from ..clock import DEFAULT_CLOCK, Clock
from ..encoding import encode_text
from ..errors import BadSignatureError, StaleTimestampError

HEADER_TIMESTAMP = "x-slack-request-timestamp"
HEADER_SIGNATURE = "x-slack-signature"

SIGNATURE_VERSION = "v0"
DEFAULT_TOLERANCE_SECONDS = 300

_TIMESTAMP_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

SigningSecret = Union[str, bytes]


def get_header(headers: Mapping[str, str], key: str) -> Optional[str]:
    key_lower = key.lower()
    for name, value in headers.items():
        if name.lower() == key_lower:
            return value
    return None


def parse_timestamp(timestamp: str) -> Optional[int]:
    if not isinstance(timestamp, str) or not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        return None
    value = int(timestamp)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def is_fresh(
    timestamp: str,
    *,
    clock: Optional[Clock] = None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    reject_malformed: bool = False,
) -> bool:
    """Report whether ``timestamp`` falls inside the replay window.

    A timestamp that does not parse is treated as fresh unless
    ``reject_malformed`` is set: the signature check rejects it anyway, since
    the signed base string will not match.
    """
    value = parse_timestamp(timestamp)
    if value is None:
        return not reject_malformed
    now = (clock or DEFAULT_CLOCK).now_unix()
    return abs(now - value) <= tolerance_seconds


def verify_timestamp(
    timestamp: str,
    *,
    clock: Optional[Clock] = None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    reject_malformed: bool = False,
) -> None:
    if not is_fresh(
        timestamp,
        clock=clock,
        tolerance_seconds=tolerance_seconds,
        reject_malformed=reject_malformed,
    ):
        raise StaleTimestampError("timestamp is outside allowed range")


def build_signing_base(timestamp: str, raw_body: bytes) -> bytes:
    return f"{SIGNATURE_VERSION}:".encode("ascii") + encode_text(timestamp) + b":" + bytes(raw_body)


def compute_signature(signing_secret: SigningSecret, timestamp: str, raw_body: bytes) -> str:
    digest = hmac.new(encode_text(signing_secret), build_signing_base(timestamp, raw_body), hashlib.sha256)
    return f"{SIGNATURE_VERSION}={digest.hexdigest()}"


def is_valid_signature(
    signing_secret: SigningSecret,
    timestamp: str,
    raw_body: bytes,
    signature: str,
) -> bool:
    expected = compute_signature(signing_secret, timestamp, raw_body).encode("ascii")
    return hmac.compare_digest(expected, encode_text(signature))


def verify_signature(
    signing_secret: SigningSecret,
    timestamp: str,
    raw_body: bytes,
    signature: str,
) -> None:
    if not is_valid_signature(signing_secret, timestamp, raw_body, signature):
        raise BadSignatureError("signature verification failed")
