from ..errors import (
    BadSignatureError,
    StaleTimestampError,
    UnknownInnerEventError,
    UnmarshallingError,
    WebhookChallengeError,
    WebhookError,
)
from .challenge import build_challenge_response, extract_challenge
from .receiver import WebhookReceiver, WebhookResponse
from .security import (
    build_signing_base,
    compute_signature,
    is_fresh,
    is_valid_signature,
    verify_signature,
    verify_timestamp,
)
from .verifier import SignatureVerifier, verify_and_parse

__all__ = [
    "BadSignatureError",
    "SignatureVerifier",
    "StaleTimestampError",
    "UnknownInnerEventError",
    "UnmarshallingError",
    "WebhookChallengeError",
    "WebhookError",
    "WebhookReceiver",
    "WebhookResponse",
    "build_challenge_response",
    "build_signing_base",
    "compute_signature",
    "extract_challenge",
    "is_fresh",
    "is_valid_signature",
    "verify_and_parse",
    "verify_signature",
    "verify_timestamp",
]
