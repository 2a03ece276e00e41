from .clock import DEFAULT_CLOCK, Clock, FixedClock, SystemClock
from .config import VerifierConfig
from .errors import (
    BadSignatureError,
    StaleTimestampError,
    UnknownInnerEventError,
    UnmarshallingError,
    WebhookChallengeError,
    WebhookError,
)
from .events import (
    EVENTS_API_REGISTRY,
    RTM_REGISTRY,
    AppMentionEvent,
    EventsAPICallbackEvent,
    EventsAPIEvent,
    EventsAPIInnerEvent,
    EventsAPIURLVerificationEvent,
    EventTypeRegistry,
    MessageEvent,
    UnmarshallingErrorEvent,
    default_events_api_registry,
    default_registries,
    default_rtm_registry,
    parse_event,
    parse_outer_event,
)
from .exceptions import ConfigurationError, SlackSigVerifyError
from .webhook import (
    SignatureVerifier,
    WebhookReceiver,
    WebhookResponse,
    build_challenge_response,
    compute_signature,
    is_fresh,
    verify_and_parse,
    verify_signature,
)

__all__ = [
    "AppMentionEvent",
    "BadSignatureError",
    "Clock",
    "ConfigurationError",
    "DEFAULT_CLOCK",
    "EVENTS_API_REGISTRY",
    "EventTypeRegistry",
    "EventsAPICallbackEvent",
    "EventsAPIEvent",
    "EventsAPIInnerEvent",
    "EventsAPIURLVerificationEvent",
    "FixedClock",
    "MessageEvent",
    "RTM_REGISTRY",
    "SignatureVerifier",
    "SlackSigVerifyError",
    "StaleTimestampError",
    "SystemClock",
    "UnknownInnerEventError",
    "UnmarshallingError",
    "UnmarshallingErrorEvent",
    "VerifierConfig",
    "WebhookChallengeError",
    "WebhookError",
    "WebhookReceiver",
    "WebhookResponse",
    "build_challenge_response",
    "compute_signature",
    "default_events_api_registry",
    "default_registries",
    "default_rtm_registry",
    "is_fresh",
    "parse_event",
    "parse_outer_event",
    "verify_and_parse",
    "verify_signature",
]
