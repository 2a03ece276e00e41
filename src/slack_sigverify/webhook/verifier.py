import logging
from typing import Mapping, Optional, Sequence

from ..clock import Clock
from ..config import VerifierConfig
from ..errors import BadSignatureError, StaleTimestampError
from ..events import EventsAPIEvent, EventTypeRegistry, default_registries, parse_event
from ..exceptions import ConfigurationError
from .security import (
    DEFAULT_TOLERANCE_SECONDS,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    SigningSecret,
    get_header,
    verify_signature,
    verify_timestamp,
)

logger = logging.getLogger(__name__)


def verify_and_parse(
    raw_body: bytes,
    signing_secret: SigningSecret,
    timestamp: str,
    signature: str,
    *,
    clock: Optional[Clock] = None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    reject_malformed_timestamp: bool = False,
    registries: Optional[Sequence[EventTypeRegistry]] = None,
) -> EventsAPIEvent:
    """Authenticate an Events API request and decode its body.

    Checks run in a fixed order: freshness, signature, envelope, inner
    event. Nothing in the body is interpreted until the first two pass, and
    the bytes that were signed are the bytes that get decoded.

    Raises ``StaleTimestampError``, ``BadSignatureError``,
    ``UnmarshallingError`` or ``UnknownInnerEventError``. Each carries the
    best-effort event on ``.event``; for the first two it is empty.
    """
    body = bytes(raw_body)
    try:
        verify_timestamp(
            timestamp,
            clock=clock,
            tolerance_seconds=tolerance_seconds,
            reject_malformed=reject_malformed_timestamp,
        )
        verify_signature(signing_secret, timestamp, body, signature)
    except (StaleTimestampError, BadSignatureError) as exc:
        exc.event = EventsAPIEvent()
        logger.debug("rejected events api request: %s", exc)
        raise
    return parse_event(body, registries=registries)


class SignatureVerifier:
    def __init__(
        self,
        config: VerifierConfig,
        *,
        clock: Optional[Clock] = None,
        registries: Optional[Sequence[EventTypeRegistry]] = None,
    ) -> None:
        if not config.secret_bytes:
            raise ConfigurationError("signing_secret is required")
        self._config = config
        self._clock = clock
        if registries is None:
            registries = default_registries(include_rtm=config.use_rtm_registry)
        self._registries = tuple(registries)

    @property
    def config(self) -> VerifierConfig:
        return self._config

    @property
    def registries(self) -> Sequence[EventTypeRegistry]:
        return self._registries

    def verify_and_parse(self, raw_body: bytes, timestamp: str, signature: str) -> EventsAPIEvent:
        return verify_and_parse(
            raw_body,
            self._config.secret_bytes,
            timestamp,
            signature,
            clock=self._clock,
            tolerance_seconds=self._config.tolerance_seconds,
            reject_malformed_timestamp=self._config.reject_malformed_timestamp,
            registries=self._registries,
        )

    def verify_request(self, headers: Mapping[str, str], raw_body: bytes) -> EventsAPIEvent:
        timestamp = get_header(headers, HEADER_TIMESTAMP)
        signature = get_header(headers, HEADER_SIGNATURE)
        return self.verify_and_parse(raw_body, timestamp or "", signature or "")
