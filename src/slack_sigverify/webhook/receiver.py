import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from ..errors import (
    BadSignatureError,
    StaleTimestampError,
    UnknownInnerEventError,
    UnmarshallingError,
    WebhookChallengeError,
    WebhookError,
)
from ..events import EventsAPIEvent
from .challenge import build_challenge_response, extract_challenge
from .verifier import SignatureVerifier

logger = logging.getLogger(__name__)

EventHandler = Callable[[EventsAPIEvent], Any]


@dataclass(frozen=True)
class WebhookResponse:
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)
    event: Optional[EventsAPIEvent] = None
    error: Optional[WebhookError] = None


class WebhookReceiver:
    """Turns a raw Events API request into the response the server should send.

    Authentication failures become 401 without details, undecodable bodies
    400, and unknown inner events are acknowledged with 200 so Slack does
    not retry them.
    """

    def __init__(
        self,
        verifier: SignatureVerifier,
        *,
        handler: Optional[EventHandler] = None,
    ) -> None:
        self._verifier = verifier
        self._handler = handler

    def handle(self, headers: Mapping[str, str], raw_body: bytes) -> WebhookResponse:
        try:
            event = self._verifier.verify_request(headers, raw_body)
        except (StaleTimestampError, BadSignatureError) as exc:
            logger.info("rejected unauthenticated events api request: %s", type(exc).__name__)
            return WebhookResponse(401, {"ok": False, "error": "invalid_request"}, event=exc.event, error=exc)
        except UnmarshallingError as exc:
            logger.info("rejected undecodable events api request: %s", exc)
            return WebhookResponse(400, {"ok": False, "error": "invalid_payload"}, event=exc.event, error=exc)
        except UnknownInnerEventError as exc:
            team_id = exc.event.team_id if exc.event is not None else ""
            logger.warning("unknown inner event type %r from team %r", exc.event_type, team_id)
            return WebhookResponse(200, {"ok": True}, event=exc.event, error=exc)

        if event.is_url_verification:
            try:
                body = build_challenge_response(extract_challenge(event) or "")
            except WebhookChallengeError as exc:
                return WebhookResponse(400, {"ok": False, "error": "invalid_payload"}, event=event, error=exc)
            return WebhookResponse(200, body, event=event)

        if self._handler is not None:
            self._handler(event)
        return WebhookResponse(200, {"ok": True}, event=event)
