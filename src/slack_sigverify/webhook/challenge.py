from typing import Any, Dict, Optional

from ..errors import WebhookChallengeError
from ..events.types import EventsAPIEvent, EventsAPIURLVerificationEvent


def extract_challenge(event: EventsAPIEvent) -> Optional[str]:
    if not event.is_url_verification:
        return None
    data: Any = event.data
    if isinstance(data, EventsAPIURLVerificationEvent) and data.challenge:
        return data.challenge
    return None


def build_challenge_response(challenge: str) -> Dict[str, str]:
    if not challenge:
        raise WebhookChallengeError("challenge is required")
    return {"challenge": challenge}
