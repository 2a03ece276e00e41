from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

CALLBACK_EVENT = "event_callback"
URL_VERIFICATION = "url_verification"
UNMARSHALLING_ERROR = "unmarshalling_error"


@dataclass(frozen=True)
class EventsAPIURLVerificationEvent:
    token: str = ""
    challenge: str = ""
    type: str = ""


@dataclass(frozen=True)
class EventsAPICallbackEvent:
    type: str
    token: str = ""
    team_id: str = ""
    api_app_id: str = ""
    event_id: str = ""
    event_time: int = 0
    authed_users: list[str] = field(default_factory=list)
    inner_raw: bytes = b""
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UnmarshallingErrorEvent:
    error: BaseException


@dataclass(frozen=True)
class EventsAPIInnerEvent:
    type: str
    data: Any = None


@dataclass(frozen=True)
class EventsAPIEvent:
    token: str = ""
    team_id: str = ""
    type: str = ""
    data: Any = None
    inner_event: Optional[EventsAPIInnerEvent] = None

    @property
    def is_url_verification(self) -> bool:
        return self.type == URL_VERIFICATION

    @property
    def is_callback(self) -> bool:
        return self.type == CALLBACK_EVENT


def unmarshalling_error_event(
    error: BaseException,
    *,
    token: str = "",
    team_id: str = "",
) -> EventsAPIEvent:
    return EventsAPIEvent(
        token=token,
        team_id=team_id,
        type=UNMARSHALLING_ERROR,
        data=UnmarshallingErrorEvent(error=error),
    )
