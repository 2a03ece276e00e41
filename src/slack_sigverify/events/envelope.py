from typing import Any, Mapping

from ..errors import UnmarshallingError
from .decoding import as_int, as_str, as_str_list, scan_object
from .types import (
    CALLBACK_EVENT,
    EventsAPICallbackEvent,
    EventsAPIEvent,
    EventsAPIURLVerificationEvent,
    unmarshalling_error_event,
)


def parse_outer_event(raw_body: bytes) -> EventsAPIEvent:
    """Decode the outer Events API envelope.

    ``event_callback`` envelopes keep their nested ``event`` member as the
    untouched source bytes so the inner decoder can dispatch on its ``type``.
    Every other envelope type decodes into the url_verification shape; an
    unknown type is not an error at this layer.
    """
    try:
        members, fragments = scan_object(bytes(raw_body))
        return _build_outer_event(members, fragments)
    except (ValueError, TypeError, RecursionError) as exc:
        raise UnmarshallingError(
            f"events api envelope could not be decoded: {exc}",
            cause=exc,
            event=unmarshalling_error_event(exc),
        ) from exc


def _build_outer_event(members: Mapping[str, Any], fragments: Mapping[str, bytes]) -> EventsAPIEvent:
    event_type = as_str(members, "type")
    token = as_str(members, "token")
    team_id = as_str(members, "team_id")

    if event_type == CALLBACK_EVENT:
        data: Any = _parse_callback_event(members, fragments)
    else:
        data = EventsAPIURLVerificationEvent(
            token=token,
            challenge=as_str(members, "challenge"),
            type=event_type,
        )
    return EventsAPIEvent(token=token, team_id=team_id, type=event_type, data=data)


def _parse_callback_event(members: Mapping[str, Any], fragments: Mapping[str, bytes]) -> EventsAPICallbackEvent:
    if members.get("event") is None:
        raise ValueError("event_callback envelope has no inner event")
    return EventsAPICallbackEvent(
        type=as_str(members, "type"),
        token=as_str(members, "token"),
        team_id=as_str(members, "team_id"),
        api_app_id=as_str(members, "api_app_id"),
        event_id=as_str(members, "event_id"),
        event_time=as_int(members, "event_time"),
        authed_users=as_str_list(members, "authed_users"),
        inner_raw=fragments["event"],
        raw=dict(members),
    )
