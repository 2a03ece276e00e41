from typing import Any, Mapping, Optional, Sequence

from ..errors import UnknownInnerEventError, UnmarshallingError
from .decoding import as_str, load_json
from .envelope import parse_outer_event
from .registry import EventTypeRegistry, default_registries, resolve_event_model
from .types import (
    EventsAPICallbackEvent,
    EventsAPIEvent,
    EventsAPIInnerEvent,
    unmarshalling_error_event,
)


def parse_event(
    raw_body: bytes,
    *,
    registries: Optional[Sequence[EventTypeRegistry]] = None,
) -> EventsAPIEvent:
    """Decode an already authenticated Events API body.

    Raises ``UnmarshallingError`` or ``UnknownInnerEventError``; both carry
    the best-effort event on ``.event``.
    """
    event = parse_outer_event(raw_body)
    if event.is_callback:
        return parse_inner_event(event.data, registries=registries)
    return event


def parse_inner_event(
    callback: EventsAPICallbackEvent,
    *,
    registries: Optional[Sequence[EventTypeRegistry]] = None,
) -> EventsAPIEvent:
    lookup = default_registries() if registries is None else registries
    payload, event_type = _load_inner_payload(callback)

    model = resolve_event_model(event_type, lookup)
    if model is None:
        raise UnknownInnerEventError(
            event_type,
            event=EventsAPIEvent(
                token=callback.token,
                team_id=callback.team_id,
                type=event_type,
                data=None,
            ),
        )

    try:
        data = model.from_payload(payload)
    except (LookupError, AttributeError, ValueError, TypeError) as exc:
        raise _inner_unmarshalling_error(callback, event_type, exc) from exc

    return EventsAPIEvent(
        token=callback.token,
        team_id=callback.team_id,
        type=callback.type,
        data=callback,
        inner_event=EventsAPIInnerEvent(type=event_type, data=data),
    )


def _load_inner_payload(callback: EventsAPICallbackEvent) -> tuple[Mapping[str, Any], str]:
    try:
        payload = load_json(callback.inner_raw)
        if not isinstance(payload, Mapping):
            raise TypeError("inner event must be a json object")
        return payload, as_str(payload, "type")
    except (ValueError, TypeError, RecursionError) as exc:
        raise _inner_unmarshalling_error(callback, "", exc) from exc


def _inner_unmarshalling_error(
    callback: EventsAPICallbackEvent,
    event_type: str,
    exc: BaseException,
) -> UnmarshallingError:
    return UnmarshallingError(
        f"error parsing inner event {event_type!r}: {exc}",
        cause=exc,
        event=unmarshalling_error_event(exc, token=callback.token, team_id=callback.team_id),
    )
