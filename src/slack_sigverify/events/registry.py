import threading
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Sequence

from . import models, rtm


class InnerEventModel(Protocol):
    def from_payload(self, payload: Mapping[str, Any]) -> Any:
        ...


class EventTypeRegistry:
    """Maps an inner event ``type`` tag to the model that decodes it.

    Registries are seeded at start-up; request handling only reads them.
    """

    def __init__(self, entries: Optional[Mapping[str, InnerEventModel]] = None, *, name: str = "") -> None:
        self._models: Dict[str, InnerEventModel] = {}
        self._lock = threading.RLock()
        self.name = name
        for event_type, model in (entries or {}).items():
            self.register(event_type, model)

    def register(self, event_type: str, model: InnerEventModel) -> None:
        if not event_type:
            raise ValueError("event_type must not be empty")
        if not callable(getattr(model, "from_payload", None)):
            raise TypeError(f"event model for {event_type!r} must define from_payload()")
        with self._lock:
            self._models[event_type] = model

    def unregister(self, event_type: str) -> None:
        with self._lock:
            self._models.pop(event_type, None)

    def get(self, event_type: str) -> Optional[InnerEventModel]:
        with self._lock:
            return self._models.get(event_type)

    def __contains__(self, event_type: object) -> bool:
        with self._lock:
            return event_type in self._models

    def __len__(self) -> int:
        with self._lock:
            return len(self._models)

    def event_types(self) -> list[str]:
        with self._lock:
            return sorted(self._models)

    def copy(self, *, name: Optional[str] = None) -> "EventTypeRegistry":
        with self._lock:
            entries = dict(self._models)
        return EventTypeRegistry(entries, name=self.name if name is None else name)


def default_events_api_registry() -> EventTypeRegistry:
    return EventTypeRegistry(
        {
            "app_mention": models.AppMentionEvent,
            "app_uninstalled": models.AppUninstalledEvent,
            "grid_migration_finished": models.GridMigrationFinishedEvent,
            "grid_migration_started": models.GridMigrationStartedEvent,
            "link_shared": models.LinkSharedEvent,
            "member_joined_channel": models.MemberJoinedChannelEvent,
            "member_left_channel": models.MemberLeftChannelEvent,
            "message": models.MessageEvent,
            "pin_added": models.PinAddedEvent,
            "pin_removed": models.PinRemovedEvent,
            "reaction_added": models.ReactionAddedEvent,
            "reaction_removed": models.ReactionRemovedEvent,
            "tokens_revoked": models.TokensRevokedEvent,
        },
        name="events_api",
    )


def default_rtm_registry() -> EventTypeRegistry:
    return EventTypeRegistry(
        {
            "hello": rtm.HelloEvent,
            "goodbye": rtm.GoodbyeEvent,
            "message": rtm.RTMMessageEvent,
            "presence_change": rtm.PresenceChangeEvent,
            "user_typing": rtm.UserTypingEvent,
            "channel_created": rtm.ChannelCreatedEvent,
            "channel_deleted": rtm.ChannelDeletedEvent,
            "channel_rename": rtm.ChannelRenameEvent,
            "team_join": rtm.TeamJoinEvent,
            "im_created": rtm.IMCreatedEvent,
        },
        name="rtm",
    )


EVENTS_API_REGISTRY = default_events_api_registry()
RTM_REGISTRY = default_rtm_registry()


def default_registries(*, include_rtm: bool = True) -> Sequence[EventTypeRegistry]:
    # Events API first: both define "message" with different shapes.
    if include_rtm:
        return (EVENTS_API_REGISTRY, RTM_REGISTRY)
    return (EVENTS_API_REGISTRY,)


def resolve_event_model(
    event_type: str,
    registries: Iterable[EventTypeRegistry],
) -> Optional[InnerEventModel]:
    for registry in registries:
        model = registry.get(event_type)
        if model is not None:
            return model
    return None
