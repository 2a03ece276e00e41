from .envelope import parse_outer_event
from .models import (
    AppMentionEvent,
    AppUninstalledEvent,
    GridMigrationFinishedEvent,
    GridMigrationStartedEvent,
    LinkSharedEvent,
    MemberJoinedChannelEvent,
    MemberLeftChannelEvent,
    MessageEvent,
    PinAddedEvent,
    PinRemovedEvent,
    ReactionAddedEvent,
    ReactionItem,
    ReactionRemovedEvent,
    SharedLink,
    TokensRevokedEvent,
)
from .parser import parse_event, parse_inner_event
from .registry import (
    EVENTS_API_REGISTRY,
    RTM_REGISTRY,
    EventTypeRegistry,
    InnerEventModel,
    default_events_api_registry,
    default_registries,
    default_rtm_registry,
    resolve_event_model,
)
from .rtm import (
    ChannelCreatedEvent,
    ChannelDeletedEvent,
    ChannelInfo,
    ChannelRenameEvent,
    GoodbyeEvent,
    HelloEvent,
    IMCreatedEvent,
    PresenceChangeEvent,
    RTMMessageEvent,
    TeamJoinEvent,
    UserTypingEvent,
)
from .types import (
    CALLBACK_EVENT,
    UNMARSHALLING_ERROR,
    URL_VERIFICATION,
    EventsAPICallbackEvent,
    EventsAPIEvent,
    EventsAPIInnerEvent,
    EventsAPIURLVerificationEvent,
    UnmarshallingErrorEvent,
)

__all__ = [
    "AppMentionEvent",
    "AppUninstalledEvent",
    "CALLBACK_EVENT",
    "ChannelCreatedEvent",
    "ChannelDeletedEvent",
    "ChannelInfo",
    "ChannelRenameEvent",
    "EVENTS_API_REGISTRY",
    "EventTypeRegistry",
    "EventsAPICallbackEvent",
    "EventsAPIEvent",
    "EventsAPIInnerEvent",
    "EventsAPIURLVerificationEvent",
    "GoodbyeEvent",
    "GridMigrationFinishedEvent",
    "GridMigrationStartedEvent",
    "HelloEvent",
    "IMCreatedEvent",
    "InnerEventModel",
    "LinkSharedEvent",
    "MemberJoinedChannelEvent",
    "MemberLeftChannelEvent",
    "MessageEvent",
    "PinAddedEvent",
    "PinRemovedEvent",
    "PresenceChangeEvent",
    "RTMMessageEvent",
    "RTM_REGISTRY",
    "ReactionAddedEvent",
    "ReactionItem",
    "ReactionRemovedEvent",
    "SharedLink",
    "TeamJoinEvent",
    "TokensRevokedEvent",
    "UNMARSHALLING_ERROR",
    "URL_VERIFICATION",
    "UnmarshallingErrorEvent",
    "UserTypingEvent",
    "default_events_api_registry",
    "default_registries",
    "default_rtm_registry",
    "parse_event",
    "parse_inner_event",
    "parse_outer_event",
    "resolve_event_model",
]
