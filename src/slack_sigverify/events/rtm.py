"""Legacy RTM event shapes.

These are consulted after the Events API shapes, so only tags the Events API
does not define end up here.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .decoding import as_bool, as_int, as_mapping, as_optional_str, as_str, as_str_list


@dataclass(frozen=True)
class HelloEvent:
    type: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "HelloEvent":
        return cls(type=as_str(payload, "type"), raw=dict(payload))


@dataclass(frozen=True)
class GoodbyeEvent:
    type: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GoodbyeEvent":
        return cls(type=as_str(payload, "type"), raw=dict(payload))


@dataclass(frozen=True)
class RTMMessageEvent:
    type: str
    channel: str
    user: str
    text: str
    timestamp: str
    thread_timestamp: Optional[str] = None
    subtype: Optional[str] = None
    bot_id: Optional[str] = None
    username: Optional[str] = None
    team: Optional[str] = None
    hidden: bool = False
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RTMMessageEvent":
        return cls(
            type=as_str(payload, "type"),
            channel=as_str(payload, "channel"),
            user=as_str(payload, "user"),
            text=as_str(payload, "text"),
            timestamp=as_str(payload, "ts"),
            thread_timestamp=as_optional_str(payload, "thread_ts"),
            subtype=as_optional_str(payload, "subtype"),
            bot_id=as_optional_str(payload, "bot_id"),
            username=as_optional_str(payload, "username"),
            team=as_optional_str(payload, "team"),
            hidden=as_bool(payload, "hidden"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class PresenceChangeEvent:
    type: str
    presence: str
    user: str
    users: list[str] = field(default_factory=list)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PresenceChangeEvent":
        return cls(
            type=as_str(payload, "type"),
            presence=as_str(payload, "presence"),
            user=as_str(payload, "user"),
            users=as_str_list(payload, "users"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class UserTypingEvent:
    type: str
    user: str
    channel: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserTypingEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=as_str(payload, "channel"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class ChannelInfo:
    id: str
    name: str
    created: int = 0
    creator: Optional[str] = None
    is_channel: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ChannelInfo":
        return cls(
            id=as_str(payload, "id"),
            name=as_str(payload, "name"),
            created=as_int(payload, "created"),
            creator=as_optional_str(payload, "creator"),
            is_channel=as_bool(payload, "is_channel"),
        )


@dataclass(frozen=True)
class ChannelCreatedEvent:
    type: str
    channel: ChannelInfo
    event_timestamp: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ChannelCreatedEvent":
        return cls(
            type=as_str(payload, "type"),
            channel=ChannelInfo.from_payload(as_mapping(payload, "channel")),
            event_timestamp=as_str(payload, "event_ts"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class ChannelDeletedEvent:
    type: str
    channel: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ChannelDeletedEvent":
        return cls(
            type=as_str(payload, "type"),
            channel=as_str(payload, "channel"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class ChannelRenameEvent:
    type: str
    channel: ChannelInfo
    event_timestamp: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ChannelRenameEvent":
        return cls(
            type=as_str(payload, "type"),
            channel=ChannelInfo.from_payload(as_mapping(payload, "channel")),
            event_timestamp=as_str(payload, "event_ts"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class TeamJoinEvent:
    type: str
    user: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TeamJoinEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_mapping(payload, "user"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class IMCreatedEvent:
    type: str
    user: str
    channel: ChannelInfo
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "IMCreatedEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=ChannelInfo.from_payload(as_mapping(payload, "channel")),
            raw=dict(payload),
        )
