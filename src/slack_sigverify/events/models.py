from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .decoding import (
    as_bool,
    as_mapping,
    as_mapping_list,
    as_optional_mapping,
    as_optional_str,
    as_str,
    as_str_list,
)


@dataclass(frozen=True)
class AppMentionEvent:
    type: str
    user: str
    text: str
    timestamp: str
    channel: str
    event_timestamp: str
    thread_timestamp: Optional[str] = None
    bot_id: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AppMentionEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            text=as_str(payload, "text"),
            timestamp=as_str(payload, "ts"),
            channel=as_str(payload, "channel"),
            event_timestamp=as_str(payload, "event_ts"),
            thread_timestamp=as_optional_str(payload, "thread_ts"),
            bot_id=as_optional_str(payload, "bot_id"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class AppUninstalledEvent:
    type: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AppUninstalledEvent":
        return cls(type=as_str(payload, "type"), raw=dict(payload))


@dataclass(frozen=True)
class GridMigrationFinishedEvent:
    type: str
    enterprise_id: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GridMigrationFinishedEvent":
        return cls(
            type=as_str(payload, "type"),
            enterprise_id=as_str(payload, "enterprise_id"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class GridMigrationStartedEvent:
    type: str
    enterprise_id: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GridMigrationStartedEvent":
        return cls(
            type=as_str(payload, "type"),
            enterprise_id=as_str(payload, "enterprise_id"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class SharedLink:
    domain: str
    url: str


@dataclass(frozen=True)
class LinkSharedEvent:
    type: str
    user: str
    timestamp: str
    channel: str
    message_timestamp: str
    thread_timestamp: Optional[str] = None
    links: list[SharedLink] = field(default_factory=list)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LinkSharedEvent":
        links = [
            SharedLink(domain=as_str(link, "domain"), url=as_str(link, "url"))
            for link in as_mapping_list(payload, "links")
        ]
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            timestamp=as_str(payload, "ts"),
            channel=as_str(payload, "channel"),
            message_timestamp=as_str(payload, "message_ts"),
            thread_timestamp=as_optional_str(payload, "thread_ts"),
            links=links,
            raw=dict(payload),
        )


@dataclass(frozen=True)
class MemberJoinedChannelEvent:
    type: str
    user: str
    channel: str
    channel_type: str
    team: str
    inviter: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MemberJoinedChannelEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=as_str(payload, "channel"),
            channel_type=as_str(payload, "channel_type"),
            team=as_str(payload, "team"),
            inviter=as_optional_str(payload, "inviter"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class MemberLeftChannelEvent:
    type: str
    user: str
    channel: str
    channel_type: str
    team: str
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MemberLeftChannelEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=as_str(payload, "channel"),
            channel_type=as_str(payload, "channel_type"),
            team=as_str(payload, "team"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class MessageEvent:
    """Events API ``message`` event, including its subtypes."""

    type: str
    user: str
    text: str
    timestamp: str
    channel: str
    channel_type: str
    event_timestamp: str
    thread_timestamp: Optional[str] = None
    subtype: Optional[str] = None
    bot_id: Optional[str] = None
    username: Optional[str] = None
    hidden: bool = False
    message: Optional[Mapping[str, Any]] = None
    previous_message: Optional[Mapping[str, Any]] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MessageEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            text=as_str(payload, "text"),
            timestamp=as_str(payload, "ts"),
            channel=as_str(payload, "channel"),
            channel_type=as_str(payload, "channel_type"),
            event_timestamp=as_str(payload, "event_ts"),
            thread_timestamp=as_optional_str(payload, "thread_ts"),
            subtype=as_optional_str(payload, "subtype"),
            bot_id=as_optional_str(payload, "bot_id"),
            username=as_optional_str(payload, "username"),
            hidden=as_bool(payload, "hidden"),
            message=as_optional_mapping(payload, "message"),
            previous_message=as_optional_mapping(payload, "previous_message"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class PinAddedEvent:
    type: str
    user: str
    channel: str
    event_timestamp: str
    has_pins: bool = False
    item: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PinAddedEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=as_str(payload, "channel_id"),
            event_timestamp=as_str(payload, "event_ts"),
            has_pins=as_bool(payload, "has_pins"),
            item=as_mapping(payload, "item"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class PinRemovedEvent:
    type: str
    user: str
    channel: str
    event_timestamp: str
    has_pins: bool = False
    item: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PinRemovedEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            channel=as_str(payload, "channel_id"),
            event_timestamp=as_str(payload, "event_ts"),
            has_pins=as_bool(payload, "has_pins"),
            item=as_mapping(payload, "item"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class ReactionItem:
    type: str
    channel: Optional[str] = None
    timestamp: Optional[str] = None
    file: Optional[str] = None
    file_comment: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ReactionItem":
        return cls(
            type=as_str(payload, "type"),
            channel=as_optional_str(payload, "channel"),
            timestamp=as_optional_str(payload, "ts"),
            file=as_optional_str(payload, "file"),
            file_comment=as_optional_str(payload, "file_comment"),
        )


@dataclass(frozen=True)
class ReactionAddedEvent:
    type: str
    user: str
    reaction: str
    item: ReactionItem
    event_timestamp: str
    item_user: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ReactionAddedEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            reaction=as_str(payload, "reaction"),
            item=ReactionItem.from_payload(as_mapping(payload, "item")),
            event_timestamp=as_str(payload, "event_ts"),
            item_user=as_optional_str(payload, "item_user"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class ReactionRemovedEvent:
    type: str
    user: str
    reaction: str
    item: ReactionItem
    event_timestamp: str
    item_user: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ReactionRemovedEvent":
        return cls(
            type=as_str(payload, "type"),
            user=as_str(payload, "user"),
            reaction=as_str(payload, "reaction"),
            item=ReactionItem.from_payload(as_mapping(payload, "item")),
            event_timestamp=as_str(payload, "event_ts"),
            item_user=as_optional_str(payload, "item_user"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class TokensRevokedEvent:
    type: str
    event_timestamp: str
    oauth_tokens: list[str] = field(default_factory=list)
    bot_tokens: list[str] = field(default_factory=list)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TokensRevokedEvent":
        tokens = as_mapping(payload, "tokens")
        return cls(
            type=as_str(payload, "type"),
            event_timestamp=as_str(payload, "event_ts"),
            oauth_tokens=as_str_list(tokens, "oauth"),
            bot_tokens=as_str_list(tokens, "bot"),
            raw=dict(payload),
        )
