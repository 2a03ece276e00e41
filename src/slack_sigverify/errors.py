from typing import TYPE_CHECKING, Optional

from .exceptions import SlackSigVerifyError

if TYPE_CHECKING:
    from .events.types import EventsAPIEvent


class WebhookError(SlackSigVerifyError):
    """Base class for request rejections.

    ``event`` carries the best-effort populated event for the failure, so
    handlers can log or dead-letter without re-parsing the body.
    """

    def __init__(self, message: str, *, event: Optional["EventsAPIEvent"] = None) -> None:
        super().__init__(message)
        self.event = event


class StaleTimestampError(WebhookError):
    pass


class BadSignatureError(WebhookError):
    pass


class UnmarshallingError(WebhookError):
    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        event: Optional["EventsAPIEvent"] = None,
    ) -> None:
        super().__init__(message, event=event)
        self.cause = cause


class UnknownInnerEventError(WebhookError):
    def __init__(self, event_type: str, *, event: Optional["EventsAPIEvent"] = None) -> None:
        super().__init__(f"inner event does not exist: {event_type}", event=event)
        self.event_type = event_type


class WebhookChallengeError(WebhookError):
    pass
