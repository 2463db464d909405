"""
Twilio message variants.

Messages are immutable: every ``with_*`` builder returns a new instance, so a
message handed to the channel can never change afterwards.
"""

from typing import ClassVar, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class TwilioMessage(BaseModel):
    """
    Base Twilio message.

    ``content`` is the text body for SMS/Notify and the TwiML URL for calls.
    """

    content: str = ""
    from_number: Optional[str] = None

    status_callback: Optional[str] = None
    status_callback_method: Optional[str] = None
    application_sid: Optional[str] = None
    max_price: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls, content: str = ""):
        """Named constructor, e.g. ``TwilioSmsMessage.create("Hello")``."""
        return cls(content=content)

    def _with(self, **changes):
        return self.model_copy(update=changes)

    def with_content(self, content: str):
        return self._with(content=content)

    def with_from(self, from_number: str):
        return self._with(from_number=from_number)

    def with_status_callback(self, status_callback: str):
        return self._with(status_callback=status_callback)

    def with_status_callback_method(self, method: str):
        return self._with(status_callback_method=method)

    def with_application_sid(self, application_sid: str):
        return self._with(application_sid=application_sid)

    def with_max_price(self, max_price: float):
        return self._with(max_price=max_price)

    def get_from(self) -> Optional[str]:
        return self.from_number

    def get_service_sid(self) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(content={self.content!r}, from={self.from_number})"


class TwilioSmsMessage(TwilioMessage):
    """SMS message sent through ``messages.create``."""

    provide_feedback: Optional[bool] = None
    validity_period: Optional[int] = None

    def with_provide_feedback(self, provide_feedback: bool = True):
        return self._with(provide_feedback=provide_feedback)

    def with_validity_period(self, validity_period: int):
        """Seconds the message may stay queued before Twilio drops it."""
        return self._with(validity_period=validity_period)


class TwilioMmsMessage(TwilioSmsMessage):
    """SMS message with media attachments."""

    media_url: Optional[List[str]] = None

    def with_media_url(self, media_url: Union[str, List[str]]):
        urls = [media_url] if isinstance(media_url, str) else list(media_url)
        return self._with(media_url=urls)


class TwilioNotifyMessage(TwilioMessage):
    """Message broadcast through a Twilio Notify service."""

    service_sid: Optional[str] = None

    def with_service_sid(self, service_sid: str):
        return self._with(service_sid=service_sid)

    def get_service_sid(self) -> Optional[str]:
        return self.service_sid


class TwilioCallMessage(TwilioMessage):
    """
    Programmatic voice call.
    ``content`` holds the URL Twilio fetches TwiML from when the call connects.
    """

    STATUS_CANCELED: ClassVar[str] = "canceled"
    STATUS_COMPLETED: ClassVar[str] = "completed"

    method: Optional[str] = None
    status: Optional[str] = None
    fallback_url: Optional[str] = None
    fallback_method: Optional[str] = None

    def with_url(self, url: str):
        return self.with_content(url)

    def with_method(self, method: str):
        return self._with(method=method)

    def with_status(self, status: str):
        return self._with(status=status)

    def with_fallback_url(self, fallback_url: str):
        return self._with(fallback_url=fallback_url)

    def with_fallback_method(self, fallback_method: str):
        return self._with(fallback_method=fallback_method)


# Closed set of messages the channel knows how to dispatch
TwilioMessageVariant = Union[TwilioSmsMessage, TwilioNotifyMessage, TwilioCallMessage]
