"""
Channel events.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class NotificationFailed(BaseModel):
    """
    Dispatched when a notification could not be sent through a channel.
    ``data`` carries the error text under ``message`` and the raised
    exception under ``exception``.
    """
    notifiable: Any
    notification: Any
    channel: str
    data: Dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def __repr__(self) -> str:
        return (
            f"NotificationFailed(channel={self.channel}, "
            f"notification={type(self.notification).__name__}, error={self.data.get('message')})"
        )
