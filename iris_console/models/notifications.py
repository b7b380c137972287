from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class LocalNotification(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: UUID = Field(default_factory=uuid4)
    title: str
    body: str
    delay_seconds: float = 2.0
    sound: bool = True
    request_id: UUID | None = None
    scheduled_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def deliver_at(self) -> datetime:
        return self.scheduled_at + timedelta(seconds=self.delay_seconds)
