import enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Urgency(str, enum.Enum):
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def tint(self) -> str:
        return _URGENCY_TINTS[self]


class RequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    ATTENDED = "ATTENDED"
    RESOLVED = "RESOLVED"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def tint(self) -> str:
        return _STATUS_TINTS[self]

    @property
    def attendance_text(self) -> str:
        if self is RequestStatus.PENDING:
            return "Not Attended"
        return "Attended"

    @property
    def attendance_tint(self) -> str:
        # Same palette as the status chip; pending reads as "not attended".
        return _STATUS_TINTS[self]


class RequestFilter(str, enum.Enum):
    ALL = "ALL"
    PENDING = "PENDING"
    ATTENDED = "ATTENDED"
    RESOLVED = "RESOLVED"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def matches(self, status: RequestStatus) -> bool:
        if self is RequestFilter.ALL:
            return True
        return status.value == self.value


_URGENCY_TINTS = {
    Urgency.NORMAL: "blue",
    Urgency.HIGH: "orange",
    Urgency.CRITICAL: "red",
}

_STATUS_TINTS = {
    RequestStatus.PENDING: "orange",
    RequestStatus.ATTENDED: "teal",
    RequestStatus.RESOLVED: "green",
}


class AssistanceRequest(BaseModel):
    """One resident's help request.

    Everything except ``status`` is frozen once the record exists; the
    request store owns status changes.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, frozen=True)
    resident_name: str = Field(frozen=True)
    room: str = Field(frozen=True)
    request_type: str = Field(frozen=True)
    avatar_url: str | None = Field(default=None, frozen=True)
    urgency: Urgency = Field(frozen=True)
    status: RequestStatus = RequestStatus.PENDING
    time_ago: str = Field(frozen=True)
    note: str = Field(default="", frozen=True)

    @property
    def initials(self) -> str:
        tokens = [token for token in self.resident_name.split(" ") if token]
        return "".join(token[0] for token in tokens[:2])
