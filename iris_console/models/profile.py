from pydantic import BaseModel, ConfigDict

from .request import AssistanceRequest, RequestStatus


class ResidentProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    room: str
    age: int
    communication_style: str
    care_notes: str
    emergency_contact: str


class ResidentProfileContext(BaseModel):
    """A profile joined with the resident's request history, built per view."""

    model_config = ConfigDict(frozen=True)

    profile: ResidentProfile
    history: tuple[AssistanceRequest, ...] = ()

    @property
    def id(self) -> str:
        return self.profile.name

    @property
    def pending_count(self) -> int:
        return self._count(RequestStatus.PENDING)

    @property
    def attended_count(self) -> int:
        return self._count(RequestStatus.ATTENDED)

    @property
    def resolved_count(self) -> int:
        return self._count(RequestStatus.RESOLVED)

    def _count(self, status: RequestStatus) -> int:
        return sum(1 for item in self.history if item.status == status)
