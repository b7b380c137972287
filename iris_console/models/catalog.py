from pydantic import BaseModel, ConfigDict, Field

from .request import AssistanceRequest, RequestStatus, Urgency


class CatalogModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ResidentTemplate(CatalogModel):
    name: str
    room: str
    avatar_url: str | None = None


class RequestTemplate(CatalogModel):
    request_type: str
    note: str


class ProfileEntry(CatalogModel):
    age: int = Field(ge=0)
    communication_style: str
    care_notes: str
    emergency_contact: str


class SeedRequest(CatalogModel):
    resident_name: str
    room: str
    request_type: str
    avatar_url: str | None = None
    urgency: Urgency
    status: RequestStatus
    time_ago: str
    note: str

    def to_request(self) -> AssistanceRequest:
        return AssistanceRequest(**self.model_dump())


class Catalog(CatalogModel):
    seed_requests: list[SeedRequest] = []
    residents: list[ResidentTemplate] = []
    request_types: list[RequestTemplate] = []
    profiles: dict[str, ProfileEntry] = {}
    default_profile: ProfileEntry
