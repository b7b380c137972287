from ..models.catalog import Catalog
from ..models.profile import ResidentProfile, ResidentProfileContext
from ..models.request import AssistanceRequest
from .request_store import RequestStore


def profile_for(request: AssistanceRequest, catalog: Catalog) -> ResidentProfile:
    entry = catalog.profiles.get(request.resident_name, catalog.default_profile)
    return ResidentProfile(
        name=request.resident_name,
        room=request.room,
        age=entry.age,
        communication_style=entry.communication_style,
        care_notes=entry.care_notes,
        emergency_contact=entry.emergency_contact,
    )


def build_profile_context(store: RequestStore, request: AssistanceRequest) -> ResidentProfileContext:
    return ResidentProfileContext(
        profile=profile_for(request, store.catalog),
        history=tuple(store.history_for(request.resident_name)),
    )
