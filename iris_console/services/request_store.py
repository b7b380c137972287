from __future__ import annotations

import logging
from typing import Iterable, Sequence, TypeVar
from uuid import UUID

from ..catalog import default_catalog, load_catalog
from ..config import Settings, get_settings
from ..errors import InvalidTransition, RequestNotFound
from ..models.catalog import Catalog, RequestTemplate, ResidentTemplate
from ..models.request import AssistanceRequest, RequestFilter, RequestStatus, Urgency
from .random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

JUST_NOW = "Just now"

_FALLBACK_RESIDENT = ResidentTemplate(name="Resident", room="A-000")
_FALLBACK_REQUEST = RequestTemplate(
    request_type="General Assistance", note="Needs caregiver support."
)
_URGENCIES = (Urgency.NORMAL, Urgency.HIGH, Urgency.CRITICAL)
_NEXT_STATUS = {
    RequestStatus.PENDING: RequestStatus.ATTENDED,
    RequestStatus.ATTENDED: RequestStatus.RESOLVED,
}


def catalog_from_settings(settings: Settings) -> Catalog:
    if settings.CATALOG_PATH:
        return load_catalog(settings.CATALOG_PATH)
    return default_catalog()


class RequestStore:
    """Ordered in-memory collection of assistance requests, newest first."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        random_source: RandomSource | None = None,
        *,
        max_retained: int | None = None,
        requests: Iterable[AssistanceRequest] | None = None,
    ):
        settings = get_settings()
        self.catalog = catalog if catalog is not None else catalog_from_settings(settings)
        self.random_source = random_source or SystemRandomSource(settings.RANDOM_SEED)
        self.max_retained = (
            max_retained if max_retained is not None else settings.MAX_RETAINED_REQUESTS
        )
        if self.max_retained < 1:
            raise ValueError("max_retained must be at least 1")
        if requests is None:
            requests = [seed.to_request() for seed in self.catalog.seed_requests]
        self._requests: list[AssistanceRequest] = list(requests)
        self._trim()

    def __len__(self) -> int:
        return len(self._requests)

    def list(self) -> list[AssistanceRequest]:
        return list(self._requests)

    def filtered(self, request_filter: RequestFilter) -> list[AssistanceRequest]:
        return [r for r in self._requests if request_filter.matches(r.status)]

    def pending_count(self) -> int:
        return sum(1 for r in self._requests if r.status == RequestStatus.PENDING)

    def critical_count(self) -> int:
        return sum(1 for r in self._requests if r.urgency == Urgency.CRITICAL)

    def history_for(self, resident_name: str) -> list[AssistanceRequest]:
        return [r for r in self._requests if r.resident_name == resident_name]

    def get(self, request_id: UUID) -> AssistanceRequest:
        for request in self._requests:
            if request.id == request_id:
                return request
        raise RequestNotFound(request_id)

    def simulate_incoming(self) -> AssistanceRequest:
        # Draw order is resident, request type, urgency.
        resident = self._pick(self.catalog.residents) or _FALLBACK_RESIDENT
        template = self._pick(self.catalog.request_types) or _FALLBACK_REQUEST
        urgency = self._pick(_URGENCIES) or Urgency.NORMAL

        request = AssistanceRequest(
            resident_name=resident.name,
            room=resident.room,
            request_type=template.request_type,
            avatar_url=resident.avatar_url,
            urgency=urgency,
            status=RequestStatus.PENDING,
            time_ago=JUST_NOW,
            note=template.note,
        )
        self._requests.insert(0, request)
        evicted = self._trim()
        logger.info(
            "Simulated %s request %s for room %s (evicted %s)",
            urgency.value,
            request.id,
            request.room,
            evicted,
        )
        return request

    def advance_status(self, request_id: UUID) -> RequestStatus:
        request = self.get(request_id)
        next_status = _NEXT_STATUS.get(request.status)
        if next_status is None:
            raise InvalidTransition(request.status, "advance")
        previous = request.status
        request.status = next_status
        logger.info("Request %s moved %s -> %s", request.id, previous.value, next_status.value)
        return next_status

    def attend(self, request_id: UUID) -> AssistanceRequest:
        request = self.get(request_id)
        if not self.can_attend(request):
            raise InvalidTransition(request.status, "attend")
        self.advance_status(request_id)
        return request

    def resolve(self, request_id: UUID) -> AssistanceRequest:
        request = self.get(request_id)
        if not self.can_resolve(request):
            raise InvalidTransition(request.status, "resolve")
        self.advance_status(request_id)
        return request

    @staticmethod
    def can_attend(request: AssistanceRequest) -> bool:
        return request.status == RequestStatus.PENDING

    @staticmethod
    def can_resolve(request: AssistanceRequest) -> bool:
        return request.status == RequestStatus.ATTENDED

    def _pick(self, options: Sequence[T]) -> T | None:
        if not options:
            return None
        return options[self.random_source.pick(len(options))]

    def _trim(self) -> int:
        overflow = len(self._requests) - self.max_retained
        if overflow <= 0:
            return 0
        del self._requests[-overflow:]
        return overflow
