from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant
from app.models.trips.activity import Activity
from app.models.trips.link import Link
from app.schemas.trip.trip_schema import TripCreate, TripUpdate
from app.schemas.trip.activity import ActivityCreate
from app.schemas.trip.link import LinkCreate


class TripStore(ABC):
    """
    Persistence for trips and everything attached to them.

    Reads raise ``sqlalchemy.exc.NoResultFound`` when the row does not exist;
    any other failure surfaces as ``app.core.errors.StorageError``.
    """

    @abstractmethod
    async def create_trip(self, payload: TripCreate) -> UUID: ...

    @abstractmethod
    async def get_trip(self, trip_id: UUID) -> Trip: ...

    @abstractmethod
    async def update_trip(self, trip_id: UUID, payload: TripUpdate) -> None: ...

    @abstractmethod
    async def confirm_trip(self, trip_id: UUID) -> None: ...

    @abstractmethod
    async def confirm_participant(self, participant_id: UUID) -> None: ...

    @abstractmethod
    async def invite_participant_to_trip(self, trip_id: UUID, email: str) -> UUID: ...

    @abstractmethod
    async def get_participant(self, participant_id: UUID) -> Participant: ...

    @abstractmethod
    async def get_participants(self, trip_id: UUID) -> List[Participant]: ...

    @abstractmethod
    async def create_activity(self, trip_id: UUID, payload: ActivityCreate) -> UUID: ...

    @abstractmethod
    async def get_trip_activities(self, trip_id: UUID) -> List[Activity]: ...

    @abstractmethod
    async def create_trip_link(self, trip_id: UUID, payload: LinkCreate) -> UUID: ...

    @abstractmethod
    async def get_trip_links(self, trip_id: UUID) -> List[Link]: ...
