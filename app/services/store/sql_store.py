from contextlib import asynccontextmanager
from typing import AsyncIterator, List
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from app.core.errors import StorageError
from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant
from app.models.trips.activity import Activity
from app.models.trips.link import Link
from app.schemas.trip.trip_schema import TripCreate, TripUpdate
from app.schemas.trip.activity import ActivityCreate
from app.schemas.trip.link import LinkCreate
from app.services.store.base import TripStore


class SQLTripStore(TripStore):
    """TripStore backed by SQLAlchemy; every call runs on its own session."""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        session = self.session_factory()
        try:
            yield session
        except NoResultFound:
            raise
        except SQLAlchemyError as exc:
            await session.rollback()
            raise StorageError(f"store: failed to {action}: {exc}") from exc
        finally:
            await session.close()

    async def create_trip(self, payload: TripCreate) -> UUID:
        # first occurrence wins so each invitee gets exactly one participant row
        emails = list(dict.fromkeys(str(email) for email in payload.emails_to_invite))

        async with self._session("create trip") as session:
            async with session.begin():
                trip_id = await self._insert_trip(session, payload)
                await self._insert_participants(session, trip_id, emails)
        return trip_id

    async def _insert_trip(self, session: AsyncSession, payload: TripCreate) -> UUID:
        trip = Trip(
            destination=payload.destination,
            owner_name=payload.owner_name,
            owner_email=str(payload.owner_email),
            starts_at=payload.starts_at,
            ends_at=payload.ends_at,
            is_confirmed=False,
        )
        session.add(trip)
        await session.flush()
        return trip.id

    async def _insert_participants(self, session: AsyncSession, trip_id: UUID, emails: List[str]) -> None:
        if not emails:
            return
        session.add_all(
            [Participant(trip_id=trip_id, email=email, is_confirmed=False) for email in emails]
        )
        await session.flush()

    async def get_trip(self, trip_id: UUID) -> Trip:
        async with self._session("get trip") as session:
            result = await session.execute(select(Trip).where(Trip.id == trip_id))
            return result.scalar_one()

    async def update_trip(self, trip_id: UUID, payload: TripUpdate) -> None:
        async with self._session("update trip") as session:
            result = await session.execute(
                update(Trip)
                .where(Trip.id == trip_id)
                .values(
                    destination=payload.destination,
                    starts_at=payload.starts_at,
                    ends_at=payload.ends_at,
                )
            )
            if result.rowcount == 0:
                raise NoResultFound(f"No trip with id {trip_id}")
            await session.commit()

    async def confirm_trip(self, trip_id: UUID) -> None:
        async with self._session("confirm trip") as session:
            await session.execute(update(Trip).where(Trip.id == trip_id).values(is_confirmed=True))
            await session.commit()

    async def confirm_participant(self, participant_id: UUID) -> None:
        async with self._session("confirm participant") as session:
            await session.execute(
                update(Participant).where(Participant.id == participant_id).values(is_confirmed=True)
            )
            await session.commit()

    async def invite_participant_to_trip(self, trip_id: UUID, email: str) -> UUID:
        async with self._session("invite participant") as session:
            participant = Participant(trip_id=trip_id, email=email, is_confirmed=False)
            session.add(participant)
            await session.commit()
            return participant.id

    async def get_participant(self, participant_id: UUID) -> Participant:
        async with self._session("get participant") as session:
            result = await session.execute(select(Participant).where(Participant.id == participant_id))
            return result.scalar_one()

    async def get_participants(self, trip_id: UUID) -> List[Participant]:
        async with self._session("get participants") as session:
            result = await session.execute(select(Participant).where(Participant.trip_id == trip_id))
            return list(result.scalars().all())

    async def create_activity(self, trip_id: UUID, payload: ActivityCreate) -> UUID:
        async with self._session("create activity") as session:
            activity = Activity(trip_id=trip_id, title=payload.title, occurs_at=payload.occurs_at)
            session.add(activity)
            await session.commit()
            return activity.id

    async def get_trip_activities(self, trip_id: UUID) -> List[Activity]:
        async with self._session("get activities") as session:
            result = await session.execute(
                select(Activity).where(Activity.trip_id == trip_id).order_by(Activity.occurs_at)
            )
            return list(result.scalars().all())

    async def create_trip_link(self, trip_id: UUID, payload: LinkCreate) -> UUID:
        async with self._session("create link") as session:
            link = Link(trip_id=trip_id, title=payload.title, url=payload.url)
            session.add(link)
            await session.commit()
            return link.id

    async def get_trip_links(self, trip_id: UUID) -> List[Link]:
        async with self._session("get links") as session:
            result = await session.execute(select(Link).where(Link.trip_id == trip_id))
            return list(result.scalars().all())
