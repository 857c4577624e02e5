"""Shared test fixtures: in-memory SQLite store, in-memory fakes, FastAPI clients.

Every test gets a fresh database. Route tests talk to the app through httpx's
ASGITransport, which runs background tasks before the response is returned,
so notification side effects can be asserted right after the request.
"""

import os

# Settings are read on import; keep tests off any real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict, List, Set

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.database import Base
from app.core.errors import NotificationError, StorageError
from app.dependencies.store import get_mailer, get_store
from app.main import app as fastapi_app
from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant
from app.models.trips.activity import Activity
from app.models.trips.link import Link
from app.services.email_service import Mailer
from app.services.store.base import TripStore
from app.services.store.sql_store import SQLTripStore


class FakeStore(TripStore):
    """In-memory TripStore that records every call it receives."""

    def __init__(self):
        self.trips: Dict[uuid.UUID, Trip] = {}
        self.participants: Dict[uuid.UUID, Participant] = {}
        self.activities: List[Activity] = []
        self.links: List[Link] = []
        self.calls: List[str] = []
        self.failing: Set[str] = set()

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failing:
            raise StorageError(f"store: {name} blew up")

    def add_trip(self, **fields) -> Trip:
        values = dict(
            id=uuid.uuid4(),
            destination="Rio",
            owner_name="Ana",
            owner_email="ana@x.com",
            starts_at=datetime(2025, 1, 10),
            ends_at=datetime(2025, 1, 15),
            is_confirmed=False,
        )
        values.update(fields)
        trip = Trip(**values)
        self.trips[trip.id] = trip
        return trip

    def add_participant(self, trip_id: uuid.UUID, email: str, is_confirmed: bool = False) -> Participant:
        participant = Participant(id=uuid.uuid4(), trip_id=trip_id, email=email, is_confirmed=is_confirmed)
        self.participants[participant.id] = participant
        return participant

    async def create_trip(self, payload):
        self._record("create_trip")
        trip = self.add_trip(
            destination=payload.destination,
            owner_name=payload.owner_name,
            owner_email=str(payload.owner_email),
            starts_at=payload.starts_at,
            ends_at=payload.ends_at,
        )
        for email in dict.fromkeys(str(e) for e in payload.emails_to_invite):
            self.add_participant(trip.id, email)
        return trip.id

    async def get_trip(self, trip_id):
        self._record("get_trip")
        if trip_id not in self.trips:
            raise NoResultFound("No row was found when one was required")
        return self.trips[trip_id]

    async def update_trip(self, trip_id, payload):
        self._record("update_trip")
        if trip_id not in self.trips:
            raise NoResultFound("No row was found when one was required")
        trip = self.trips[trip_id]
        trip.destination = payload.destination
        trip.starts_at = payload.starts_at
        trip.ends_at = payload.ends_at

    async def confirm_trip(self, trip_id):
        self._record("confirm_trip")
        self.trips[trip_id].is_confirmed = True

    async def confirm_participant(self, participant_id):
        self._record("confirm_participant")
        self.participants[participant_id].is_confirmed = True

    async def invite_participant_to_trip(self, trip_id, email):
        self._record("invite_participant_to_trip")
        return self.add_participant(trip_id, email).id

    async def get_participant(self, participant_id):
        self._record("get_participant")
        if participant_id not in self.participants:
            raise NoResultFound("No row was found when one was required")
        return self.participants[participant_id]

    async def get_participants(self, trip_id):
        self._record("get_participants")
        return [p for p in self.participants.values() if p.trip_id == trip_id]

    async def create_activity(self, trip_id, payload):
        self._record("create_activity")
        activity = Activity(id=uuid.uuid4(), trip_id=trip_id, title=payload.title, occurs_at=payload.occurs_at)
        self.activities.append(activity)
        return activity.id

    async def get_trip_activities(self, trip_id):
        self._record("get_trip_activities")
        return sorted((a for a in self.activities if a.trip_id == trip_id), key=lambda a: a.occurs_at)

    async def create_trip_link(self, trip_id, payload):
        self._record("create_trip_link")
        link = Link(id=uuid.uuid4(), trip_id=trip_id, title=payload.title, url=payload.url)
        self.links.append(link)
        return link.id

    async def get_trip_links(self, trip_id):
        self._record("get_trip_links")
        return [link for link in self.links if link.trip_id == trip_id]


class FakeMailer(Mailer):
    def __init__(self):
        self.sent: List[uuid.UUID] = []
        self.fail = False

    async def send_confirm_trip_email_to_trip_owner(self, trip_id):
        if self.fail:
            raise NotificationError(f"mailpit: failed to send confirm trip email for trip {trip_id}")
        self.sent.append(trip_id)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def sql_store(session_factory):
    return SQLTripStore(session_factory)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@asynccontextmanager
async def _client_for(store: TripStore, mailer: Mailer):
    fastapi_app.dependency_overrides[get_store] = lambda: store
    fastapi_app.dependency_overrides[get_mailer] = lambda: mailer
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(sql_store, fake_mailer):
    """App client backed by the real SQL store and a recording mailer."""
    async with _client_for(sql_store, fake_mailer) as c:
        yield c


@pytest.fixture
async def fake_client(fake_store, fake_mailer):
    """App client backed entirely by in-memory fakes."""
    async with _client_for(fake_store, fake_mailer) as c:
        yield c
