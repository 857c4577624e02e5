from uuid import UUID

from sqlalchemy.exc import NoResultFound

from app.core.errors import NotFoundError, StorageError
from app.core.logger import logger
from app.models.trips.trip_model import Trip
from app.services.store.base import TripStore

TRIP_NOT_FOUND = "trip not found"


async def get_existing_trip(store: TripStore, trip_id: UUID) -> Trip:
    """Load the parent trip or fail before any child resource is touched."""
    try:
        return await store.get_trip(trip_id)
    except NoResultFound:
        raise NotFoundError(TRIP_NOT_FOUND) from None
    except StorageError as exc:
        logger.error(f"failed to get trip {trip_id}: {exc.detail}")
        raise
