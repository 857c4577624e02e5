from typing import Dict, Iterable, List
from datetime import date

from app.core.errors import StorageError
from app.core.logger import logger
from app.models.trips.activity import Activity
from app.schemas.trip.activity import (
    ActivityCreate, ActivityDay, ActivityListResponse, ActivityOut, CreateActivityResponse
)
from app.services.store.base import TripStore
from app.services.trips.trip_lookup import get_existing_trip
from app.utils.ids import parse_uuid


def group_activities_by_date(activities: Iterable[Activity]) -> List[ActivityDay]:
    """
    Bucket activities by the calendar date they occur on.

    Groups come out in the order their first activity is seen; time of day
    never splits a date into two groups.
    """
    days: Dict[date, List[ActivityOut]] = {}
    for activity in activities:
        days.setdefault(activity.occurs_at.date(), []).append(ActivityOut.model_validate(activity))

    return [ActivityDay(date=day, activities=items) for day, items in days.items()]


class ActivityService:
    def __init__(self, store: TripStore):
        self.store = store

    async def create_activity(self, trip_id: str, activity_data: ActivityCreate) -> CreateActivityResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            activity_id = await self.store.create_activity(trip_uuid, activity_data)
        except StorageError as exc:
            logger.error(f"failed to create activity for trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to create trip activity, try again") from exc

        logger.info(f"Activity {activity_id} created for trip {trip_uuid}")
        return CreateActivityResponse(activity_id=activity_id)

    async def get_activities(self, trip_id: str) -> ActivityListResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            activities = await self.store.get_trip_activities(trip_uuid)
        except StorageError as exc:
            logger.error(f"failed to get activities of trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to get activities") from exc

        return ActivityListResponse(activities=group_activities_by_date(activities))
