from fastapi import APIRouter, Depends, status
from app.schemas.error import ErrorResponse
from app.schemas.trip.activity import ActivityCreate, ActivityListResponse, CreateActivityResponse
from app.dependencies.store import get_store
from app.services.store.base import TripStore
from app.services.trips.activity_service import ActivityService

router = APIRouter(prefix="/trips", tags=["Trip Activities"], responses={400: {"model": ErrorResponse}})

def get_activity_service(store: TripStore = Depends(get_store)) -> ActivityService:
    return ActivityService(store)

@router.post("/{trip_id}/activities", response_model=CreateActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity_route(
    trip_id: str,
    activity_data: ActivityCreate,
    activity_service: ActivityService = Depends(get_activity_service)
):
    return await activity_service.create_activity(trip_id, activity_data)

# 🔹 Activities grouped by the day they happen
@router.get("/{trip_id}/activities", response_model=ActivityListResponse)
async def get_activities_route(
    trip_id: str,
    activity_service: ActivityService = Depends(get_activity_service)
):
    return await activity_service.get_activities(trip_id)
