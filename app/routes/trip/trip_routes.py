from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from app.schemas.error import ErrorResponse
from app.schemas.trip.trip_schema import TripCreate, TripUpdate, CreateTripResponse, TripDetailsResponse
from app.dependencies.store import get_mailer, get_store
from app.services.email_service import Mailer
from app.services.store.base import TripStore
from app.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["Trips"], responses={400: {"model": ErrorResponse}})

async def get_trip_service(
    background_tasks: BackgroundTasks,
    store: TripStore = Depends(get_store),
    mailer: Mailer = Depends(get_mailer)
) -> TripService:
    return TripService(store, mailer, background_tasks)

@router.post("", response_model=CreateTripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip_route(
    trip: TripCreate,
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.create_trip(trip)

@router.get("/{trip_id}", response_model=TripDetailsResponse)
async def get_trip_route(
    trip_id: str,
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.get_trip(trip_id)

@router.put("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_trip_route(
    trip_id: str,
    trip_update: TripUpdate,
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.update_trip(trip_id, trip_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{trip_id}/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_trip_route(
    trip_id: str,
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.confirm_trip(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
