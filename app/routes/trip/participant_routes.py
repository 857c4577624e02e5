from fastapi import APIRouter, Depends, Response, status
from app.schemas.error import ErrorResponse
from app.schemas.trip.participant import ParticipantListResponse
from app.dependencies.store import get_store
from app.routes.trip.trip_routes import get_trip_service
from app.services.store.base import TripStore
from app.services.trips.participant_service import ParticipantService
from app.services.trips.trip_service import TripService

router = APIRouter(tags=["Participants"], responses={400: {"model": ErrorResponse}})

def get_participant_service(store: TripStore = Depends(get_store)) -> ParticipantService:
    return ParticipantService(store)

@router.get("/trips/{trip_id}/participants", response_model=ParticipantListResponse)
async def get_trip_participants(
    trip_id: str,
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.get_participants(trip_id)

@router.patch("/participants/{participant_id}/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_participant_route(
    participant_id: str,
    participant_service: ParticipantService = Depends(get_participant_service)
):
    await participant_service.confirm_participant(participant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
