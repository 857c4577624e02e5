from fastapi import APIRouter, Depends, status
from app.schemas.error import ErrorResponse
from app.schemas.trip.participant import InviteParticipantRequest, InviteParticipantResponse
from app.routes.trip.trip_routes import get_trip_service
from app.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["Trip Invites"], responses={400: {"model": ErrorResponse}})

@router.post("/{trip_id}/invites", response_model=InviteParticipantResponse, status_code=status.HTTP_201_CREATED)
async def invite_participant_route(
    trip_id: str,
    invite_data: InviteParticipantRequest,
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.invite_participant(trip_id, invite_data)
