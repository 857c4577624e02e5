from fastapi import BackgroundTasks
from sqlalchemy.exc import NoResultFound

from app.core.errors import ConflictError, NotFoundError, StorageError
from app.core.logger import logger
from app.schemas.trip.trip_schema import (
    TripCreate, TripUpdate, CreateTripResponse, TripDetails, TripDetailsResponse
)
from app.schemas.trip.participant import (
    InviteParticipantRequest, InviteParticipantResponse, ParticipantOut, ParticipantListResponse
)
from app.services.email_service import Mailer
from app.services.notifications import send_trip_owner_confirmation
from app.services.store.base import TripStore
from app.services.trips.trip_lookup import TRIP_NOT_FOUND, get_existing_trip
from app.utils.ids import parse_uuid


class TripService:
    def __init__(self, store: TripStore, mailer: Mailer, background_tasks: BackgroundTasks):
        self.store = store
        self.mailer = mailer
        self.background_tasks = background_tasks

    async def create_trip(self, trip_data: TripCreate) -> CreateTripResponse:
        try:
            trip_id = await self.store.create_trip(trip_data)
        except StorageError as exc:
            logger.error(f"failed to create trip for owner {trip_data.owner_email}: {exc.detail}")
            raise StorageError(exc.detail, "failed to create trip, try again") from exc

        # the response never waits on the owner email
        self.background_tasks.add_task(send_trip_owner_confirmation, self.mailer, trip_id)

        logger.info(f"Trip {trip_id} created by {trip_data.owner_email}")
        return CreateTripResponse(trip_id=trip_id)

    async def get_trip(self, trip_id: str) -> TripDetailsResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        trip = await get_existing_trip(self.store, trip_uuid)
        return TripDetailsResponse(trip=TripDetails.model_validate(trip))

    async def update_trip(self, trip_id: str, trip_data: TripUpdate) -> None:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            await self.store.update_trip(trip_uuid, trip_data)
        except NoResultFound:
            raise NotFoundError(TRIP_NOT_FOUND) from None
        except StorageError as exc:
            logger.error(f"failed to update trip {trip_uuid}: {exc.detail}")
            raise

        logger.info(f"Trip {trip_uuid} updated")

    async def confirm_trip(self, trip_id: str) -> None:
        trip_uuid = parse_uuid(trip_id, "tripID")
        trip = await get_existing_trip(self.store, trip_uuid)

        if trip.is_confirmed:
            raise ConflictError("trip already confirmed")

        try:
            await self.store.confirm_trip(trip.id)
        except StorageError as exc:
            logger.error(f"failed to confirm trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to confirm trip, try again") from exc

        # TODO: email every participant once the trip is confirmed
        logger.info(f"Trip {trip_uuid} confirmed")

    async def invite_participant(
        self, trip_id: str, invite_data: InviteParticipantRequest
    ) -> InviteParticipantResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        trip = await get_existing_trip(self.store, trip_uuid)

        try:
            participant_id = await self.store.invite_participant_to_trip(trip.id, str(invite_data.email))
        except StorageError as exc:
            logger.error(f"failed to invite {invite_data.email} to trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to invite user to trip, try again") from exc

        logger.info(f"Participant {participant_id} invited to trip {trip_uuid}")
        return InviteParticipantResponse(participant_id=participant_id)

    async def get_participants(self, trip_id: str) -> ParticipantListResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            participants = await self.store.get_participants(trip_uuid)
        except StorageError as exc:
            logger.error(f"failed to get participants of trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to get participants") from exc

        return ParticipantListResponse(
            participants=[ParticipantOut.model_validate(participant) for participant in participants]
        )
