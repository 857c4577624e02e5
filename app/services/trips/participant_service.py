from sqlalchemy.exc import NoResultFound

from app.core.errors import ConflictError, NotFoundError, StorageError
from app.core.logger import logger
from app.services.store.base import TripStore
from app.utils.ids import parse_uuid


class ParticipantService:
    def __init__(self, store: TripStore):
        self.store = store

    async def confirm_participant(self, participant_id: str) -> None:
        """Move an invited participant to confirmed; a second confirmation is a conflict."""
        participant_uuid = parse_uuid(participant_id, "participantID")

        try:
            participant = await self.store.get_participant(participant_uuid)
        except NoResultFound:
            raise NotFoundError("participant not found") from None
        except StorageError as exc:
            logger.error(f"failed to get participant {participant_uuid}: {exc.detail}")
            raise

        if participant.is_confirmed:
            raise ConflictError("participant already confirmed")

        try:
            await self.store.confirm_participant(participant_uuid)
        except StorageError as exc:
            logger.error(f"failed to confirm participant {participant_uuid}: {exc.detail}")
            raise

        logger.info(f"Participant {participant_uuid} confirmed for trip {participant.trip_id}")
