from uuid import UUID

from app.core.errors import NotificationError
from app.core.logger import logger
from app.services.email_service import Mailer


async def send_trip_owner_confirmation(mailer: Mailer, trip_id: UUID) -> None:
    """Background task: a failed send only ends up in the log."""
    try:
        await mailer.send_confirm_trip_email_to_trip_owner(trip_id)
    except NotificationError as exc:
        logger.error(f"failed to send confirm trip email for trip {trip_id}: {exc}")
        return
    except Exception:
        logger.exception(f"unexpected error sending confirm trip email for trip {trip_id}")
        return
    logger.info(f"Confirm trip email sent for trip {trip_id}")
