import asyncio
import smtplib
from abc import ABC, abstractmethod
from email.mime.text import MIMEText
from uuid import UUID

from sqlalchemy.exc import NoResultFound

from app.core.errors import NotificationError, StorageError
from app.models.trips.trip_model import Trip
from app.services.store.base import TripStore


class Mailer(ABC):
    @abstractmethod
    async def send_confirm_trip_email_to_trip_owner(self, trip_id: UUID) -> None: ...


class MailpitMailer(Mailer):
    """Sends plain-text mail through a local Mailpit SMTP server, no TLS."""

    def __init__(self, store: TripStore, host: str, port: int, sender: str):
        self.store = store
        self.host = host
        self.port = port
        self.sender = sender

    async def send_confirm_trip_email_to_trip_owner(self, trip_id: UUID) -> None:
        try:
            trip = await self.store.get_trip(trip_id)
        except (NoResultFound, StorageError) as exc:
            raise NotificationError(
                f"mailpit: failed to get trip {trip_id} for confirm trip email: {exc}"
            ) from exc

        msg = build_confirm_trip_message(trip, self.sender)

        try:
            # sendmail encodes RCPT as ASCII, so a non-ASCII owner address raises UnicodeEncodeError
            await asyncio.to_thread(self._send, trip.owner_email, msg)
        except (smtplib.SMTPException, OSError, UnicodeError) as exc:
            raise NotificationError(
                f"mailpit: failed to send confirm trip email for trip {trip_id}: {exc}"
            ) from exc

    def _send(self, to_email: str, msg: MIMEText) -> None:
        with smtplib.SMTP(self.host, self.port) as server:
            server.sendmail(self.sender, [to_email], msg.as_string())


def build_confirm_trip_message(trip: Trip, sender: str) -> MIMEText:
    body = (
        f"Hello, {trip.owner_name}!\n\n"
        f"Your trip to {trip.destination} starting on {trip.starts_at.date().isoformat()} "
        f"needs to be confirmed.\n"
        f"Click the button below to confirm.\n"
    )
    msg = MIMEText(body, "plain")
    msg["Subject"] = "Confirm your trip"
    msg["From"] = sender
    msg["To"] = trip.owner_email
    return msg
