from fastapi import Depends

from app.core.config import settings
from app.core.database import SessionLocal
from app.services.email_service import Mailer, MailpitMailer
from app.services.store.base import TripStore
from app.services.store.sql_store import SQLTripStore


def get_store() -> TripStore:
    return SQLTripStore(SessionLocal)


def get_mailer(store: TripStore = Depends(get_store)) -> Mailer:
    return MailpitMailer(
        store,
        host=settings.MAILPIT_HOST,
        port=settings.MAILPIT_PORT,
        sender=settings.MAIL_SENDER,
    )
