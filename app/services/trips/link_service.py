from app.core.errors import StorageError
from app.core.logger import logger
from app.schemas.trip.link import CreateLinkResponse, LinkCreate, LinkListResponse, LinkOut
from app.services.store.base import TripStore
from app.services.trips.trip_lookup import get_existing_trip
from app.utils.ids import parse_uuid


class LinkService:
    def __init__(self, store: TripStore):
        self.store = store

    async def create_link(self, trip_id: str, link_data: LinkCreate) -> CreateLinkResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            link_id = await self.store.create_trip_link(trip_uuid, link_data)
        except StorageError as exc:
            logger.error(f"failed to create link for trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to create link") from exc

        return CreateLinkResponse(link_id=link_id)

    async def get_links(self, trip_id: str) -> LinkListResponse:
        trip_uuid = parse_uuid(trip_id, "tripID")
        await get_existing_trip(self.store, trip_uuid)

        try:
            links = await self.store.get_trip_links(trip_uuid)
        except StorageError as exc:
            logger.error(f"failed to get links of trip {trip_uuid}: {exc.detail}")
            raise StorageError(exc.detail, "failed to get links") from exc

        return LinkListResponse(links=[LinkOut.model_validate(link) for link in links])
