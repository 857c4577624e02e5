from fastapi import APIRouter, Depends, status
from app.schemas.error import ErrorResponse
from app.schemas.trip.link import CreateLinkResponse, LinkCreate, LinkListResponse
from app.dependencies.store import get_store
from app.services.store.base import TripStore
from app.services.trips.link_service import LinkService

router = APIRouter(prefix="/trips", tags=["Trip Links"], responses={400: {"model": ErrorResponse}})

def get_link_service(store: TripStore = Depends(get_store)) -> LinkService:
    return LinkService(store)

@router.post("/{trip_id}/links", response_model=CreateLinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link_route(
    trip_id: str,
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    return await link_service.create_link(trip_id, link_data)

@router.get("/{trip_id}/links", response_model=LinkListResponse)
async def get_links_route(
    trip_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    return await link_service.get_links(trip_id)
