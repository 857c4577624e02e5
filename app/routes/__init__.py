# app/routes/__init__.py
from fastapi import APIRouter
from app.routes.trip import trip_routes, invitation, participant_routes, activity_routes, link_routes


api_router = APIRouter()

# Trip routes
api_router.include_router(trip_routes.router)
api_router.include_router(invitation.router)
api_router.include_router(participant_routes.router)

# Activity and link routes
api_router.include_router(activity_routes.router)
api_router.include_router(link_routes.router)
