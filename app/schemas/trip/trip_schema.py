from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import List
from datetime import datetime
from uuid import UUID

from app.schemas.timestamps import WallClockDateTime

class TripSchedule(BaseModel):
    starts_at: WallClockDateTime
    ends_at: WallClockDateTime

    @model_validator(mode="after")
    def check_schedule(self):
        if self.ends_at < self.starts_at:
            raise ValueError("ends_at must not be before starts_at")
        return self

class TripCreate(TripSchedule):
    destination: str = Field(min_length=1)
    owner_name: str = Field(min_length=1)
    owner_email: EmailStr
    emails_to_invite: List[EmailStr] = []

class TripUpdate(TripSchedule):
    destination: str = Field(min_length=1)

class CreateTripResponse(BaseModel):
    trip_id: UUID

class TripDetails(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool

    model_config = {"from_attributes": True}

class TripDetailsResponse(BaseModel):
    trip: TripDetails
