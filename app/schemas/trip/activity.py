from pydantic import BaseModel, Field
from typing import List
from datetime import date as dt, datetime
from uuid import UUID

from app.schemas.timestamps import WallClockDateTime

class ActivityCreate(BaseModel):
    title: str = Field(min_length=1)
    occurs_at: WallClockDateTime

class CreateActivityResponse(BaseModel):
    activity_id: UUID

class ActivityOut(BaseModel):
    id: UUID
    title: str
    occurs_at: datetime

    model_config = {"from_attributes": True}

class ActivityDay(BaseModel):
    date: dt
    activities: List[ActivityOut]

class ActivityListResponse(BaseModel):
    activities: List[ActivityDay]
