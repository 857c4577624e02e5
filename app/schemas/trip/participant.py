from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID

class InviteParticipantRequest(BaseModel):
    email: EmailStr

class InviteParticipantResponse(BaseModel):
    participant_id: UUID

class ParticipantOut(BaseModel):
    id: UUID
    # participants are only known by email for now
    name: Optional[str] = None
    email: str
    is_confirmed: bool

    model_config = {"from_attributes": True}

class ParticipantListResponse(BaseModel):
    participants: List[ParticipantOut]
