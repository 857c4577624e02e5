from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, field_validator
from typing import List
from uuid import UUID

http_url = TypeAdapter(HttpUrl)

class LinkCreate(BaseModel):
    title: str = Field(min_length=1)
    url: str

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        # HttpUrl normalizes host case and path; store what the client sent
        try:
            http_url.validate_python(value)
        except ValueError:
            raise ValueError("must be a valid http(s) URL") from None
        return value

class CreateLinkResponse(BaseModel):
    link_id: UUID

class LinkOut(BaseModel):
    id: UUID
    title: str
    url: str

    model_config = {"from_attributes": True}

class LinkListResponse(BaseModel):
    links: List[LinkOut]
