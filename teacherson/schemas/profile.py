from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from teacherson.schemas.connection import NetworkStatus


class ProfileUpdate(BaseModel):

    full_name: str = Field(min_length=1, max_length=200)
    bio: Optional[str] = None
    # the setup form posts "Math, Physics"; API clients may send a list
    subjects: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    experience: int = Field(default=0, ge=0)
    profile_image: Optional[str] = None

    @field_validator("subjects", mode="before")
    @classmethod
    def split_subjects(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [s.strip() for s in v if s and s.strip()]


class ProfilePublic(BaseModel):

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    full_name: str
    bio: Optional[str] = None
    subjects: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    experience: int = 0
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None


class NetworkProfile(ProfilePublic):

    connection_status: NetworkStatus = "none"
