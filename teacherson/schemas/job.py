from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class JobCreate(BaseModel):

    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = None


class JobPublic(BaseModel):

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    posted_by: Optional[str] = None
    date_posted: datetime


class ApplicationCreate(BaseModel):

    cover_letter: Optional[str] = Field(default=None, max_length=10000)


class ApplicationPublic(BaseModel):

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    job_id: str
    user_id: str
    cover_letter: Optional[str] = None
    date_applied: datetime
