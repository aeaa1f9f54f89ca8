from datetime import datetime
from typing import Optional, TypedDict


class JobDocument(TypedDict, total=False):
    _id: str
    title: str
    description: Optional[str]
    location: Optional[str]
    posted_by: str
    date_posted: datetime


class ApplicationDocument(TypedDict, total=False):
    _id: str
    job_id: str
    user_id: str
    cover_letter: Optional[str]
    date_applied: datetime
