from datetime import datetime
from typing import List, Optional, TypedDict


class ProfileDocument(TypedDict, total=False):
    # same value as the owning user's _id
    _id: str
    full_name: str
    bio: Optional[str]
    subjects: List[str]
    location: Optional[str]
    experience: int
    profile_image: Optional[str]
    created_at: datetime
