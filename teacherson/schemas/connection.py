from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

from teacherson.models.connection import ConnectionStatus

# how the current user relates to another educator
NetworkStatus = Literal["connected", "pending", "none"]


class ConnectionCreate(BaseModel):

    connected_user_id: str = Field(min_length=1)


class ConnectionPublic(BaseModel):

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    user_id: str
    connected_user_id: str
    status: ConnectionStatus
    created_at: datetime
