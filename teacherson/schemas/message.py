from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Message(BaseModel):
    """A directed message. Immutable once stored."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    sender_id: str = Field(min_length=1)
    receiver_id: str = Field(min_length=1)
    content: str = Field(min_length=1)
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # naive values are UTC so every timestamp compares with every other
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MessageCreate(BaseModel):

    receiver_id: str = Field(min_length=1)
    content: str = Field(min_length=1, max_length=5000)


class ConversationSummary(BaseModel):
    """Latest message exchanged with one counterparty. Derived, never stored."""

    counterparty_id: str
    last_message_content: str
    last_message_timestamp: datetime
