
from pydantic import AliasChoices, BaseModel, EmailStr, Field


class UserBase(BaseModel):

    email: EmailStr


class UserCreate(UserBase):

    password: str = Field(min_length=6)


class UserPublic(UserBase):

    id: str = Field(validation_alias=AliasChoices("id", "_id"))


class Token(BaseModel):

    access_token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):

    sub: str = Field(min_length=1)
    exp: int
