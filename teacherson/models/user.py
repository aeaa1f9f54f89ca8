from typing import TypedDict


class UserDocument(TypedDict, total=False):

    _id: str
    email: str
    hashed_password: str
