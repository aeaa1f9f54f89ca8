from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from teacherson.core.exceptions import AuthenticationError
from teacherson.database.connection import mongo_db_dependency
from teacherson.repositories.user_repository import UserRepository
from teacherson.schemas.user import Token, UserCreate, UserPublic
from teacherson.services.user_service import UserService
from teacherson.utils.security import create_access_token


router = APIRouter(prefix="/auth", tags=["auth"])


def get_user_service(db = Depends(mongo_db_dependency)) -> UserService:
    return UserService(UserRepository(db))


@router.post("/register", response_model=UserPublic, status_code=201)
async def register(body: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.register_user(body.email, body.password)


@router.post("/token", response_model=Token)
async def login(form: OAuth2PasswordRequestForm = Depends(), service: UserService = Depends(get_user_service)):
    # OAuth2 form calls the email "username"
    user = await service.authenticate_user(form.username, form.password)
    if not user:
        raise AuthenticationError("Incorrect email or password", error_code="INVALID_CREDENTIALS")
    return Token(access_token=create_access_token(user["_id"]))
