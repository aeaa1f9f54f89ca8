import logging
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError

from teacherson.core.exceptions import AuthenticationError
from teacherson.schemas.user import TokenPayload
from teacherson.utils.security import decode_access_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


async def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> dict:
    """Resolve the bearer token to the current user. Every data route depends on this."""
    if not token:
        raise AuthenticationError("No authentication token available", error_code="MISSING_TOKEN")
    try:
        claims = TokenPayload.model_validate(decode_access_token(token))
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired", error_code="TOKEN_EXPIRED")
    except (jwt.PyJWTError, ValidationError) as exc:
        logger.info("Rejected access token: %s", exc)
        raise AuthenticationError()
    return {"_id": claims.sub}
