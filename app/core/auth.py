from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pymongo.database import Database
from app.core.db import get_db, get_token_signer
from app.core.errors import AuthError, NotFoundError
from app.core.security import TokenSigner
from app.repositories.user_repo import get_user_by_id

security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    signer: TokenSigner = Depends(get_token_signer),
) -> str:
    if credentials is None or not credentials.credentials:
        raise AuthError("No token, authorization denied", status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return signer.decode_access_token(credentials.credentials)
    except JWTError:
        raise AuthError("Token is not valid", status_code=status.HTTP_401_UNAUTHORIZED)


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
) -> dict:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user
