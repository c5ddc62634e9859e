# hotel_api/auth.py
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from hotel_api.config import Settings, get_settings
from hotel_api.exceptions import Forbidden, Unauthorized


# One shared static secret for the whole system. There are no admin
# accounts, sessions or expiry: the login token is the secret itself.

def check_admin_password(password: Optional[str], secret: str) -> bool:
    return password == secret

def check_bearer_token(authorization: Optional[str], secret: str) -> None:
    """
    Validates an `Authorization: Bearer <secret>` header value.

    Raises Unauthorized when the header is absent and Forbidden when the
    second space-separated token is missing or wrong.
    """
    if authorization is None:
        raise Unauthorized("Unauthorized: No credentials provided")

    parts = authorization.split(" ")
    token = parts[1] if len(parts) > 1 else None
    if token != secret:
        raise Forbidden("Forbidden: Invalid credentials")

# Admin Guard Dependency
def verify_admin(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings)
):
    try:
        check_bearer_token(authorization, settings.ADMIN_PASSWORD)
    except Unauthorized as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except Forbidden as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
