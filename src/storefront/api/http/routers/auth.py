"""Admin authentication router."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel

from src.storefront.api.http.deps import bearer_token, get_auth_service
from src.storefront.core.exceptions import TokenRejected
from src.storefront.core.services import AuthService
from src.storefront.entities.user import AdminIdentity

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    user: AdminIdentity


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange username and password for a bearer token."""
    result = auth.login(credentials.username, credentials.password)
    return LoginResponse(token=result.token, user=result.user)


@router.get("/verify")
def verify(
    authorization: Annotated[str | None, Header()] = None,
    auth: AuthService = Depends(get_auth_service),
) -> dict[str, Any]:
    """Report whether the supplied bearer token is valid. Always answers 200."""
    token = bearer_token(authorization)
    if token is None:
        return {"valid": False, "error": "No token provided"}
    try:
        identity = auth.authenticate(token)
    except TokenRejected:
        return {"valid": False, "error": "Invalid or expired token"}
    return {"valid": True, "user": identity.model_dump()}
