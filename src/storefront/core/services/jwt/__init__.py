"""JWT service package."""

from .jwt_utils import JwtPreview, preview_jwt
from .token_service import AuthTokenService

__all__ = ["AuthTokenService", "JwtPreview", "preview_jwt"]
