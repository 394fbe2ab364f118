"""Signed bearer tokens for the admin session."""

import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, JsonWebToken
from loguru import logger

from src.storefront.core.exceptions import ConfigurationError, TokenRejected
from src.storefront.core.services.jwt.jwt_utils import preview_jwt
from src.storefront.entities.user import AdminIdentity
from src.storefront.runtime.config.config_data import JWTConfig


class AuthTokenService:
    """Issue and verify HMAC-signed admin tokens using authlib."""

    def __init__(
        self,
        secret: str | None,
        algorithm: str = "HS256",
        issuer: str = "storefront-admin",
        expires_in_seconds: int = 7 * 24 * 3600,
        clock_skew: int = 60,
    ):
        if not secret:
            raise ConfigurationError("JWT signing secret not configured")
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires_in = expires_in_seconds
        self._clock_skew = clock_skew
        self._jwt = JsonWebToken([algorithm])

    @classmethod
    def from_config(cls, config: JWTConfig) -> "AuthTokenService":
        return cls(
            secret=config.secret,
            algorithm=config.algorithm,
            issuer=config.issuer,
            expires_in_seconds=config.expires_in_seconds,
            clock_skew=config.clock_skew,
        )

    def issue(self, identity: AdminIdentity) -> str:
        """Sign a token for ``identity`` valid for the configured lifetime."""
        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": self._issuer,
            "sub": str(identity.id),
            "iat": now,
            "exp": now + self._expires_in,
            "jti": generate_token(16),
            "id": identity.id,
            "username": identity.username,
            "role": identity.role,
        }
        header = {"alg": self._algorithm, "typ": "JWT"}
        try:
            token = self._jwt.encode(header, payload, self._secret)
        except JoseError as e:
            raise ConfigurationError(f"Token signing failed: {e}") from e
        return token.decode() if isinstance(token, bytes) else token

    def verify(self, token: str) -> AdminIdentity:
        """Check signature, issuer and expiry and return the embedded identity.

        Raises:
            TokenRejected: For any malformed, forged or expired token
        """
        preview = preview_jwt(token)
        if preview.alg != self._algorithm:
            raise TokenRejected("Disallowed token algorithm")

        claims_options = {
            "exp": {"essential": True},
            "iss": {"essential": True, "value": self._issuer},
        }
        try:
            claims = self._jwt.decode(token, self._secret, claims_options=claims_options)
            claims.validate(leeway=self._clock_skew)
        except (JoseError, ValueError) as e:
            logger.debug("Token rejected: {}", e)
            raise TokenRejected() from e

        now = int(time.time())
        iat = claims.get("iat")
        if iat is not None and int(iat) > now + self._clock_skew:
            raise TokenRejected("Token issued in the future")

        try:
            return AdminIdentity(
                id=claims["id"],
                username=claims["username"],
                role=claims.get("role", "admin"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenRejected("Token is missing identity claims") from e
