"""Error taxonomy shared by services and the HTTP layer.

Every error carries the HTTP status it maps to, so the API renders
``{"error": message}`` without knowing which service raised it.
"""

from typing import Any


class StorefrontError(Exception):
    """Base exception for the storefront admin backend."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# 400
# =============================================================================


class ValidationError(StorefrontError):
    """Bad or missing request fields. Raised before any mutation starts."""

    status_code = 400
    default_message = "Invalid request"


class InvalidUpload(ValidationError):
    """Uploaded file has the wrong type, is too large, or too many were sent."""

    default_message = "Only image files are allowed!"


# =============================================================================
# 401
# =============================================================================


class AuthError(StorefrontError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class TokenRejected(AuthError):
    """Missing, malformed, expired or badly signed bearer token."""

    default_message = "Invalid token"


# =============================================================================
# 404
# =============================================================================


class NotFoundError(StorefrontError):
    status_code = 404
    default_message = "Not found"


# =============================================================================
# 500
# =============================================================================


class StorageError(StorefrontError):
    """The relational store or the filesystem failed underneath an operation."""

    status_code = 500
    default_message = "Storage failure"


class PartialWriteError(StorageError):
    """The product row committed but some of its gallery rows did not.

    The product exists; its gallery may be incomplete. Callers are expected to
    inspect the product and retry the image step.
    """

    def __init__(self, message: str, product_id: int):
        super().__init__(message)
        self.product_id = product_id

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "product_id": self.product_id}


class ConfigurationError(StorefrontError):
    status_code = 500
    default_message = "Server misconfigured"
