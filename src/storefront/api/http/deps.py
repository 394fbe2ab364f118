"""FastAPI dependency implementations."""

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Header, Request, UploadFile
from loguru import logger
from sqlmodel import Session
from starlette.datastructures import UploadFile as StarletteUploadFile

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.exceptions import InvalidUpload, TokenRejected
from src.storefront.core.services import (
    AuthService,
    AuthTokenService,
    BlobStore,
    IncomingFile,
    ProductCatalogService,
    SettingsRegistry,
    UploadPolicy,
)
from src.storefront.entities.user import AdminIdentity

BEARER_PREFIX = "Bearer "


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed once the request is done."""
    session = get_app_dependencies(request).database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_blob_store(request: Request) -> BlobStore:
    """Get the blob store instance."""
    return get_app_dependencies(request).blob_store


def get_token_service(request: Request) -> AuthTokenService:
    """Get the token signing service instance."""
    return get_app_dependencies(request).token_service


def get_product_upload_policy(request: Request) -> UploadPolicy:
    return get_app_dependencies(request).product_upload_policy


def get_logo_upload_policy(request: Request) -> UploadPolicy:
    return get_app_dependencies(request).logo_upload_policy


def get_catalog_service(
    request: Request, session: Session = Depends(get_db_session)
) -> ProductCatalogService:
    deps = get_app_dependencies(request)
    return ProductCatalogService(session, deps.blob_store, deps.product_upload_policy)


def get_settings_registry(
    request: Request, session: Session = Depends(get_db_session)
) -> SettingsRegistry:
    deps = get_app_dependencies(request)
    return SettingsRegistry(session, deps.blob_store, deps.logo_upload_policy)


def get_auth_service(
    session: Session = Depends(get_db_session),
    token_service: AuthTokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(session, token_service)


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :].strip() or None


async def require_admin(
    authorization: Annotated[str | None, Header()] = None,
    token_service: AuthTokenService = Depends(get_token_service),
) -> AdminIdentity:
    """Require a valid admin bearer token.

    Raises:
        TokenRejected: No token supplied or the token does not verify
    """
    token = bearer_token(authorization)
    if token is None:
        raise TokenRejected("No token provided")
    try:
        return token_service.verify(token)
    except TokenRejected:
        logger.info("Rejected admin token")
        raise TokenRejected("Invalid token") from None


async def read_upload(upload: StarletteUploadFile, policy: UploadPolicy) -> IncomingFile:
    """Read one upload, stopping one byte past the policy's size limit.

    Raises:
        InvalidUpload: The file is larger than the policy allows
    """
    filename = upload.filename or ""
    data = await upload.read(policy.max_bytes + 1)
    if len(data) > policy.max_bytes:
        raise InvalidUpload(f"File {filename} is too large")
    return IncomingFile(filename=filename, content_type=upload.content_type, data=data)


async def read_uploads(
    files: list[UploadFile] | None, policy: UploadPolicy
) -> list[IncomingFile]:
    """Read multipart uploads into memory; parts without a file name are skipped.

    Raises:
        InvalidUpload: More files than the policy allows, or one is too large
    """
    named = [upload for upload in files or [] if upload.filename]
    if len(named) > policy.max_count:
        raise InvalidUpload(f"Too many files (maximum {policy.max_count})")
    return [await read_upload(upload, policy) for upload in named]
