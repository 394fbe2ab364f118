from dataclasses import dataclass

from src.storefront.core.services import (
    AuthTokenService,
    BlobStore,
    DbSessionService,
    UploadPolicy,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    blob_store: BlobStore
    token_service: AuthTokenService
    product_upload_policy: UploadPolicy
    logo_upload_policy: UploadPolicy
