from .blob_store import BlobStore
from .uploads import IncomingFile, UploadPolicy, validate_uploads

__all__ = ["BlobStore", "IncomingFile", "UploadPolicy", "validate_uploads"]
