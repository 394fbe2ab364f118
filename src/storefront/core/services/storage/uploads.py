"""Upload acceptance rules shared by product images and the store logo."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath

from src.storefront.core.exceptions import InvalidUpload
from src.storefront.runtime.config.config_data import UploadPolicyConfig


@dataclass(frozen=True)
class IncomingFile:
    """An uploaded file read fully into memory."""

    filename: str
    content_type: str | None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        return PurePosixPath(self.filename).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class UploadPolicy:
    allowed_types: frozenset[str]
    max_count: int
    max_bytes: int
    name_prefix: str

    @classmethod
    def from_config(cls, config: UploadPolicyConfig) -> "UploadPolicy":
        return cls(
            allowed_types=frozenset(t.lower() for t in config.allowed_types),
            max_count=config.max_count,
            max_bytes=config.max_bytes,
            name_prefix=config.name_prefix,
        )


def validate_uploads(files: Sequence[IncomingFile], policy: UploadPolicy) -> None:
    """Reject the whole batch if any file breaks the policy.

    Both the file extension and the declared ``image/<subtype>`` content type
    must be in the allow-list.

    Raises:
        InvalidUpload: Too many files, wrong type, empty or oversized file
    """
    if len(files) > policy.max_count:
        raise InvalidUpload(f"Too many files (maximum {policy.max_count})")

    for incoming in files:
        if incoming.extension not in policy.allowed_types:
            raise InvalidUpload("Only image files are allowed!")

        major, _, subtype = (incoming.content_type or "").lower().partition("/")
        # image/svg+xml -> svg
        if major != "image" or subtype.split("+")[0] not in policy.allowed_types:
            raise InvalidUpload("Only image files are allowed!")

        if incoming.size == 0:
            raise InvalidUpload(f"Uploaded file {incoming.filename} is empty")
        if incoming.size > policy.max_bytes:
            raise InvalidUpload(f"File {incoming.filename} is too large")
