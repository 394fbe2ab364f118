"""Unit tests for the request-scoped upload readers."""

import io

import pytest
from starlette.datastructures import Headers, UploadFile

from src.storefront.api.http.deps import read_upload, read_uploads
from src.storefront.core.exceptions import InvalidUpload
from src.storefront.core.services import UploadPolicy

POLICY = UploadPolicy(
    allowed_types=frozenset({"png"}), max_count=2, max_bytes=16, name_prefix="product"
)


def _upload(data: bytes, filename: str = "photo.png") -> tuple[UploadFile, io.BytesIO]:
    stream = io.BytesIO(data)
    upload = UploadFile(
        file=stream, filename=filename, headers=Headers({"content-type": "image/png"})
    )
    return upload, stream


async def test_read_upload_within_limit():
    upload, _ = _upload(b"x" * 16)

    incoming = await read_upload(upload, POLICY)

    assert incoming.filename == "photo.png"
    assert incoming.content_type == "image/png"
    assert incoming.size == 16


async def test_oversized_upload_is_not_read_past_the_limit():
    upload, stream = _upload(b"x" * 4096)

    with pytest.raises(InvalidUpload, match="too large"):
        await read_upload(upload, POLICY)

    assert stream.tell() == POLICY.max_bytes + 1


async def test_too_many_uploads_are_rejected_before_reading():
    parts = [_upload(b"x") for _ in range(POLICY.max_count + 1)]

    with pytest.raises(InvalidUpload, match="Too many files"):
        await read_uploads([upload for upload, _ in parts], POLICY)

    assert all(stream.tell() == 0 for _, stream in parts)


async def test_unnamed_parts_are_skipped():
    named, _ = _upload(b"x")
    unnamed, _ = _upload(b"y", filename="")

    incoming = await read_uploads([named, unnamed], POLICY)

    assert [f.filename for f in incoming] == ["photo.png"]
