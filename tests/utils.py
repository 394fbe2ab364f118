from src.storefront.core.services import IncomingFile

# Smallest valid PNG/GIF payloads; content is never decoded, only stored
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"


def make_image(
    filename: str = "photo.png",
    content_type: str | None = "image/png",
    data: bytes = PNG_BYTES,
) -> IncomingFile:
    return IncomingFile(filename=filename, content_type=content_type, data=data)


def image_part(filename: str = "photo.png", content_type: str = "image/png", field: str = "images"):
    """A multipart file tuple for ``TestClient`` requests."""
    return (field, (filename, PNG_BYTES, content_type))


def stored_files(blob_store) -> list[str]:
    """Names of every file currently in the blob store."""
    return sorted(p.name for p in blob_store.root.iterdir()) if blob_store.root.exists() else []
