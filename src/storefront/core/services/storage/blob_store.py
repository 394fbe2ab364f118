"""Filesystem blob store for uploaded images.

Files are written under a single directory and addressed by their public path
(``/uploads/<name>``), which is what the relational store keeps.
"""

import secrets
import time
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

import aiofiles
import aiofiles.os
from loguru import logger

from src.storefront.core.exceptions import StorageError


class BlobStore:
    def __init__(self, upload_dir: str | Path, public_prefix: str = "/uploads"):
        self._root = Path(upload_dir)
        self._prefix = "/" + public_prefix.strip("/")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def public_prefix(self) -> str:
        return self._prefix

    def ensure_root(self) -> None:
        """Create the upload directory if it does not exist."""
        self._root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_name(original_name: str, prefix: str) -> str:
        """Unique stored name: ``<prefix>-<epoch ms>-<random><ext>``."""
        extension = PurePosixPath(original_name or "").suffix.lower()
        millis = int(time.time() * 1000)
        return f"{prefix}-{millis}-{secrets.randbelow(10**9)}{extension}"

    def public_path(self, name: str) -> str:
        return f"{self._prefix}/{name}"

    def resolve(self, path: str) -> Path | None:
        """Map a public path back to a file under the upload directory.

        Returns None for anything that is not a bare file name under the
        public prefix, so stored paths can never reach outside the root.
        """
        if not path:
            return None
        normalized = "/" + path.lstrip("/")
        if not normalized.startswith(self._prefix + "/"):
            return None
        name = normalized[len(self._prefix) + 1 :]
        if not name or "/" in name or "\\" in name or name in {".", ".."}:
            return None
        return self._root / name

    async def store(self, data: bytes, original_name: str, prefix: str) -> str:
        """Write ``data`` under a freshly generated name.

        Returns:
            The public path of the stored file

        Raises:
            StorageError: The file could not be written
        """
        name = self.generate_name(original_name, prefix)
        target = self._root / name
        created = False
        try:
            self.ensure_root()
            async with aiofiles.open(target, "xb") as f:
                created = True
                await f.write(data)
        except OSError as e:
            logger.error("Failed to write upload {}: {}", target, e)
            if created:
                await self._remove_partial(target)
            raise StorageError("Failed to store uploaded file") from e

        logger.debug("Stored upload {} ({} bytes)", name, len(data))
        return self.public_path(name)

    async def _remove_partial(self, target: Path) -> None:
        try:
            await aiofiles.os.remove(target)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove partial upload {}: {}", target, e)

    async def delete(self, path: str) -> bool:
        """Remove the file behind a public path.

        Returns:
            True if a file was removed, False if it was already gone or the
            path does not point into the store

        Raises:
            StorageError: The file exists but could not be removed
        """
        target = self.resolve(path)
        if target is None:
            logger.warning("Refusing to delete path outside upload store: {}", path)
            return False
        try:
            await aiofiles.os.remove(target)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Failed to delete {path}") from e
        return True

    async def discard(self, paths: Iterable[str | None]) -> None:
        """Best-effort removal; failures are logged and never raised."""
        seen: set[str] = set()
        for path in paths:
            if not path or path in seen:
                continue
            seen.add(path)
            try:
                await self.delete(path)
            except StorageError as e:
                logger.warning("Orphaned upload left behind: {} ({})", path, e.__cause__)
