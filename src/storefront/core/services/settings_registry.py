"""Storefront settings key-value store, including the uploaded logo."""

from collections.abc import Mapping

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from src.storefront.core.exceptions import NotFoundError, StorageError, ValidationError
from src.storefront.core.services.storage import (
    BlobStore,
    IncomingFile,
    UploadPolicy,
    validate_uploads,
)
from src.storefront.entities.setting import SettingRepository

LOGO_KEY = "logo"


class SettingsRegistry:
    def __init__(self, session: Session, blob_store: BlobStore, logo_policy: UploadPolicy):
        self._session = session
        self._blobs = blob_store
        self._policy = logo_policy
        self._settings = SettingRepository(session)

    def get_all(self) -> dict[str, str | None]:
        return {setting.key: setting.value for setting in self._settings.all()}

    def get(self, key: str) -> str | None:
        setting = self._settings.get(key)
        if setting is None:
            raise NotFoundError("Setting not found")
        return setting.value

    async def upsert(
        self, values: Mapping[str, str | None], logo: IncomingFile | None = None
    ) -> dict[str, str | None]:
        """Write every given key in one transaction. Keys are never deleted.

        A new logo replaces the ``logo`` key. The previous logo file is
        removed best-effort once the new value is committed.

        Raises:
            ValidationError: A key is blank, two keys differ only by surrounding
                whitespace, or the logo breaks the upload policy
            StorageError: The settings could not be written
        """
        updates = _normalise_keys(values)

        previous_logo: str | None = None
        if logo is not None:
            validate_uploads([logo], self._policy)
            previous = await run_in_threadpool(self._settings.get, LOGO_KEY)
            previous_logo = previous.value if previous is not None else None
            updates[LOGO_KEY] = await self._blobs.store(
                logo.data, logo.filename, self._policy.name_prefix
            )

        try:
            await run_in_threadpool(self._write, updates)
        except StorageError:
            if logo is not None:
                await self._blobs.discard([updates[LOGO_KEY]])
            raise

        if previous_logo and previous_logo != updates.get(LOGO_KEY):
            await self._blobs.discard([previous_logo])

        logger.info("Updated settings: {}", ", ".join(sorted(updates)) or "-")
        return await run_in_threadpool(self.get_all)

    def _write(self, updates: Mapping[str, str | None]) -> None:
        try:
            for key, value in updates.items():
                self._settings.upsert(key, None if value is None else str(value))
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to save settings: {}", e)
            raise StorageError("Failed to save settings") from e


def _normalise_keys(values: Mapping[str, str | None]) -> dict[str, str | None]:
    updates: dict[str, str | None] = {}
    for raw_key, value in values.items():
        if raw_key is None:
            continue
        key = raw_key.strip()
        if not key:
            raise ValidationError("Setting keys must not be blank")
        if key in updates:
            raise ValidationError(f"Duplicate setting key: {key}")
        updates[key] = value
    return updates
