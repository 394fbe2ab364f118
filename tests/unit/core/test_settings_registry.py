"""Unit tests for the settings registry."""

from pathlib import Path

import pytest

from src.storefront.core.exceptions import InvalidUpload, NotFoundError, ValidationError
from src.storefront.core.services import (
    BlobStore,
    DbManageService,
    DbSessionService,
    SettingsRegistry,
)
from src.storefront.entities.setting import DEFAULT_SETTINGS
from tests.utils import make_image, stored_files


@pytest.mark.usefixtures("seeded_settings")
class TestSettingsRegistry:
    def test_defaults_are_seeded_in_order(self, settings_registry: SettingsRegistry):
        settings = settings_registry.get_all()

        assert list(settings) == list(DEFAULT_SETTINGS)
        assert settings["store_name_en"] == "My Store"
        assert settings["primary_color"] == "#3B82F6"

    def test_seeding_twice_adds_nothing(
        self, settings_registry: SettingsRegistry, database_service: DbSessionService
    ):
        DbManageService(database_service).seed_defaults()

        assert len(settings_registry.get_all()) == len(DEFAULT_SETTINGS)

    async def test_seeding_keeps_changed_values(
        self, settings_registry: SettingsRegistry, database_service: DbSessionService
    ):
        await settings_registry.upsert({"store_name_en": "Corner Shop"})

        DbManageService(database_service).seed_defaults()

        assert settings_registry.get("store_name_en") == "Corner Shop"

    async def test_upsert_updates_and_inserts(self, settings_registry: SettingsRegistry):
        result = await settings_registry.upsert({"primary_color": "#000000", "tiktok_url": "https://t.example"})

        assert result["primary_color"] == "#000000"
        assert result["tiktok_url"] == "https://t.example"
        assert settings_registry.get("tiktok_url") == "https://t.example"
        # Nothing is ever removed
        assert set(DEFAULT_SETTINGS) <= set(result)

    def test_get_unknown_key(self, settings_registry: SettingsRegistry):
        with pytest.raises(NotFoundError, match="Setting not found"):
            settings_registry.get("does_not_exist")

    async def test_blank_key_is_rejected(self, settings_registry: SettingsRegistry):
        with pytest.raises(ValidationError):
            await settings_registry.upsert({"  ": "value"})

    async def test_keys_colliding_after_trimming_are_rejected(
        self, settings_registry: SettingsRegistry
    ):
        with pytest.raises(ValidationError, match="Duplicate setting key"):
            await settings_registry.upsert({"store_name_en": "A", " store_name_en": "B"})

        assert settings_registry.get("store_name_en") == DEFAULT_SETTINGS["store_name_en"]

    async def test_logo_upload_sets_logo_key(
        self, settings_registry: SettingsRegistry, blob_store: BlobStore
    ):
        result = await settings_registry.upsert({}, logo=make_image("brand.svg", "image/svg+xml", b"<svg/>"))

        assert result["logo"].startswith("/uploads/logo-")
        assert result["logo"].endswith(".svg")
        assert stored_files(blob_store) == [Path(result["logo"]).name]

    async def test_new_logo_replaces_old_file(
        self, settings_registry: SettingsRegistry, blob_store: BlobStore
    ):
        first = await settings_registry.upsert({}, logo=make_image("one.png"))
        second = await settings_registry.upsert({"store_name": "x"}, logo=make_image("two.png"))

        assert second["logo"] != first["logo"]
        assert stored_files(blob_store) == [Path(second["logo"]).name]

    async def test_invalid_logo_changes_nothing(
        self, settings_registry: SettingsRegistry, blob_store: BlobStore
    ):
        with pytest.raises(InvalidUpload):
            await settings_registry.upsert({"store_name": "changed"}, logo=make_image("logo.pdf", "application/pdf"))

        assert settings_registry.get("store_name") == DEFAULT_SETTINGS["store_name"]
        assert stored_files(blob_store) == []
