"""Entity: Setting."""

from datetime import datetime

from pydantic import Field

from src.storefront.entities._base import Entity

# Seeded on first initialisation; an existing key is never overwritten.
DEFAULT_SETTINGS: dict[str, str] = {
    "store_name": "متجري الإلكتروني",
    "store_name_en": "My Store",
    "logo": "",
    "primary_color": "#3B82F6",
    "secondary_color": "#1E40AF",
    "whatsapp_number": "",
    "phone_number": "",
    "instagram_url": "",
    "store_url": "",
    "banner_text": "عروض خاصة - خصومات تصل إلى 50%",
    "banner_text_en": "Special Offers - Up to 50% Off",
    "banner_enabled": "true",
    "default_language": "ar",
    "holiday_theme": "none",
}


class Setting(Entity):
    """A single storefront setting. Values are always stored as text."""

    key: str = Field(description="Unique setting key")
    value: str | None = Field(default=None, description="Setting value")
    updated_at: datetime | None = None
