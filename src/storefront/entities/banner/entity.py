"""Entity: Banner."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.storefront.entities._base import Entity


class BannerFields(BaseModel):
    """Content shared by every banner shape."""

    title: str | None = Field(default=None, description="Headline")
    title_ar: str | None = Field(default=None, description="Arabic headline")
    subtitle: str | None = None
    subtitle_ar: str | None = None
    button_text: str | None = None
    button_text_ar: str | None = None
    button_link: str | None = None
    button_text_2: str | None = None
    button_text_2_ar: str | None = None
    button_link_2: str | None = None
    image_desktop: str | None = Field(default=None, description="Image path for wide screens")
    image_tablet: str | None = None
    image_mobile: str | None = None
    display_order: int = Field(default=0, ge=0, description="Ascending carousel position")
    enabled: bool = True


class BannerCreate(BannerFields):
    """Payload for creating a banner."""

    model_config = ConfigDict(extra="ignore")


class BannerUpdate(BaseModel):
    """Partial update; only supplied fields change."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    title_ar: str | None = None
    subtitle: str | None = None
    subtitle_ar: str | None = None
    button_text: str | None = None
    button_text_ar: str | None = None
    button_link: str | None = None
    button_text_2: str | None = None
    button_text_2_ar: str | None = None
    button_link_2: str | None = None
    image_desktop: str | None = None
    image_tablet: str | None = None
    image_mobile: str | None = None
    display_order: int | None = Field(default=None, ge=0)
    enabled: bool | None = None


class Banner(Entity, BannerFields):
    """A promotional banner shown on the storefront carousel."""

    created_at: datetime | None = None
    updated_at: datetime | None = None
