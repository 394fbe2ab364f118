"""Banner database table model."""

from src.storefront.entities._base import TimestampedTable


class BannerTable(TimestampedTable, table=True):
    """Database persistence model for banners."""

    __tablename__ = "banners"

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
    display_order: int = 0
    enabled: bool = True
