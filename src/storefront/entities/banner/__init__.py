"""Entity package: Banner."""

from .entity import Banner, BannerCreate, BannerUpdate
from .repository import BannerRepository
from .table import BannerTable

__all__ = ["Banner", "BannerCreate", "BannerRepository", "BannerTable", "BannerUpdate"]
