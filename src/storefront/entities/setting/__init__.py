"""Entity package: Setting."""

from .entity import DEFAULT_SETTINGS, Setting
from .repository import SettingRepository
from .table import SettingTable

__all__ = ["DEFAULT_SETTINGS", "Setting", "SettingRepository", "SettingTable"]
