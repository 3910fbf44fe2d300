from infonclient.app.config import ClientSettings, get_settings
from infonclient.app.logging import create_logger

__all__ = ["ClientSettings", "create_logger", "get_settings"]
