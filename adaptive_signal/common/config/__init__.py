from .manager import ConfigManager, default_config
from .models import SignalConfig

__all__ = ["ConfigManager", "default_config", "SignalConfig"]
