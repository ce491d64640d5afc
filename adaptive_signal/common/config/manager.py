from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path

from .models import SignalConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of configuration"""

    required_keys = ['rules', 'cycle', 'persistence']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_signal_config(self, profile: str = "default") -> DictConfig:
        """Loads the signal config profile merged onto the typed schema"""
        config_path = self.config_dir / "signal" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        for key in self.required_keys:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            return OmegaConf.merge(OmegaConf.structured(SignalConfig), cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config {config_path}: {e}") from e

def default_config() -> DictConfig:
    """Root config built from schema defaults only."""
    return OmegaConf.create({"signal": OmegaConf.structured(SignalConfig)})
