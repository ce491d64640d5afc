import pytest
from pathlib import Path
from omegaconf import OmegaConf
from adaptive_signal.common.config import ConfigManager, default_config
from adaptive_signal.common.exceptions import ConfigurationError

CONF_DIR = Path(__file__).resolve().parents[2] / "conf"

def test_load_default_profile(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = ConfigManager(CONF_DIR).load_signal_config()
    assert cfg.rules.base_green_time == 25
    assert cfg.rules.vehicle_cap_green_time == 45
    assert cfg.cycle.yellow_seconds == 3
    assert cfg.persistence.database_url == "sqlite:///./adaptive_signal.db"

def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://signals@db/history")
    cfg = ConfigManager(CONF_DIR).load_signal_config()
    assert cfg.persistence.database_url == "postgresql://signals@db/history"

def test_missing_profile():
    with pytest.raises(FileNotFoundError):
        ConfigManager(CONF_DIR).load_signal_config("does-not-exist")

def test_missing_required_key(tmp_path):
    (tmp_path / "signal").mkdir()
    (tmp_path / "signal" / "broken.yaml").write_text("rules: {}\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_signal_config("broken")

def test_type_mismatch_is_configuration_error(tmp_path):
    (tmp_path / "signal").mkdir()
    (tmp_path / "signal" / "bad.yaml").write_text(
        "rules:\n  peak_hour_bonus: lots\ncycle: {}\npersistence: {}\n"
    )
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_signal_config("bad")

def test_partial_profile_keeps_schema_defaults(tmp_path):
    (tmp_path / "signal").mkdir()
    (tmp_path / "signal" / "short.yaml").write_text(
        "rules:\n  peak_hour_bonus: 7\ncycle: {}\npersistence: {}\n"
    )
    cfg = ConfigManager(tmp_path).load_signal_config("short")
    assert cfg.rules.peak_hour_bonus == 7
    assert cfg.rules.heavy_pedestrian_threshold == 30
    assert cfg.auto_mode.emergency_green_time == 60

def test_cli_overrides_merge_onto_defaults():
    cfg = OmegaConf.merge(default_config(), OmegaConf.from_dotlist(["signal.rules.peak_hour_bonus=9"]))
    assert cfg.signal.rules.peak_hour_bonus == 9
    assert cfg.signal.server.port == 8000
