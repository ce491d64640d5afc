import pytest
from omegaconf import OmegaConf
from adaptive_signal.common.config import default_config
from adaptive_signal.common.exceptions import ConfigurationError
from adaptive_signal.simulation.application.builder import SimulationApplicationBuilder
from adaptive_signal.simulation.application.controller import AutoAdaptiveController
from adaptive_signal.simulation.infrastructure.estimation import FrameDifferenceEstimator
from adaptive_signal.simulation.infrastructure.counts import RandomCountsProvider

@pytest.fixture
def cfg(tmp_path):
    cfg = default_config()
    cfg.signal.persistence.database_url = f"sqlite:///{tmp_path / 'history.db'}"
    return cfg

def test_builder_constructs_service(cfg):
    builder = SimulationApplicationBuilder(cfg)
    service = builder.build_service()

    assert builder.evaluator is not None
    assert builder.repository is not None
    assert service.calculate(20, 10, False).adaptive_green_time == 35
    # init_db created the table
    assert service.history() == []

def test_builder_applies_rule_overrides(cfg):
    cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(["signal.rules.peak_hour_bonus=7"]))
    builder = SimulationApplicationBuilder(cfg).build_evaluator()
    assert builder.evaluator.evaluate(0, 0, True).adaptive_green_time == 32

def test_builder_rejects_invalid_rule_table(cfg):
    cfg.signal.rules.heavy_pedestrian_threshold = 10
    with pytest.raises(ConfigurationError):
        SimulationApplicationBuilder(cfg).build_evaluator()

def test_builder_constructs_estimator(cfg):
    builder = SimulationApplicationBuilder(cfg).build_estimator()
    assert isinstance(builder.estimator, FrameDifferenceEstimator)
    assert builder.estimator.vehicle_blob_area == 1500.0

def test_builder_rejects_unknown_estimator(cfg):
    cfg.signal.estimation.type = "random"
    with pytest.raises(ConfigurationError):
        SimulationApplicationBuilder(cfg).build_estimator()

def test_builder_constructs_controller(cfg):
    cfg.signal.auto_mode.seed = 7
    builder = SimulationApplicationBuilder(cfg)
    controller = builder.build_controller()

    assert isinstance(controller, AutoAdaptiveController)
    assert isinstance(controller.counts_provider, RandomCountsProvider)
    assert controller.metrics is builder.metrics_collector
    assert controller.metrics.is_auto_mode
    assert controller.emergency_green_time == 60
